"""Polynomial variables.

A Var is nothing but an index; it has no behaviour beyond equality and the
index order, which breaks ties in every canonical ordering built on top of it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..config import DEFAULT_CONFIG
from .algebraic import Algebraic


@dataclass(frozen=True, order=True)
class Var(Algebraic):
    """Variable x_{index}."""

    index: int

    def __post_init__(self):
        if not isinstance(self.index, int) or isinstance(self.index, bool):
            raise TypeError(f"Variable index must be an int, got {self.index!r}")
        if self.index < 0:
            raise ValueError(f"Invalid variable index {self.index}")

    def __str__(self) -> str:
        return DEFAULT_CONFIG.variable_name(self.index)


X = Var(0)
Y = Var(1)
Z = Var(2)


def variables(n: int) -> List[Var]:
    """Return the n variables Var(0), ..., Var(n-1)."""
    if n < 0:
        raise ValueError(f"Invalid variable count {n}")
    return [Var(i) for i in range(n)]

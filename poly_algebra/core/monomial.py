"""Sparse monomials.

A Monomial is a product of variable powers stored as a tuple of
(variable_index, exponent) pairs:

  X^2 * Z  ->  Monomial(powers=((0, 2), (2, 1)))

Invariant: indices strictly increase and no exponent is zero, so every
monomial has exactly one representation and the empty tuple is the
multiplicative identity.  Tuple comparison of `powers` is the canonical term
order used when normalizing polynomials.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from ..config import DEFAULT_CONFIG, Config
from .algebraic import Algebraic
from .variables import Var

# (variable_index, exponent)
Power = Tuple[int, int]


@dataclass(frozen=True, order=True)
class Monomial(Algebraic):
    """Product of variable powers; immutable and hashable."""

    powers: Tuple[Power, ...] = ()

    def __post_init__(self):
        powers = tuple(tuple(p) for p in self.powers)
        prev = -1
        for index, exponent in powers:
            if index <= prev:
                raise ValueError(f"Monomial powers not strictly increasing: {powers}")
            if exponent <= 0:
                raise ValueError(f"Invalid exponent {exponent} for variable {index}")
            prev = index
        object.__setattr__(self, "powers", powers)

    # ---- Constructors ----

    @classmethod
    def of(cls, var: Var, exponent: int = 1) -> "Monomial":
        """var^exponent; exponent 0 gives the identity."""
        if exponent < 0:
            raise ValueError(f"Negative exponent {exponent}")
        if exponent == 0:
            return cls()
        return cls(((var.index, exponent),))

    @classmethod
    def from_powers(cls, powers: Iterable[Power]) -> "Monomial":
        """Build from arbitrary pairs: sorts, merges repeats, drops zeros."""
        merged: Dict[int, int] = {}
        for index, exponent in powers:
            if exponent < 0:
                raise ValueError(f"Negative exponent {exponent}")
            merged[index] = merged.get(index, 0) + exponent
        return cls(tuple((i, e) for i, e in sorted(merged.items()) if e != 0))

    # ---- Algebra ----

    def multiply(self, other: "Monomial") -> "Monomial":
        """Merge two sorted power lists, adding exponents of shared variables."""
        a, b = self.powers, other.powers
        l = r = 0
        result: List[Power] = []
        while l < len(a) and r < len(b):
            if a[l][0] < b[r][0]:
                result.append(a[l])
                l += 1
            elif a[l][0] > b[r][0]:
                result.append(b[r])
                r += 1
            else:
                result.append((a[l][0], a[l][1] + b[r][1]))
                l += 1
                r += 1
        result.extend(a[l:])
        result.extend(b[r:])
        return Monomial(tuple(result))

    def pow(self, n: int) -> "Monomial":
        """Scale every exponent by n; n == 0 gives the identity."""
        if n < 0:
            raise ValueError(f"Negative exponent {n}")
        if n == 0:
            return Monomial()
        return Monomial(tuple((index, exponent * n) for index, exponent in self.powers))

    def extract_variable(self, var: Var) -> Tuple["Monomial", int]:
        """Split off `var`: returns (monomial without var, its exponent)."""
        exponent = 0
        residual = []
        for index, power in self.powers:
            if index == var.index:
                exponent += power
            else:
                residual.append((index, power))
        return Monomial(tuple(residual)), exponent

    # ---- Queries ----

    @property
    def is_identity(self) -> bool:
        return not self.powers

    @property
    def degree(self) -> int:
        """Total degree (sum of exponents)."""
        return sum(exponent for _, exponent in self.powers)

    def exponent_of(self, var: Var) -> int:
        for index, exponent in self.powers:
            if index == var.index:
                return exponent
        return 0

    def variables(self) -> List[Var]:
        return [Var(index) for index, _ in self.powers]

    def format(self, config: Config = DEFAULT_CONFIG) -> str:
        if not self.powers:
            return "1"
        parts = []
        for index, exponent in self.powers:
            name = config.variable_name(index)
            parts.append(name if exponent == 1 else f"{name}{config.power_symbol}{exponent}")
        return "*".join(parts)

    def __str__(self) -> str:
        return self.format()

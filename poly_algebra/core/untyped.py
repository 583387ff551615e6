"""Sums of monomials that have not been given a coefficient type yet.

`X + Y` or `(X + Y) * Z` have no coefficients to speak of: every monomial is
implicitly multiplied by one.  An UntypedPolynomial keeps them as a plain
tuple of monomials until a coefficient (or a typed operand) fixes the domain,
at which point typed() turns it into a Polynomial.

Like Polynomial arithmetic, add and multiply never merge equal monomials.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from .algebraic import Algebraic
from .monomial import Monomial
from .polynomial import Polynomial
from .term import Term


@dataclass(frozen=True)
class UntypedPolynomial(Algebraic):
    """Sum of coefficient-free monomials; never empty."""

    monomials: Tuple[Monomial, ...] = (Monomial(),)

    def __post_init__(self):
        monomials = tuple(self.monomials)
        if not monomials:
            raise ValueError("UntypedPolynomial needs at least one monomial")
        object.__setattr__(self, "monomials", monomials)

    @classmethod
    def from_monomials(cls, monomials: Iterable[Monomial]) -> "UntypedPolynomial":
        return cls(tuple(monomials))

    def add(self, other: "UntypedPolynomial") -> "UntypedPolynomial":
        return UntypedPolynomial(self.monomials + other.monomials)

    def multiply(self, other: "UntypedPolynomial") -> "UntypedPolynomial":
        return UntypedPolynomial(tuple(
            a.multiply(b) for a in self.monomials for b in other.monomials
        ))

    def pow(self, n: int) -> "UntypedPolynomial":
        """Repeated multiplication from the identity; pow(0) is the identity."""
        if n < 0:
            raise ValueError(f"Negative exponent {n}")
        result = UntypedPolynomial()
        for _ in range(n):
            result = result.multiply(self)
        return result

    def typed(self, domain):
        """Polynomial over `domain` with every coefficient equal to one."""
        return Polynomial(
            [Term(domain.one, monomial, domain) for monomial in self.monomials],
            domain,
        )

    def __str__(self) -> str:
        return " + ".join(str(m) for m in self.monomials)

"""Lazy sparse polynomials over an arbitrary coefficient domain.

A Polynomial is an ordered list of Terms representing their sum:

  2*X*Y + 3 + X*Y  ->  [Term(2, X*Y), Term(3, 1), Term(1, X*Y)]

Arithmetic is deliberately lazy.  add concatenates term lists and multiply
forms the Cartesian product of terms; neither merges equal monomials nor
drops zero coefficients, so construction stays cheap.  normalize() is the one
step that sorts, collects and cleans, and it only runs when asked for.

A polynomial is therefore in one of two states:

  raw        after construction or arithmetic; may repeat monomials or
             carry zero coefficients.  Fine for further arithmetic and for
             numeric substitution.
  canonical  after normalize() or substitute_polynome(); terms sorted by
             monomial, no repeated monomials, no zero coefficients, and zero
             is exactly [Term(zero, 1)].  Required for == and display.

str() always renders a canonical copy; == compares raw term lists as they
are, so normalize both sides (or use equals()) before comparing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterable, Iterator, List, Optional, TypeVar

from ..config import DEFAULT_CONFIG, Config
from ..errors import DomainMismatchError
from .algebraic import Algebraic
from .domains import CoefficientDomain
from .monomial import Monomial
from .term import Bindings, Term, bind_values, value_identity
from .variables import Var

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PolyStats:
    """Summary statistics of a polynomial, computed on its canonical form."""

    deg_total: int               # max total degree over all terms
    deg_per_var: Dict[Var, int]  # max exponent of each variable that occurs
    num_terms: int               # number of canonical terms


class Polynomial(Algebraic, Generic[T]):
    """Sum of Terms sharing one coefficient domain.

    Attributes:
        terms:  Term list, never empty.
        domain: CoefficientDomain shared by every term.
    """

    __slots__ = ("terms", "domain", "_canonical")

    def __init__(self, terms: Iterable[Term[T]] = (), domain: Optional[CoefficientDomain] = None):
        terms = list(terms)
        if domain is None:
            if not terms:
                raise ValueError("An empty polynomial needs an explicit domain")
            domain = terms[0].domain
        for term in terms:
            if term.domain != domain:
                raise DomainMismatchError(domain, term.domain)
        if not terms:
            terms = [Term(domain.zero, Monomial(), domain)]
        self.terms: List[Term[T]] = terms
        self.domain = domain
        self._canonical = False

    # ---- Constructors ----

    @classmethod
    def zero(cls, domain: CoefficientDomain) -> "Polynomial":
        """Canonical zero: a single zero constant term."""
        p = cls([Term(domain.zero, Monomial(), domain)], domain)
        p._canonical = True
        return p

    @classmethod
    def one(cls, domain: CoefficientDomain) -> "Polynomial":
        """Canonical one: a single unit constant term."""
        p = cls([Term(domain.one, Monomial(), domain)], domain)
        p._canonical = True
        return p

    @classmethod
    def constant(cls, value: T, domain: Optional[CoefficientDomain] = None) -> "Polynomial[T]":
        return cls([Term(value, Monomial(), domain)])

    @classmethod
    def from_term(cls, term: Term[T]) -> "Polynomial[T]":
        return cls([term], term.domain)

    def copy(self) -> "Polynomial[T]":
        p = Polynomial(self.terms, self.domain)
        p._canonical = self._canonical
        return p

    def to_domain(self, domain: CoefficientDomain) -> "Polynomial":
        """Re-express every coefficient in another domain."""
        return Polynomial([Term(t.coeff, t.vars, domain) for t in self.terms], domain)

    # ---- Algebra (lazy) ----

    def _check_domain(self, other: "Polynomial") -> None:
        if other.domain != self.domain:
            raise DomainMismatchError(self.domain, other.domain)

    def add(self, other: "Polynomial[T]") -> "Polynomial[T]":
        """Concatenate term lists; nothing is merged."""
        self._check_domain(other)
        return Polynomial(self.terms + other.terms, self.domain)

    def multiply(self, other: "Polynomial[T]") -> "Polynomial[T]":
        """Every term of self times every term of other, unmerged."""
        self._check_domain(other)
        return Polynomial(
            [a.multiply(b) for a in self.terms for b in other.terms],
            self.domain,
        )

    def negated(self) -> "Polynomial[T]":
        return Polynomial([t.negated() for t in self.terms], self.domain)

    def subtract(self, other: "Polynomial[T]") -> "Polynomial[T]":
        return self.add(other.negated())

    def pow(self, n: int) -> "Polynomial[T]":
        """Repeated multiplication starting from one; pow(0) is one."""
        if n < 0:
            raise ValueError(f"Negative exponent {n}")
        result = Polynomial.one(self.domain)
        for _ in range(n):
            result = result.multiply(self)
        return result

    # ---- Canonical form ----

    @property
    def is_canonical(self) -> bool:
        return self._canonical

    def _all_coefficients_zero(self) -> bool:
        return all(self.domain.is_zero(t.coeff) for t in self.terms)

    def is_zero(self) -> bool:
        """True iff the polynomial is mathematically zero, raw or not.

        Every raw coefficient being zero answers immediately.  Otherwise a
        raw polynomial may still cancel (X - X), so a canonical copy decides.
        """
        if self._all_coefficients_zero():
            return True
        if self._canonical:
            return False
        return self.normalized()._all_coefficients_zero()

    def _set_zero(self) -> None:
        self.terms = [Term(self.domain.zero, Monomial(), self.domain)]
        self._canonical = True

    def normalize(self) -> "Polynomial[T]":
        """Sort by monomial, merge equal monomials, drop zeros (in place)."""
        n_raw = len(self.terms)
        if self._all_coefficients_zero():
            self._set_zero()
            logger.debug("normalize: %d raw terms -> zero", n_raw)
            return self

        merged: List[Term[T]] = []
        for term in sorted(self.terms, key=lambda t: t.vars):
            if merged and merged[-1].vars == term.vars:
                last = merged[-1]
                merged[-1] = Term(last.coeff + term.coeff, last.vars, self.domain)
            else:
                merged.append(term)

        self.terms = [t for t in merged if not t.is_zero()]
        if not self.terms:
            self._set_zero()
        self._canonical = True
        logger.debug("normalize: %d raw terms -> %d", n_raw, len(self.terms))
        return self

    def normalized(self) -> "Polynomial[T]":
        """Canonical copy; self is left untouched."""
        return self.copy().normalize()

    def equals(self, other: "Polynomial[T]") -> bool:
        """Mathematical equality: compare canonical forms."""
        return self.domain == other.domain and self.normalized().terms == other.normalized().terms

    # ---- Substitution ----

    def substitute(self, bindings: Bindings):
        """Evaluate at concrete values.

        Args:
            bindings: (Var, value) pairs, or a mapping Var -> value.

        Returns:
            sum(coeff * prod(value ** exponent)) over all terms; the type is
            whatever coefficient * value produces.

        Raises:
            RepeatingVariableError: a variable is bound twice (checked first).
            MissingVariableError: a variable used by some term is unbound.
        """
        values = bind_values(bindings)
        one = value_identity(values, self.domain)
        acc = self.domain.zero * one
        for term in self.terms:
            acc = acc + term.evaluate(values, one)
        return acc

    def substitute_polynome(self, var: Var, replacement) -> None:
        """Replace `var` by `replacement` everywhere, in place.

        The replacement may be anything the construction surface accepts
        (a Polynomial, Term, Var, Monomial, UntypedPolynomial or scalar); it
        is coerced into this polynomial's domain.  The result is canonical.
        """
        from .arithmetic import as_polynomial

        replacement = as_polynomial(replacement, self.domain)
        result = Polynomial.zero(self.domain)
        for term in self.terms:
            residual, exponent = term.extract_variable(var)
            if exponent == 0:
                contribution = Polynomial.from_term(term)
            else:
                contribution = Polynomial.from_term(residual).multiply(replacement.pow(exponent))
            result = result.add(contribution)
        logger.debug(
            "substitute_polynome: %s -> %d replacement terms, %d raw result terms",
            var, len(replacement.terms), len(result.terms),
        )
        self.terms = result.normalize().terms
        self._canonical = True

    def composed(self, var: Var, replacement) -> "Polynomial[T]":
        """Non-mutating substitute_polynome."""
        p = self.copy()
        p.substitute_polynome(var, replacement)
        return p

    # ---- Queries ----

    def degree(self) -> int:
        """Total degree of the canonical form (0 for constants and zero)."""
        return max(t.vars.degree for t in self.normalized().terms)

    def variables(self) -> List[Var]:
        """Sorted variables with a nonzero exponent in some canonical term."""
        indices = {index for t in self.normalized().terms for index, _ in t.vars.powers}
        return [Var(i) for i in sorted(indices)]

    def stats(self) -> PolyStats:
        canonical = self.normalized()
        deg_per_var: Dict[Var, int] = {}
        for term in canonical.terms:
            for index, exponent in term.vars.powers:
                var = Var(index)
                deg_per_var[var] = max(deg_per_var.get(var, 0), exponent)
        num_terms = 0 if canonical.is_zero() else len(canonical.terms)
        return PolyStats(
            deg_total=max(t.vars.degree for t in canonical.terms),
            deg_per_var=deg_per_var,
            num_terms=num_terms,
        )

    # ---- Container / comparison / display ----

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[Term[T]]:
        return iter(self.terms)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.domain == other.domain and self.terms == other.terms

    __hash__ = None

    def format(self, config: Config = DEFAULT_CONFIG) -> str:
        return " + ".join(t.format(config) for t in self.normalized().terms)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        state = "canonical" if self._canonical else "raw"
        return f"Polynomial({self.terms!r}, domain={self.domain.name}, {state})"

"""Construction surface: free functions behind every operator overload.

Operand kinds, from least to most structured:

  untyped   Var, Monomial, UntypedPolynomial   (no coefficients yet)
  typed     scalar, Term, Polynomial           (coefficients fix a domain)

Result types:

  untyped * untyped   Monomial, or UntypedPolynomial if either operand is one
  untyped + untyped   UntypedPolynomial
  typed involved      Term for products of Var/Monomial/Term/scalar,
                      Polynomial otherwise
  a - b, -a           always Polynomial; purely untyped operands use the
                      configured default domain

A bare scalar takes the domain of the typed operand it meets (2 * Term over
QQ converts 2 to Fraction(2)).  Two typed operands from different domains
raise DomainMismatchError.
"""

from __future__ import annotations

import numbers
from typing import Optional

from ..config import DEFAULT_CONFIG, Config
from ..errors import DomainMismatchError
from .algebraic import Algebraic
from .domains import CoefficientDomain, domain_for
from .monomial import Monomial
from .polynomial import Polynomial
from .term import Term
from .untyped import UntypedPolynomial
from .variables import Var

_UNTYPED = (Var, Monomial, UntypedPolynomial)
_SUMS = (UntypedPolynomial, Polynomial)


def is_operand(value) -> bool:
    """True for algebraic values and scalars with a known domain."""
    return isinstance(value, Algebraic) or domain_for(value) is not None


def _domain_of(value) -> Optional[CoefficientDomain]:
    if isinstance(value, (Term, Polynomial)):
        return value.domain
    return None


def _common_domain(a, b, config: Config = DEFAULT_CONFIG) -> CoefficientDomain:
    da, db = _domain_of(a), _domain_of(b)
    if da is not None and db is not None:
        if da != db:
            raise DomainMismatchError(da, db)
        return da
    if da is not None:
        return da
    if db is not None:
        return db
    for value in (a, b):
        if not isinstance(value, Algebraic):
            return domain_for(value)
    return config.domain


# ---- Coercions ----

def as_monomial(value) -> Monomial:
    if isinstance(value, Monomial):
        return value
    if isinstance(value, Var):
        return Monomial.of(value)
    raise TypeError(f"{value!r} is not a monomial")


def _as_untyped(value) -> UntypedPolynomial:
    if isinstance(value, UntypedPolynomial):
        return value
    return UntypedPolynomial((as_monomial(value),))


def as_term(value, domain: CoefficientDomain) -> Term:
    """Coerce a Var, Monomial, Term or scalar into a Term over `domain`."""
    if isinstance(value, Term):
        if value.domain != domain:
            raise DomainMismatchError(domain, value.domain)
        return value
    if isinstance(value, _UNTYPED):
        return Term(domain.one, as_monomial(value), domain)
    if isinstance(value, Algebraic):
        raise TypeError(f"{type(value).__name__} cannot be used as a single term")
    return Term(value, Monomial(), domain)


def as_polynomial(value, domain: Optional[CoefficientDomain] = None,
                  config: Config = DEFAULT_CONFIG) -> Polynomial:
    """Coerce any operand into a Polynomial.

    With no domain, a typed value keeps its own, a scalar uses its inferred
    domain and an untyped value falls back to config.default_domain.
    """
    if domain is None:
        domain = _domain_of(value) or domain_for(value) or config.domain
    if isinstance(value, Polynomial):
        if value.domain != domain:
            raise DomainMismatchError(domain, value.domain)
        return value
    if isinstance(value, UntypedPolynomial):
        return value.typed(domain)
    return Polynomial.from_term(as_term(value, domain))


# ---- Operations ----

def add(a, b):
    """a + b, lazily concatenated."""
    if isinstance(a, _UNTYPED) and isinstance(b, _UNTYPED):
        return _as_untyped(a).add(_as_untyped(b))
    domain = _common_domain(a, b)
    return as_polynomial(a, domain).add(as_polynomial(b, domain))


def multiply(a, b):
    """a * b; Cartesian product of terms when either side is a sum."""
    if isinstance(a, _UNTYPED) and isinstance(b, _UNTYPED):
        if isinstance(a, UntypedPolynomial) or isinstance(b, UntypedPolynomial):
            return _as_untyped(a).multiply(_as_untyped(b))
        return as_monomial(a).multiply(as_monomial(b))
    domain = _common_domain(a, b)
    if isinstance(a, _SUMS) or isinstance(b, _SUMS):
        return as_polynomial(a, domain).multiply(as_polynomial(b, domain))
    return as_term(a, domain).multiply(as_term(b, domain))


def negate(a) -> Polynomial:
    """-a; needs a coefficient domain with negation."""
    return as_polynomial(a).negated()


def subtract(a, b) -> Polynomial:
    """a + (-b)."""
    domain = _common_domain(a, b)
    return as_polynomial(a, domain).subtract(as_polynomial(b, domain))


def power(value, n):
    """value ** n for a non-negative integer n; n == 0 gives the identity."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"Exponent must be a non-negative integer, got {n!r}")
    n = int(n)
    if n < 0:
        raise ValueError(f"Negative exponent {n}")
    if isinstance(value, Var):
        return Monomial.of(value, n)
    if isinstance(value, (Monomial, UntypedPolynomial, Term, Polynomial)):
        return value.pow(n)
    domain = domain_for(value)
    if domain is None:
        raise TypeError(f"{value!r} is not a usable coefficient")
    return Term(value, Monomial(), domain).pow(n)

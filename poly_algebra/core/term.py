"""Typed terms: one coefficient times one monomial.

    coeff(2) * X * X * Y   ->  Term(coeff=2, vars=X^2*Y)

The coefficient's CoefficientDomain travels with the term so that identities
(zero for is_zero, one for pow) are available without knowing the Python type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterable, Mapping, Optional, Tuple, TypeVar, Union

from ..config import DEFAULT_CONFIG, Config
from ..errors import DomainMismatchError, MissingVariableError, RepeatingVariableError
from .algebraic import Algebraic
from .domains import CoefficientDomain, domain_for
from .monomial import Monomial
from .variables import Var

T = TypeVar("T")

Bindings = Union[Iterable[Tuple[Var, Any]], Mapping[Var, Any]]


def bind_values(bindings: Bindings) -> Dict[int, Any]:
    """Map variable index -> value; the first repeated variable is an error."""
    if isinstance(bindings, Mapping):
        bindings = bindings.items()
    values: Dict[int, Any] = {}
    for var, value in bindings:
        if var.index in values:
            raise RepeatingVariableError(var)
        values[var.index] = value
    return values


def _power(value, exponent: int, one):
    acc = one
    for _ in range(exponent):
        acc = acc * value
    return acc


@dataclass(frozen=True)
class Term(Algebraic, Generic[T]):
    """coeff * vars.

    Attributes:
        coeff:  Coefficient value.
        vars:   Monomial part (identity for constants); a bare Var is
                accepted and wrapped.
        domain: Coefficient domain; inferred from coeff when omitted.  An
                explicit domain converts coeff into it.  Part of equality:
                Term(1, m) over ZZ differs from Term(1.0, m) over RR.
    """

    coeff: T
    vars: Monomial = Monomial()
    domain: Optional[CoefficientDomain] = field(default=None, repr=False)

    def __post_init__(self):
        if isinstance(self.vars, Var):
            object.__setattr__(self, "vars", Monomial.of(self.vars))
        elif not isinstance(self.vars, Monomial):
            raise TypeError(f"Term variables must be a Monomial or Var, got {self.vars!r}")
        if self.domain is None:
            domain = domain_for(self.coeff)
            if domain is None:
                raise TypeError(f"{self.coeff!r} is not a usable coefficient")
            object.__setattr__(self, "domain", domain)
        else:
            object.__setattr__(self, "coeff", self.domain.convert(self.coeff))

    def _check_domain(self, other: "Term") -> None:
        if other.domain != self.domain:
            raise DomainMismatchError(self.domain, other.domain)

    # ---- Algebra ----

    def multiply(self, other: "Term[T]") -> "Term[T]":
        self._check_domain(other)
        return Term(self.coeff * other.coeff, self.vars.multiply(other.vars), self.domain)

    def pow(self, n: int) -> "Term[T]":
        if n < 0:
            raise ValueError(f"Negative exponent {n}")
        return Term(_power(self.coeff, n, self.domain.one), self.vars.pow(n), self.domain)

    def negated(self) -> "Term[T]":
        if not self.domain.has_negation:
            raise TypeError(f"Coefficients in {self.domain.name} cannot be negated")
        return Term(-self.coeff, self.vars, self.domain)

    def extract_variable(self, var: Var) -> Tuple["Term[T]", int]:
        """Return (this term without `var`, the exponent `var` had)."""
        residual, exponent = self.vars.extract_variable(var)
        return Term(self.coeff, residual, self.domain), exponent

    def is_zero(self) -> bool:
        return self.domain.is_zero(self.coeff)

    # ---- Evaluation ----

    def evaluate(self, values: Dict[int, Any], one):
        """coeff * prod(value_i ** e_i) for already-bound values."""
        acc = one
        for index, exponent in self.vars.powers:
            if index not in values:
                raise MissingVariableError(Var(index))
            value = values[index]
            for _ in range(exponent):
                acc = acc * value
        return self.coeff * acc

    def substitute(self, bindings: Bindings):
        values = bind_values(bindings)
        return self.evaluate(values, value_identity(values, self.domain))

    # ---- Display ----

    def format(self, config: Config = DEFAULT_CONFIG) -> str:
        c = str(self.coeff)
        if " " in c:
            c = f"({c})"
        if self.vars.is_identity:
            return c
        if self.coeff == self.domain.one:
            return self.vars.format(config)
        return f"{c}*{self.vars.format(config)}"

    def __str__(self) -> str:
        return self.format()


def value_identity(values: Dict[int, Any], domain: CoefficientDomain):
    """Multiplicative identity of the bound values' type.

    Falls back to the coefficient domain's one when nothing is bound or the
    value type is not recognised.
    """
    for value in values.values():
        value_domain = domain_for(value)
        if value_domain is not None:
            return value_domain.one
        break
    return domain.one


def coeff(value: T, domain: Optional[CoefficientDomain] = None) -> Term[T]:
    """Wrap a scalar as a constant term, fixing its coefficient domain."""
    return Term(value, Monomial(), domain)

"""Coefficient domains.

A coefficient type is usable in a polynomial when it forms a commutative
semiring: an additive identity, a multiplicative identity, commutative + and
*, and value semantics.  Negation is a separate, optional capability; types
without it still support every strictly additive operation.

Python values do not carry their own zero and one, so each polynomial holds a
CoefficientDomain that supplies them:

  INTEGERS     "ZZ"     int
  RATIONALS    "QQ"     fractions.Fraction
  REALS        "RR"     float (no special numerical handling)
  SYMBOLIC     "EX"     sympy expressions
  FiniteField  "GF(p)"  ModInt, integers mod a prime p

Any other type works when it exposes zero() and one() classmethods, which is
how domain_for() recognises custom semirings.
"""

from __future__ import annotations

import functools
import numbers
import re
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Callable, Optional, Protocol, runtime_checkable

import sympy

from .algebraic import Algebraic


@runtime_checkable
class Semiring(Protocol):
    """Commutative + and * (identities come from the CoefficientDomain)."""

    def __add__(self, other): ...

    def __mul__(self, other): ...


@runtime_checkable
class Ring(Semiring, Protocol):
    """Semiring with an additive inverse."""

    def __neg__(self): ...


@dataclass(frozen=True)
class CoefficientDomain:
    """Identities and conversion for one coefficient type.

    Attributes:
        name:    Short domain name ("ZZ", "QQ", "GF(5)", ...).
        zero:    Additive identity.
        one:     Multiplicative identity.
        convert: Coerces a foreign scalar into this domain; raises TypeError
                 when the value has no representation here.
    """

    name: str
    zero: Any
    one: Any
    convert: Callable[[Any], Any] = field(compare=False, repr=False)

    def is_zero(self, value) -> bool:
        return value == self.zero

    @property
    def has_negation(self) -> bool:
        return isinstance(self.zero, Ring)

    def __str__(self) -> str:
        return self.name


# ---- Modular integers ----

@dataclass(frozen=True, eq=False)
class ModInt:
    """Integer modulo `modulus`, always stored reduced into [0, modulus)."""

    value: int
    modulus: int

    def __post_init__(self):
        if self.modulus < 2:
            raise ValueError(f"Invalid modulus {self.modulus}")
        object.__setattr__(self, "value", int(self.value) % self.modulus)

    def _coerce(self, other) -> Optional[int]:
        if isinstance(other, ModInt):
            if other.modulus != self.modulus:
                raise ValueError(
                    f"Cannot mix moduli {self.modulus} and {other.modulus}"
                )
            return other.value
        if isinstance(other, numbers.Integral):
            return int(other)
        return None

    def __add__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return ModInt(self.value + v, self.modulus)

    __radd__ = __add__

    def __mul__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return ModInt(self.value * v, self.modulus)

    __rmul__ = __mul__

    def __sub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return ModInt(self.value - v, self.modulus)

    def __rsub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return ModInt(v - self.value, self.modulus)

    def __neg__(self):
        return ModInt(-self.value, self.modulus)

    def __pow__(self, exponent: int):
        if not isinstance(exponent, int) or exponent < 0:
            return NotImplemented
        return ModInt(pow(self.value, exponent, self.modulus), self.modulus)

    def __eq__(self, other) -> bool:
        if isinstance(other, ModInt):
            return self.modulus == other.modulus and self.value == other.value
        if isinstance(other, numbers.Integral):
            return self.value == int(other) % self.modulus
        return NotImplemented

    def __hash__(self):
        return hash((self.value, self.modulus))

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


# ---- Conversions ----

def _to_integer(value) -> int:
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, Fraction) and value.denominator == 1:
        return value.numerator
    raise TypeError(f"{value!r} is not an integer")


def _to_rational(value) -> Fraction:
    if isinstance(value, sympy.Rational):
        return Fraction(int(value.p), int(value.q))
    if isinstance(value, numbers.Rational):
        return Fraction(value)
    raise TypeError(f"{value!r} is not a rational number")


def _to_real(value) -> float:
    if isinstance(value, numbers.Real):
        return float(value)
    raise TypeError(f"{value!r} is not a real number")


def _to_symbolic(value) -> sympy.Expr:
    # sympify would happily parse strings; text input is not accepted.
    if isinstance(value, str):
        raise TypeError("String coefficients are not accepted")
    try:
        return sympy.sympify(value, strict=True)
    except sympy.SympifyError as exc:
        raise TypeError(f"{value!r} has no sympy representation") from exc


INTEGERS = CoefficientDomain("ZZ", 0, 1, _to_integer)
RATIONALS = CoefficientDomain("QQ", Fraction(0), Fraction(1), _to_rational)
REALS = CoefficientDomain("RR", 0.0, 1.0, _to_real)
SYMBOLIC = CoefficientDomain("EX", sympy.Integer(0), sympy.Integer(1), _to_symbolic)


@functools.lru_cache(maxsize=None)
def FiniteField(modulus: int) -> CoefficientDomain:
    """Domain of integers modulo a prime; one shared instance per modulus."""
    if not sympy.isprime(modulus):
        raise ValueError(f"Finite field modulus must be prime, got {modulus}")

    def convert(value) -> ModInt:
        if isinstance(value, ModInt):
            if value.modulus != modulus:
                raise TypeError(f"{value!r} belongs to GF({value.modulus})")
            return value
        return ModInt(_to_integer(value), modulus)

    return CoefficientDomain(
        f"GF({modulus})", ModInt(0, modulus), ModInt(1, modulus), convert
    )


@functools.lru_cache(maxsize=None)
def _custom_domain(cls: type) -> CoefficientDomain:
    def convert(value):
        if isinstance(value, cls):
            return value
        raise TypeError(f"{value!r} is not a {cls.__name__}")

    return CoefficientDomain(cls.__name__, cls.zero(), cls.one(), convert)


_BUILTIN = {d.name: d for d in (INTEGERS, RATIONALS, REALS, SYMBOLIC)}
_GF_NAME = re.compile(r"^GF\((\d+)\)$")


def domain_by_name(name: str) -> CoefficientDomain:
    """Look up "ZZ", "QQ", "RR", "EX" or "GF(p)"."""
    if name in _BUILTIN:
        return _BUILTIN[name]
    match = _GF_NAME.match(name)
    if match:
        return FiniteField(int(match.group(1)))
    raise ValueError(f"Unknown coefficient domain {name!r}")


def domain_for(value) -> Optional[CoefficientDomain]:
    """Infer the domain of a scalar, or None if it is not a coefficient."""
    if isinstance(value, ModInt):
        return FiniteField(value.modulus)
    if isinstance(value, sympy.Basic):
        return SYMBOLIC
    if isinstance(value, numbers.Integral):
        return INTEGERS
    if isinstance(value, numbers.Rational):
        return RATIONALS
    if isinstance(value, numbers.Real):
        return REALS
    if isinstance(value, Algebraic):
        return None
    cls = type(value)
    if callable(getattr(cls, "zero", None)) and callable(getattr(cls, "one", None)):
        if isinstance(value, Semiring):
            return _custom_domain(cls)
    return None

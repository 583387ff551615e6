"""Conversion between Polynomial and SymPy expressions.

Useful for display, for cross-checking results against SymPy's own expand(),
and for building polynomials from expressions that already live in SymPy.
Only SymPy objects are accepted on the way in: strings are rejected rather
than parsed.
"""

from __future__ import annotations

import logging
from fractions import Fraction
from typing import Dict, Optional, Sequence

import sympy

from ..config import DEFAULT_CONFIG, Config
from .domains import INTEGERS, RATIONALS, SYMBOLIC, CoefficientDomain, ModInt
from .monomial import Monomial
from .polynomial import Polynomial
from .term import Term
from .variables import Var

logger = logging.getLogger(__name__)


def _coeff_to_sympy(c) -> sympy.Expr:
    if isinstance(c, ModInt):
        return sympy.Integer(c.value)
    if isinstance(c, Fraction):
        return sympy.Rational(c.numerator, c.denominator)
    return sympy.sympify(c, strict=True)


def _coeff_from_sympy(c: sympy.Expr):
    if c.is_Integer:
        return int(c)
    if c.is_Rational:
        return Fraction(int(c.p), int(c.q))
    return c


def to_sympy(
    poly: Polynomial,
    symbols: Optional[Dict[Var, sympy.Symbol]] = None,
    config: Config = DEFAULT_CONFIG,
) -> sympy.Expr:
    """Build the SymPy expression of poly's canonical form.

    Variables without an entry in `symbols` become sympy.Symbol named after
    config.variable_name.
    """
    symbols = dict(symbols or {})
    terms = []
    for term in poly.normalized().terms:
        expr = _coeff_to_sympy(term.coeff)
        for index, exponent in term.vars.powers:
            var = Var(index)
            if var not in symbols:
                symbols[var] = sympy.Symbol(config.variable_name(index))
            expr *= symbols[var] ** exponent
        terms.append(expr)
    if not terms:
        return sympy.Integer(0)
    return sympy.Add(*terms)


def from_sympy(
    expr: sympy.Expr,
    symbols: Sequence[sympy.Symbol],
    variables: Optional[Sequence[Var]] = None,
    domain: Optional[CoefficientDomain] = None,
) -> Polynomial:
    """Expand a SymPy expression into a canonical Polynomial.

    Args:
        expr:      SymPy expression, polynomial in `symbols`.  Any other
                   symbols end up inside the coefficients.
        symbols:   SymPy symbols to treat as polynomial variables.
        variables: Var for each symbol; defaults to Var(0), Var(1), ...
        domain:    Coefficient domain; inferred as ZZ, QQ or EX when omitted.
    """
    if not isinstance(expr, sympy.Basic):
        raise TypeError(f"Expected a SymPy expression, got {type(expr).__name__}")
    if variables is None:
        variables = [Var(i) for i in range(len(symbols))]
    if len(variables) != len(symbols):
        raise ValueError("symbols and variables must have the same length")

    expanded = sympy.expand(expr)
    if symbols:
        pairs = sympy.Poly(expanded, *symbols).terms()
    elif expanded.is_number:
        pairs = [((), expanded)]
    else:
        raise ValueError(f"{expr} is not constant and no symbols were given")

    coeffs = [_coeff_from_sympy(c) for _, c in pairs]
    if domain is None:
        if all(isinstance(c, int) for c in coeffs):
            domain = INTEGERS
        elif all(isinstance(c, (int, Fraction)) for c in coeffs):
            domain = RATIONALS
        else:
            domain = SYMBOLIC

    indices = [v.index for v in variables]
    terms = [
        Term(c, Monomial.from_powers(zip(indices, monom)), domain)
        for (monom, _), c in zip(pairs, coeffs)
    ]
    logger.debug("from_sympy: %d sympy terms over %s", len(terms), domain.name)
    return Polynomial(terms, domain).normalize()

"""Multivariate symbolic polynomials over abstract coefficient domains.

    from poly_algebra import X, Y, Z, coeff

    p = coeff(2) * X + Y
    p.substitute([(X, 3), (Y, 4)])          # 10
    p.substitute_polynome(Y, X + Z)         # p is now 3*X + Z
"""

import logging

from .config import Config, DEFAULT_CONFIG, configure_logging
from .errors import SubstitutionError, RepeatingVariableError, MissingVariableError, DomainMismatchError
from .core import (
    Var, X, Y, Z, variables,
    CoefficientDomain, Semiring, Ring, ModInt, FiniteField,
    INTEGERS, RATIONALS, REALS, SYMBOLIC, domain_for, domain_by_name,
    Monomial, Term, coeff, Polynomial, PolyStats, UntypedPolynomial,
    add, multiply, subtract, negate, power, as_monomial, as_term, as_polynomial,
    EvalPoint, sample_eval_points, eval_poly_points, probably_equal,
    monomial_basis, to_coefficient_vector, from_coefficient_vector,
    to_sympy, from_sympy,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .variables import Var, X, Y, Z, variables
from .domains import (
    CoefficientDomain, Semiring, Ring, ModInt, FiniteField,
    INTEGERS, RATIONALS, REALS, SYMBOLIC, domain_for, domain_by_name,
)
from .monomial import Monomial
from .term import Term, coeff
from .polynomial import Polynomial, PolyStats
from .untyped import UntypedPolynomial
from .arithmetic import add, multiply, subtract, negate, power, as_monomial, as_term, as_polynomial
from .fingerprints import EvalPoint, sample_eval_points, eval_poly_points, probably_equal
from .dense import monomial_basis, to_coefficient_vector, from_coefficient_vector
from .sympy_bridge import to_sympy, from_sympy

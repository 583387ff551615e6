"""Dense coefficient vectors over a fixed monomial basis.

For a fixed variable list and degree bound every polynomial maps to a
vector with one entry per monomial of total degree <= max_degree, in graded
lexicographic order.  The vectors are numpy object arrays so coefficients
keep their exact type (int, Fraction, ModInt, sympy).
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .domains import CoefficientDomain
from .monomial import Monomial
from .polynomial import Polynomial
from .term import Term
from .variables import Var


def _exponent_tuples(n_vars: int, max_degree: int) -> List[Tuple[int, ...]]:
    if n_vars == 0:
        return [()]

    tuples: List[Tuple[int, ...]] = []

    def _recurse(remaining_vars: int, remaining_degree: int, current: Tuple[int, ...]):
        if remaining_vars == 0:
            tuples.append(current)
            return
        for d in range(remaining_degree + 1):
            _recurse(remaining_vars - 1, remaining_degree - d, current + (d,))

    _recurse(n_vars, max_degree, ())
    # First by total degree, then lexicographically
    tuples.sort(key=lambda e: (sum(e), e))
    return tuples


def monomial_basis(variables: Sequence[Var], max_degree: int) -> List[Monomial]:
    """All monomials in `variables` of total degree <= max_degree."""
    if max_degree < 0:
        raise ValueError(f"Invalid max_degree {max_degree}")
    indices = [v.index for v in variables]
    if len(set(indices)) != len(indices):
        raise ValueError("Variables must be distinct")
    return [
        Monomial.from_powers(zip(indices, exps))
        for exps in _exponent_tuples(len(indices), max_degree)
    ]


def to_coefficient_vector(poly: Polynomial, variables: Sequence[Var], max_degree: int) -> np.ndarray:
    """Coefficients of poly's canonical form, one per basis monomial."""
    basis = monomial_basis(variables, max_degree)
    position: Dict[Monomial, int] = {m: i for i, m in enumerate(basis)}
    vector = np.full(len(basis), poly.domain.zero, dtype=object)
    for term in poly.normalized().terms:
        if term.is_zero():
            continue
        i = position.get(term.vars)
        if i is None:
            raise ValueError(
                f"Term {term} lies outside the basis of degree {max_degree} "
                f"in {[str(v) for v in variables]}"
            )
        vector[i] = term.coeff
    return vector


def from_coefficient_vector(
    vector: Sequence,
    variables: Sequence[Var],
    max_degree: int,
    domain: Optional[CoefficientDomain] = None,
) -> Polynomial:
    """Inverse of to_coefficient_vector; returns a canonical polynomial."""
    basis = monomial_basis(variables, max_degree)
    if len(vector) != len(basis):
        raise ValueError(f"Expected {len(basis)} coefficients, got {len(vector)}")
    terms = [Term(c, m, domain) for c, m in zip(vector, basis)]
    if domain is None:
        if not terms:
            raise ValueError("Empty vector needs an explicit domain")
        domain = terms[0].domain
    return Polynomial(terms, domain).normalize()

"""Polynomial fingerprinting via Schwartz-Zippel evaluation.

Two distinct polynomials of low degree rarely agree on many random points
(Schwartz-Zippel lemma).  Evaluating both at m shared random integer points
is therefore a cheap probabilistic identity check that works on raw,
unnormalized polynomials.

  sample_eval_points  - sample m random bindings for a set of variables
  eval_poly_points    - evaluate a polynomial at every sampled binding
  probably_equal      - compare two polynomials by their eval vectors

Evaluation goes through Polynomial.substitute, so values are exact in the
coefficient domain (no rounding for ZZ, QQ or GF(p)).
"""

from __future__ import annotations

import logging
import random
from typing import Any, List, Optional, Sequence, Set, Tuple

from ..config import DEFAULT_CONFIG, Config
from .polynomial import Polynomial
from .variables import Var

logger = logging.getLogger(__name__)

# One evaluation point: a binding list accepted by Polynomial.substitute.
EvalPoint = List[Tuple[Var, int]]


def sample_eval_points(
    rng: random.Random,
    variables: Sequence[Var],
    m: int,
    low: int = -3,
    high: int = 3,
) -> List[EvalPoint]:
    """Sample m random integer bindings for `variables`.

    Args:
        rng:       Random source (seed it for reproducibility).
        variables: Variables to bind at every point.
        m:         Number of points.
        low:       Minimum coordinate value (inclusive).
        high:      Maximum coordinate value (inclusive).
    """
    points: List[EvalPoint] = []
    for _ in range(m):
        points.append([(var, rng.randint(low, high)) for var in variables])
    logger.debug("Sampled %d points over %d variables in [%d, %d]", m, len(variables), low, high)
    return points


def eval_poly_points(poly: Polynomial, points: Sequence[EvalPoint]) -> List[Any]:
    """The "eval vector" of poly: one substituted value per point."""
    return [poly.substitute(point) for point in points]


def _raw_variables(poly: Polynomial) -> Set[Var]:
    return {Var(index) for term in poly.terms for index, _ in term.vars.powers}


def probably_equal(
    p: Polynomial,
    q: Polynomial,
    config: Config = DEFAULT_CONFIG,
    rng: Optional[random.Random] = None,
) -> bool:
    """Probabilistic identity test: do p and q agree on config.m random points?

    A False answer is certain.  True is wrong with probability at most
    (d / s) ** m, where d is the degree of p - q and s the number of values
    in [eval_low, eval_high].
    """
    if rng is None:
        rng = random.Random(config.seed)
    # Raw terms, not canonical ones: substitute reads every raw term, so a
    # variable that only cancels after normalizing still needs a binding.
    variables = sorted(_raw_variables(p) | _raw_variables(q))
    points = sample_eval_points(rng, variables, config.m, config.eval_low, config.eval_high)
    for i, point in enumerate(points):
        if p.substitute(point) != q.substitute(point):
            logger.debug("probably_equal: mismatch at point %d of %d", i, len(points))
            return False
    return True

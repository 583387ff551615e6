"""Tests for Schwartz-Zippel fingerprinting."""

import random

import pytest

from poly_algebra import (
    Config, Polynomial, X, Y, Z, coeff, eval_poly_points, probably_equal, sample_eval_points,
)


@pytest.fixture
def rng():
    return random.Random(0)


def test_sample_shape_and_range(rng):
    points = sample_eval_points(rng, [X, Y], m=10, low=-2, high=2)
    assert len(points) == 10
    for point in points:
        assert [var for var, _ in point] == [X, Y]
        assert all(-2 <= value <= 2 for _, value in point)


def test_sampling_is_reproducible():
    a = sample_eval_points(random.Random(7), [X, Y, Z], m=5)
    b = sample_eval_points(random.Random(7), [X, Y, Z], m=5)
    assert a == b


def test_eval_vector():
    p = coeff(2) * X + Y
    points = [[(X, 1), (Y, 2)], [(X, -1), (Y, 0)]]
    assert eval_poly_points(p, points) == [4, -2]


def test_raw_and_expanded_agree():
    raw = (coeff(1) * X + Y) ** 2
    expanded = X ** 2 + 2 * X * Y + Y ** 2
    assert probably_equal(raw, expanded)


def test_distinct_polynomials_differ():
    p = (coeff(1) * X + Y) ** 2
    q = coeff(1) * X ** 2 + Y ** 2
    assert not probably_equal(p, q)


def test_variable_only_in_one_side():
    p = coeff(1) * X + Z - Z
    q = Polynomial.from_term(coeff(1) * X)
    assert probably_equal(p, q)


def test_cancelled_variables_on_both_sides():
    p = coeff(1) * X * Y - Y * X + Z
    q = coeff(1) * Z + X - X
    assert probably_equal(p, q)
    assert not probably_equal(p, q + Y)


def test_constants():
    assert probably_equal(Polynomial.constant(3), coeff(1) + 2)
    assert not probably_equal(Polynomial.constant(3), Polynomial.constant(4))


def test_config_controls_points():
    p = Polynomial.from_term(coeff(1) * X)
    q = Polynomial.from_term(coeff(1) * X * X)
    # X and X^2 agree on {0, 1}; a range holding only those cannot tell them apart.
    narrow = Config(m=8, eval_low=0, eval_high=1)
    assert probably_equal(p, q, narrow)
    assert not probably_equal(p, q, Config(m=8, eval_low=2, eval_high=5))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

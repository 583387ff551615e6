"""Tests for the operator surface and its result-type rules."""

from fractions import Fraction

import pytest

from poly_algebra import (
    Config, DomainMismatchError, INTEGERS, RATIONALS, FiniteField, ModInt, Monomial,
    Polynomial, Term, UntypedPolynomial, X, Y, Z, as_polynomial, coeff, power,
)


class TestUntypedResults:
    def test_var_times_var_is_monomial(self):
        assert isinstance(X * Y, Monomial)

    def test_var_plus_var_is_untyped_sum(self):
        s = X + Y
        assert isinstance(s, UntypedPolynomial)
        assert s.monomials == (Monomial.of(X), Monomial.of(Y))

    def test_sum_times_var(self):
        s = (X + Y) * Z
        assert isinstance(s, UntypedPolynomial)
        assert s.monomials == (X * Z, Y * Z)

    def test_untyped_pow(self):
        s = (X + Y) ** 2
        assert len(s.monomials) == 4
        assert (X + Y) ** 0 == UntypedPolynomial()

    def test_str(self):
        assert str(X + Y * Z) == "X + Y*Z"


class TestTypedResults:
    def test_scalar_times_var_is_term(self):
        t = 3 * X
        assert isinstance(t, Term)
        assert t == Term(3, Monomial.of(X))

    def test_term_times_monomial_is_term(self):
        assert isinstance(coeff(2) * (X * Y), Term)

    def test_term_plus_anything_is_polynomial(self):
        assert isinstance(coeff(2) * X + 1, Polynomial)
        assert isinstance(1 + coeff(2) * X, Polynomial)

    def test_coefficient_times_untyped_sum(self):
        p = coeff(2) * (X + Y)
        assert isinstance(p, Polynomial)
        assert p.terms == [Term(2, Monomial.of(X)), Term(2, Monomial.of(Y))]

    def test_scalar_plus_untyped(self):
        p = X + 1
        assert isinstance(p, Polynomial)
        assert p.terms == [Term(1, Monomial.of(X)), Term(1, Monomial())]

    def test_scalar_power(self):
        assert power(2, 3) == Term(8, Monomial())


class TestSubtraction:
    def test_untyped_subtraction_uses_default_domain(self):
        p = X - Y
        assert isinstance(p, Polynomial)
        assert p.domain is INTEGERS
        assert p.terms == [Term(1, Monomial.of(X)), Term(-1, Monomial.of(Y))]

    def test_negate_var(self):
        assert (-X).terms == [Term(-1, Monomial.of(X))]

    def test_rsub_scalar(self):
        p = 1 - X
        assert p.terms == [Term(1, Monomial()), Term(-1, Monomial.of(X))]


class TestDomainRules:
    def test_scalar_adopts_term_domain(self):
        t = 2 * coeff(Fraction(1, 3))
        assert t.domain is RATIONALS
        assert t.coeff == Fraction(2, 3)

    def test_scalar_adopts_gf_domain(self):
        p = coeff(ModInt(1, 7)) * X + 9
        assert p.domain is FiniteField(7)
        assert p.terms[1].coeff == ModInt(2, 7)

    def test_mismatch_between_typed_operands(self):
        with pytest.raises(DomainMismatchError):
            coeff(1) * X + coeff(Fraction(1, 2)) * Y

    def test_incompatible_scalar(self):
        with pytest.raises(TypeError):
            coeff(1) * X + Fraction(1, 2)

    def test_unknown_operand(self):
        with pytest.raises(TypeError):
            X + "Y"
        with pytest.raises(TypeError):
            coeff(1) * X * None

    def test_as_polynomial_default_domain(self):
        p = as_polynomial(X * Y, config=Config(default_domain="QQ"))
        assert p.domain is RATIONALS
        assert p.terms == [Term(Fraction(1), X * Y, RATIONALS)]


class TestPowerArguments:
    def test_negative_exponent(self):
        with pytest.raises(ValueError):
            X ** -1

    def test_non_integer_exponent(self):
        with pytest.raises(TypeError):
            X ** 1.5
        with pytest.raises(TypeError):
            (coeff(1) * X) ** True


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""Tests for numeric evaluation and symbolic composition."""

from fractions import Fraction

import pytest
import sympy

from poly_algebra import (
    DomainMismatchError, INTEGERS, MissingVariableError, Monomial, Polynomial,
    RepeatingVariableError, SubstitutionError, Term, X, Y, Z, coeff,
)


class TestNumericSubstitution:
    def setup_method(self):
        self.p = coeff(2) * X + Y

    def test_linear(self):
        assert self.p.substitute([(X, 3), (Y, 4)]) == 10

    def test_plain_int_coefficients(self):
        assert (2 * X + Y).substitute([(X, 3), (Y, 4)]) == 10

    def test_product_term(self):
        p = Polynomial.from_term(coeff(2) * X * Y)
        assert p.substitute([(X, 3), (Y, 2)]) == 12

    def test_missing_variable(self):
        p = Polynomial.from_term(coeff(2) * X * Y)
        with pytest.raises(MissingVariableError) as exc:
            p.substitute([(X, 1)])
        assert exc.value.variable == Y

    def test_repeating_takes_precedence(self):
        p = Polynomial.from_term(coeff(2) * X * Y)
        with pytest.raises(RepeatingVariableError) as exc:
            p.substitute([(X, 1), (Y, 1), (Y, 1)])
        assert exc.value.variable == Y

    def test_repeating_even_if_unused(self):
        with pytest.raises(RepeatingVariableError) as exc:
            (coeff(1) * Y + 1).substitute([(X, 1), (X, 2), (Y, 0)])
        assert exc.value.variable == X

    def test_error_hierarchy(self):
        with pytest.raises(SubstitutionError):
            self.p.substitute([])
        with pytest.raises(ValueError):
            self.p.substitute([(X, 1), (X, 1)])

    def test_extra_bindings_ignored(self):
        assert self.p.substitute([(X, 1), (Y, 1), (Z, 100)]) == 3

    def test_constant(self):
        assert Polynomial.constant(5).substitute([]) == 5

    def test_mapping_bindings(self):
        assert self.p.substitute({X: 3, Y: 4}) == 10

    def test_raw_and_canonical_agree(self):
        p = (coeff(1) * X - Y) ** 3 + X * Y - X * Y
        bindings = [(X, 4), (Y, -1)]
        assert p.substitute(bindings) == p.normalized().substitute(bindings) == 125

    def test_rational_values(self):
        value = self.p.substitute([(X, Fraction(1, 2)), (Y, Fraction(1, 3))])
        assert value == Fraction(4, 3)
        assert isinstance(value, Fraction)

    def test_symbolic_values(self):
        t = sympy.Symbol("t")
        assert self.p.substitute([(X, t), (Y, t ** 2)]) == 2 * t + t ** 2


class TestComposition:
    def test_replace_by_variable(self):
        p = coeff(3) * X * Y + coeff(3) * Y
        p.substitute_polynome(Y, Z)
        assert p.is_canonical
        assert p.terms == [Term(3, X * Z), Term(3, Monomial.of(Z))]

    def test_second_substitution_is_noop(self):
        p = coeff(3) * X * Y + coeff(3) * Y
        p.substitute_polynome(Y, Z)
        before = p.copy()
        p.substitute_polynome(Y, Z)
        assert p == before

    def test_replace_by_sum(self):
        p = coeff(2) * X + Y
        p.substitute_polynome(Y, X + Z)
        assert p.terms == [Term(3, Monomial.of(X)), Term(1, Monomial.of(Z))]
        assert p.substitute([(X, 2), (Z, 3)]) == 9

    def test_power_expansion(self):
        p = Polynomial.from_term(coeff(1) * X ** 2)
        p.substitute_polynome(X, Y + 1)
        assert p.terms == [Term(1, Monomial()), Term(2, Monomial.of(Y)), Term(1, Y ** 2)]

    def test_replacement_mentions_variable(self):
        p = Polynomial.from_term(coeff(1) * X ** 2)
        p.substitute_polynome(X, X + 1)
        assert p.terms == [Term(1, Monomial()), Term(2, Monomial.of(X)), Term(1, X ** 2)]

    def test_absent_variable_only_normalizes(self):
        p = coeff(1) * X + X
        p.substitute_polynome(Z, Y)
        assert p.terms == [Term(2, Monomial.of(X))]

    def test_cancels_to_zero(self):
        p = coeff(1) * X - Y
        p.substitute_polynome(X, Y)
        assert p == Polynomial.zero(INTEGERS)

    def test_composed_does_not_mutate(self):
        p = coeff(1) * X + Y
        q = p.composed(X, Z ** 2)
        assert len(p) == 2 and not p.is_canonical
        assert q.terms == [Term(1, Monomial.of(Y)), Term(1, Z ** 2)]

    def test_value_matches_nested_evaluation(self):
        p = (coeff(2) * X + Y) ** 2 - X * Y
        r = coeff(1) * Y * Z + 3
        composed = p.composed(X, r)
        y, z = 2, -1
        x = r.substitute([(Y, y), (Z, z)])
        assert composed.substitute([(Y, y), (Z, z)]) == p.substitute([(X, x), (Y, y)])

    def test_domain_mismatch(self):
        p = coeff(1) * X + Y
        with pytest.raises(DomainMismatchError):
            p.substitute_polynome(X, coeff(Fraction(1, 2)) * Z)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

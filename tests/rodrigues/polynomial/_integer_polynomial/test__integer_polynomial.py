import pytest

from rodrigues.integer import Integer
from rodrigues.polynomial import (
    IntegerPolynomial,
    integer_polynomial,
    integer_polynomial_content,
    integer_polynomial_evaluate,
    integer_polynomial_trim,
)


def _ints(p):
    return [int(c) for c in p]


class TestIntegerPolynomial:
    def test_constructor_function(self):
        p = integer_polynomial([-1, 0, 1])
        assert all(isinstance(c, Integer) for c in p.coeffs)
        assert _ints(p) == [-1, 0, 1]

    def test_accepts_strings_and_integers(self):
        p = integer_polynomial(["-100000000000000000000", Integer(3), 4])
        assert _ints(p) == [-(10**20), 3, 4]

    def test_empty_is_allowed(self):
        assert len(integer_polynomial([])) == 0

    def test_keeps_trailing_zeros(self):
        assert len(integer_polynomial([1, 0, 0])) == 3

    def test_equality(self):
        assert integer_polynomial([1, 2]) == IntegerPolynomial(
            (Integer(1), Integer(2))
        )
        assert integer_polynomial([1, 2]) != integer_polynomial([1, 2, 0])

    def test_hashable(self):
        assert len({integer_polynomial([1, 2]), integer_polynomial([1, 2])}) == 1

    def test_immutable(self):
        p = integer_polynomial([1])
        with pytest.raises(AttributeError):
            p.coeffs = ()

    def test_indexing(self):
        p = integer_polynomial([5, 6, 7])
        assert p[0] == 5
        assert p[-1] == 7

    def test_operators(self):
        p = integer_polynomial([1, 1])
        assert _ints(p * p) == [1, 2, 1]
        assert _ints(p**3) == [1, 3, 3, 1]
        assert p(2) == 3

    def test_multiply_by_non_polynomial(self):
        with pytest.raises(TypeError):
            integer_polynomial([1]) * "x"


class TestIntegerPolynomialEvaluate:
    def test_horner(self):
        p = integer_polynomial([-1, 0, 1])  # x^2 - 1
        assert integer_polynomial_evaluate(p, 3) == 8
        assert integer_polynomial_evaluate(p, -1) == 0

    def test_large_point(self):
        p = integer_polynomial([0, 0, 1])
        assert int(integer_polynomial_evaluate(p, 10**15)) == 10**30

    def test_empty(self):
        assert integer_polynomial_evaluate(integer_polynomial([]), 7) == 0


class TestIntegerPolynomialContent:
    def test_content(self):
        assert integer_polynomial_content(integer_polynomial([-4, 0, 12])) == 4

    def test_zero_polynomial(self):
        assert integer_polynomial_content(integer_polynomial([0])) == 0


class TestIntegerPolynomialTrim:
    def test_trim(self):
        p = integer_polynomial_trim(integer_polynomial([1, 2, 0, 0]))
        assert _ints(p) == [1, 2]

    def test_zero_keeps_one_coefficient(self):
        assert _ints(integer_polynomial_trim(integer_polynomial([0, 0]))) == [0]
        assert _ints(integer_polynomial_trim(integer_polynomial([]))) == [0]

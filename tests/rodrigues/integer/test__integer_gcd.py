import math

import pytest

from rodrigues.integer import Integer, factorial, integer_gcd, integer_gcd_sequence


class TestIntegerGCD:
    @pytest.mark.parametrize(
        "a, b",
        [
            (12, 18),
            (-12, 18),
            (12, -18),
            (-12, -18),
            (17, 5),
            (0, 9),
            (9, 0),
            (10**30, 10**20 * 6),
        ],
    )
    def test_matches_math_gcd(self, a, b):
        assert int(integer_gcd(a, b)) == math.gcd(a, b)

    @pytest.mark.parametrize("a, b", [(12, 18), (-7, 21), (0, 5)])
    def test_commutative(self, a, b):
        assert integer_gcd(a, b) == integer_gcd(b, a)

    @pytest.mark.parametrize("a", [0, 5, -5, 10**25])
    def test_gcd_with_zero_is_magnitude(self, a):
        assert integer_gcd(Integer(a), Integer(0)) == abs(Integer(a))

    def test_zero_zero(self):
        assert integer_gcd(0, 0) == 0

    def test_never_negative(self):
        assert not integer_gcd(-4, -6).is_negative()

    def test_large_factorials(self):
        assert integer_gcd(factorial(30), factorial(20)) == factorial(20)


class TestIntegerGCDSequence:
    def test_fold(self):
        assert integer_gcd_sequence([12, -18, 30]) == 6

    def test_order_independent(self):
        values = [Integer(84), Integer(-126), Integer(210)]
        assert integer_gcd_sequence(values) == integer_gcd_sequence(
            reversed(values)
        )

    def test_empty_is_zero(self):
        assert integer_gcd_sequence([]) == 0

    def test_all_zero(self):
        assert integer_gcd_sequence([0, 0, 0]) == 0

    def test_single_value(self):
        assert integer_gcd_sequence([-9]) == 9

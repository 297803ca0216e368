"""Arbitrary-precision signed integers."""

from ._division_by_zero_error import DivisionByZeroError
from ._integer import BASE, BASE_DIGITS, Integer, integer
from ._integer_error import IntegerError
from ._integer_factorial import factorial, factorial_falling
from ._integer_gcd import integer_gcd, integer_gcd_sequence
from ._integer_pow2 import pow2

__all__ = [
    "BASE",
    "BASE_DIGITS",
    "DivisionByZeroError",
    "Integer",
    "IntegerError",
    "factorial",
    "factorial_falling",
    "integer",
    "integer_gcd",
    "integer_gcd_sequence",
    "pow2",
]

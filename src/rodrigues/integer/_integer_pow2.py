import operator

from rodrigues.integer._integer import Integer
from rodrigues.integer._integer_error import IntegerError


def pow2(n: int) -> Integer:
    """Exact 2**n for non-negative n, by square and multiply.

    Raises
    ------
    IntegerError
        If n is negative.
    """
    n = operator.index(n)
    if n < 0:
        raise IntegerError(f"exponent must be non-negative, got {n}")

    result = Integer(1)
    base = Integer(2)

    while n > 0:
        if n & 1:
            result = result * base
        base = base * base
        n >>= 1

    return result

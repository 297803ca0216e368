import functools
from typing import Iterable, Union

from rodrigues.integer._integer import Integer, integer


def integer_gcd(
    a: Union[int, Integer], b: Union[int, Integer]
) -> Integer:
    """Greatest common divisor of two integers.

    Euclid's algorithm on the magnitudes.

    Parameters
    ----------
    a, b : int or Integer
        Operands, any sign.

    Returns
    -------
    Integer
        Non-negative GCD. ``integer_gcd(a, 0) == abs(a)`` and
        ``integer_gcd(0, 0) == 0``.

    Examples
    --------
    >>> integer_gcd(-12, 18)
    Integer(6)
    """
    a = abs(integer(a))
    b = abs(integer(b))

    while not b.is_zero():
        a, b = b, a % b

    return a


def integer_gcd_sequence(values: Iterable[Union[int, Integer]]) -> Integer:
    """Greatest common divisor of every value in a sequence.

    Folds ``integer_gcd`` pairwise. The empty sequence gives ``0``, the
    identity element of GCD, so folding a further value into the result
    returns that value's magnitude.

    Parameters
    ----------
    values : iterable of int or Integer
        Values to reduce.

    Returns
    -------
    Integer
        Non-negative GCD of all values.
    """
    return functools.reduce(integer_gcd, values, Integer(0))

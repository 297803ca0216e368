from rodrigues.integer import Integer

from ._integer_polynomial import IntegerPolynomial
from ._integer_polynomial_exponent import _check_exponent
from ._integer_polynomial_multiply import integer_polynomial_multiply


def integer_polynomial_pow(p: IntegerPolynomial, n: int) -> IntegerPolynomial:
    """Raise an integer polynomial to a non-negative integer power.

    Uses repeated convolution by ``p``: n - 1 multiplications, the k-th
    growing the result by len(p) - 1 coefficients.

    Parameters
    ----------
    p : IntegerPolynomial
        Base polynomial.
    n : int
        Exponent in [0, MAXIMUM_EXPONENT].

    Returns
    -------
    IntegerPolynomial
        p raised to power n. For n = 0 this is the constant 1, whatever
        ``p`` is (the empty polynomial included). For n >= 1 and non-empty
        ``p`` it has n * (len(p) - 1) + 1 coefficients.

    Raises
    ------
    InvalidExponentError
        If n is not an integer in [0, MAXIMUM_EXPONENT].

    Examples
    --------
    >>> p = integer_polynomial([1, 1])  # 1 + x
    >>> [int(c) for c in integer_polynomial_pow(p, 3)]
    [1, 3, 3, 1]
    """
    n = _check_exponent(n)

    if n == 0:
        return IntegerPolynomial((Integer(1),))

    result = p
    for _ in range(1, n):
        result = integer_polynomial_multiply(result, p)

    return result

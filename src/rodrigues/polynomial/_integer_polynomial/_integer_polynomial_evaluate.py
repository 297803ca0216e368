from typing import Union

from rodrigues.integer import Integer, integer

from ._integer_polynomial import IntegerPolynomial


def integer_polynomial_evaluate(
    p: IntegerPolynomial, x: Union[int, str, Integer]
) -> Integer:
    """Evaluate an integer polynomial exactly at an integer point.

    Uses Horner's method.

    Parameters
    ----------
    p : IntegerPolynomial
        Polynomial to evaluate.
    x : int, str or Integer
        Evaluation point.

    Returns
    -------
    Integer
        p(x). The empty polynomial evaluates to 0.
    """
    x = integer(x)

    result = Integer(0)
    for c in reversed(p.coeffs):
        result = result * x + c

    return result

from rodrigues.integer import factorial
from rodrigues.polynomial._integer_polynomial import integer_polynomial
from rodrigues.polynomial._integer_polynomial._integer_polynomial_exponent import (
    _check_exponent,
)

from ._rodrigues_coefficients import RodriguesCoefficients
from ._rodrigues_formula import _rodrigues_coefficients


def shifted_legendre_polynomial_p_coefficients(
    n: int,
) -> RodriguesCoefficients:
    """Exact power-basis coefficients of the shifted Legendre polynomial.

    Uses the Rodrigues formula on [0, 1]:

                  1   d^n
        P~_n(x) = --  ---- [ (x^2 - x)^n ]
                  n!  dx^n

    Parameters
    ----------
    n : int
        Degree in [0, MAXIMUM_EXPONENT].

    Returns
    -------
    RodriguesCoefficients
        Reduced coefficients and prefix, ``variant == "shifted"``. The
        shifted polynomials have integer coefficients, so the prefix is
        always 1.

    Raises
    ------
    InvalidExponentError
        If n is not an integer in [0, MAXIMUM_EXPONENT].

    Examples
    --------
    >>> c = shifted_legendre_polynomial_p_coefficients(2)  # 6x^2 - 6x + 1
    >>> [int(v) for v in c.signed()]
    [1, -6, 6]
    """
    n = _check_exponent(n, "degree")

    return _rodrigues_coefficients(
        integer_polynomial([0, -1, 1]),
        n,
        factorial(n),
        "shifted",
    )

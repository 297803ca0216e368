from rodrigues.integer import factorial, pow2
from rodrigues.polynomial._integer_polynomial import integer_polynomial
from rodrigues.polynomial._integer_polynomial._integer_polynomial_exponent import (
    _check_exponent,
)

from ._rodrigues_coefficients import RodriguesCoefficients
from ._rodrigues_formula import _rodrigues_coefficients


def legendre_polynomial_p_coefficients(n: int) -> RodriguesCoefficients:
    """Exact power-basis coefficients of the Legendre polynomial P_n.

    Uses the Rodrigues formula:

                 1      d^n
        P_n(x) = ------ ---- [ (x^2 - 1)^n ]
                 2^n n! dx^n

    The raw derivative coefficients and 2^n n! are divided by their
    common GCD, leaving a reduced integer polynomial and a prefix.

    Parameters
    ----------
    n : int
        Degree in [0, MAXIMUM_EXPONENT].

    Returns
    -------
    RodriguesCoefficients
        Reduced coefficients and prefix with
        P_n(x) = (1 / prefix) * sum_i signed_i * x^i.

    Raises
    ------
    InvalidExponentError
        If n is not an integer in [0, MAXIMUM_EXPONENT].

    Examples
    --------
    >>> c = legendre_polynomial_p_coefficients(2)  # (3x^2 - 1) / 2
    >>> int(c.prefix), [int(v) for v in c.signed()]
    (2, [-1, 0, 3])
    """
    n = _check_exponent(n, "degree")

    return _rodrigues_coefficients(
        integer_polynomial([-1, 0, 1]),
        n,
        pow2(n) * factorial(n),
        "ordinary",
    )

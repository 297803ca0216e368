import logging

from rodrigues.integer import Integer, integer_gcd
from rodrigues.polynomial._integer_polynomial import (
    IntegerPolynomial,
    integer_polynomial_content,
    integer_polynomial_derivative,
    integer_polynomial_pow,
)
from rodrigues.polynomial._polynomial_error import PolynomialError

from ._rodrigues_coefficients import RodriguesCoefficients, SignedCoefficient

logger = logging.getLogger(__name__)


def _exact_quotient(dividend: Integer, divisor: Integer) -> Integer:
    quotient, remainder = dividend.divmod_truncated(divisor)
    if not remainder.is_zero():
        raise PolynomialError(
            f"{divisor} does not divide {dividend}; reduction is inconsistent"
        )

    return quotient


def _rodrigues_coefficients(
    base: IntegerPolynomial,
    n: int,
    factor: Integer,
    variant: str,
) -> RodriguesCoefficients:
    # (1 / factor) * d^n/dx^n [ base^n ], reduced by the common GCD.
    power = integer_polynomial_pow(base, n)
    derivative = integer_polynomial_derivative(power, n)

    gcd = integer_gcd(factor, integer_polynomial_content(derivative))

    prefix = _exact_quotient(factor, gcd)
    coefficients = tuple(
        SignedCoefficient(_exact_quotient(abs(c), gcd), c.is_positive())
        for c in derivative.coeffs
    )

    logger.debug(
        "%s degree %d: factor=%s gcd=%s prefix=%s",
        variant,
        n,
        factor,
        gcd,
        prefix,
    )

    return RodriguesCoefficients(
        degree=n,
        prefix=prefix,
        coefficients=coefficients,
        variant=variant,
    )

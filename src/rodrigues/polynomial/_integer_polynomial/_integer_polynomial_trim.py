from rodrigues.integer import Integer

from ._integer_polynomial import IntegerPolynomial


def integer_polynomial_trim(p: IntegerPolynomial) -> IntegerPolynomial:
    """Remove trailing zero coefficients.

    At least one coefficient is kept, so the zero polynomial (and the empty
    polynomial) trims to ``[0]``.
    """
    coeffs = list(p.coeffs)

    while len(coeffs) > 1 and coeffs[-1].is_zero():
        coeffs.pop()

    if not coeffs:
        coeffs = [Integer(0)]

    return IntegerPolynomial(tuple(coeffs))

from rodrigues.integer import Integer, integer_gcd_sequence

from ._integer_polynomial import IntegerPolynomial


def integer_polynomial_content(p: IntegerPolynomial) -> Integer:
    """GCD of all coefficients; 0 for the zero or empty polynomial."""
    return integer_gcd_sequence(p.coeffs)

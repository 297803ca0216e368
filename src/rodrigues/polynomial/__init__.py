from ._polynomial_error import PolynomialError
from ._invalid_exponent_error import InvalidExponentError
from ._integer_polynomial import (
    MAXIMUM_EXPONENT,
    IntegerPolynomial,
    integer_polynomial,
    integer_polynomial_content,
    integer_polynomial_derivative,
    integer_polynomial_evaluate,
    integer_polynomial_multiply,
    integer_polynomial_pow,
    integer_polynomial_to_tensor,
    integer_polynomial_trim,
)
from ._legendre_polynomial_p_rodrigues import (
    LegendreCoefficientTable,
    RodriguesCoefficients,
    SignedCoefficient,
    legendre_polynomial_p_coefficients,
    legendre_polynomial_p_table,
    render_rodrigues_coefficients,
    rodrigues_coefficients_to_tensor,
    shifted_legendre_polynomial_p_coefficients,
)

__all__ = [
    "MAXIMUM_EXPONENT",
    "IntegerPolynomial",
    "InvalidExponentError",
    "LegendreCoefficientTable",
    "PolynomialError",
    "RodriguesCoefficients",
    "SignedCoefficient",
    "integer_polynomial",
    "integer_polynomial_content",
    "integer_polynomial_derivative",
    "integer_polynomial_evaluate",
    "integer_polynomial_multiply",
    "integer_polynomial_pow",
    "integer_polynomial_to_tensor",
    "integer_polynomial_trim",
    "legendre_polynomial_p_coefficients",
    "legendre_polynomial_p_table",
    "render_rodrigues_coefficients",
    "rodrigues_coefficients_to_tensor",
    "shifted_legendre_polynomial_p_coefficients",
]

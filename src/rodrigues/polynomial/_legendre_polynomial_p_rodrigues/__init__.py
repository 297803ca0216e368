"""Exact Legendre polynomial coefficients from the Rodrigues formula."""

from ._legendre_coefficient_table import (
    LegendreCoefficientTable,
    legendre_polynomial_p_table,
)
from ._legendre_polynomial_p_coefficients import (
    legendre_polynomial_p_coefficients,
)
from ._rodrigues_coefficients import RodriguesCoefficients, SignedCoefficient
from ._rodrigues_coefficients_render import render_rodrigues_coefficients
from ._rodrigues_coefficients_to_tensor import (
    rodrigues_coefficients_to_tensor,
)
from ._shifted_legendre_polynomial_p_coefficients import (
    shifted_legendre_polynomial_p_coefficients,
)

__all__ = [
    "LegendreCoefficientTable",
    "RodriguesCoefficients",
    "SignedCoefficient",
    "legendre_polynomial_p_coefficients",
    "legendre_polynomial_p_table",
    "render_rodrigues_coefficients",
    "rodrigues_coefficients_to_tensor",
    "shifted_legendre_polynomial_p_coefficients",
]

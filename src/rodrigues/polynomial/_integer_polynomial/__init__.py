from ._integer_polynomial import IntegerPolynomial, integer_polynomial
from ._integer_polynomial_content import integer_polynomial_content
from ._integer_polynomial_derivative import integer_polynomial_derivative
from ._integer_polynomial_evaluate import integer_polynomial_evaluate
from ._integer_polynomial_exponent import MAXIMUM_EXPONENT
from ._integer_polynomial_multiply import integer_polynomial_multiply
from ._integer_polynomial_pow import integer_polynomial_pow
from ._integer_polynomial_to_tensor import integer_polynomial_to_tensor
from ._integer_polynomial_trim import integer_polynomial_trim

__all__ = [
    "IntegerPolynomial",
    "MAXIMUM_EXPONENT",
    "integer_polynomial",
    "integer_polynomial_content",
    "integer_polynomial_derivative",
    "integer_polynomial_evaluate",
    "integer_polynomial_multiply",
    "integer_polynomial_pow",
    "integer_polynomial_to_tensor",
    "integer_polynomial_trim",
]

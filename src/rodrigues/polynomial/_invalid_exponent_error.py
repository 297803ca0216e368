from rodrigues.polynomial._polynomial_error import PolynomialError


class InvalidExponentError(PolynomialError, ValueError):
    """Raised when a power exponent or derivative order is invalid.

    Exponents and orders must be integers in ``[0, MAXIMUM_EXPONENT]``.
    """

    pass

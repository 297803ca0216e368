from rodrigues.integer import Integer, factorial_falling

from ._integer_polynomial import IntegerPolynomial
from ._integer_polynomial_exponent import _check_exponent


def integer_polynomial_derivative(
    p: IntegerPolynomial, order: int = 1
) -> IntegerPolynomial:
    """Compute the order-th derivative of an integer polynomial.

    Terms of degree below ``order`` vanish; the coefficient of x^m moves to
    x^(m - order) scaled by m (m - 1) ... (m - order + 1).

    Parameters
    ----------
    p : IntegerPolynomial
        Input polynomial.
    order : int
        Derivative order in [0, MAXIMUM_EXPONENT] (default 1).

    Returns
    -------
    IntegerPolynomial
        d^order p / dx^order. ``order = 0`` returns ``p`` itself. When
        ``order`` exceeds the number of coefficients the result is ``[0]``;
        when it equals the number of coefficients every term vanishes and
        the result is empty.

    Raises
    ------
    InvalidExponentError
        If order is not an integer in [0, MAXIMUM_EXPONENT].

    Examples
    --------
    >>> p = integer_polynomial([1, 2, 3])  # 1 + 2x + 3x^2
    >>> [int(c) for c in integer_polynomial_derivative(p)]  # 2 + 6x
    [2, 6]
    """
    order = _check_exponent(order, "order")

    if order == 0:
        return p

    if order > len(p):
        return IntegerPolynomial((Integer(0),))

    return IntegerPolynomial(
        tuple(
            c * factorial_falling(order + i, order)
            for i, c in enumerate(p.coeffs[order:])
        )
    )

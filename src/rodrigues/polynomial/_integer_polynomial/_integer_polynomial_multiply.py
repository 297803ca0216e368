from rodrigues.integer import Integer

from ._integer_polynomial import IntegerPolynomial


def integer_polynomial_multiply(
    p: IntegerPolynomial, q: IntegerPolynomial
) -> IntegerPolynomial:
    """Multiply two integer polynomials.

    Computes the convolution result[i + j] += p[j] * q[i]. The result has
    exactly len(p) + len(q) - 1 coefficients; no trailing zeros are removed.

    Parameters
    ----------
    p, q : IntegerPolynomial
        Polynomials to multiply.

    Returns
    -------
    IntegerPolynomial
        Product p * q. Empty if either operand is empty.
    """
    if not p.coeffs or not q.coeffs:
        return IntegerPolynomial(())

    result = [Integer(0)] * (len(p) + len(q) - 1)

    for j, left in enumerate(p.coeffs):
        for i, right in enumerate(q.coeffs):
            result[i + j] = result[i + j] + left * right

    return IntegerPolynomial(tuple(result))

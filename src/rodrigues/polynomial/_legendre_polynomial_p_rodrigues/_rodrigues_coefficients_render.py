from rodrigues.polynomial._integer_polynomial import integer_polynomial_trim

from ._rodrigues_coefficients import RodriguesCoefficients


def render_rodrigues_coefficients(c: RodriguesCoefficients) -> str:
    """Format reduced coefficients as a one-line polynomial expression.

    Terms run from the highest power down. Zero terms are skipped, a
    magnitude of 1 is written only for the constant term, and the whole
    sum is wrapped in ``1/prefix ( ... )`` unless the prefix is 1.

    Parameters
    ----------
    c : RodriguesCoefficients
        Generator output.

    Returns
    -------
    str
        ``P(n,x) = ...`` for ordinary and ``/P(n,x) = ...`` for shifted
        polynomials.

    Examples
    --------
    >>> render_rodrigues_coefficients(legendre_polynomial_p_coefficients(2))
    'P(2,x) = 1/2 ( 3 x^2 - 1 )'
    >>> render_rodrigues_coefficients(legendre_polynomial_p_coefficients(1))
    'P(1,x) = x'
    """
    name = "/P" if c.variant == "shifted" else "P"

    terms = integer_polynomial_trim(c.to_polynomial())

    tokens = []
    for power in reversed(range(len(terms))):
        value = terms[power]
        if value.is_zero():
            continue

        magnitude = abs(value)
        positive = value.is_positive()

        parts = []
        if magnitude != 1 or power == 0:
            parts.append(str(magnitude))
        if power > 1:
            parts.append(f"x^{power}")
        elif power == 1:
            parts.append("x")
        term = " ".join(parts)

        if tokens:
            tokens.append("+" if positive else "-")
        elif not positive:
            term = "-" + term

        tokens.append(term)

    body = " ".join(tokens) if tokens else "0"

    if c.prefix != 1:
        body = f"1/{c.prefix} ( {body} )"

    return f"{name}({c.degree},x) = {body}"

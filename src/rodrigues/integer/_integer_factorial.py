import operator

from rodrigues.integer._integer import Integer
from rodrigues.integer._integer_error import IntegerError


def factorial(n: int) -> Integer:
    """Exact n! for non-negative n.

    Raises
    ------
    IntegerError
        If n is negative.

    Examples
    --------
    >>> factorial(20)
    Integer(2432902008176640000)
    """
    n = operator.index(n)
    if n < 0:
        raise IntegerError(f"factorial is undefined for negative n, got {n}")

    result = Integer(1)
    for k in range(2, n + 1):
        result = result * k

    return result


def factorial_falling(n: int, k: int) -> Integer:
    """Falling factorial n (n - 1) ... (n - k + 1), a product of k terms.

    This is the factor picked up by x^n under k differentiations:
    d^k/dx^k x^n = factorial_falling(n, k) x^(n - k).

    Parameters
    ----------
    n : int
        Leading term.
    k : int
        Number of terms, non-negative. ``factorial_falling(n, 0) == 1``.

    Returns
    -------
    Integer
        The product. Zero when ``0 <= n < k``.

    Raises
    ------
    IntegerError
        If k is negative.
    """
    n = operator.index(n)
    k = operator.index(k)
    if k < 0:
        raise IntegerError(f"number of terms must be non-negative, got {k}")

    result = Integer(1)
    for i in range(k):
        result = result * (n - i)

    return result

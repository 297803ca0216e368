from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

from rodrigues.integer import Integer, integer


@dataclass(frozen=True)
class IntegerPolynomial:
    """Polynomial in one variable with arbitrary-precision integer coefficients.

    Represents p(x) = coeffs[0] + coeffs[1]*x + coeffs[2]*x^2 + ...

    Attributes
    ----------
    coeffs : tuple of Integer
        Coefficients in ascending order; coeffs[i] is the coefficient of x^i.
        Trailing zeros are kept, the length is part of the value.

    Examples
    --------
    x^2 - 1:
        IntegerPolynomial((Integer(-1), Integer(0), Integer(1)))

    Operator overloading:
        p * q    # integer_polynomial_multiply(p, q)
        p ** n   # integer_polynomial_pow(p, n)
        p(x)     # integer_polynomial_evaluate(p, x)
    """

    coeffs: Tuple[Integer, ...] = ()

    def __post_init__(self):
        object.__setattr__(
            self, "coeffs", tuple(integer(c) for c in self.coeffs)
        )

    def __len__(self) -> int:
        return len(self.coeffs)

    def __getitem__(self, i: int) -> Integer:
        return self.coeffs[i]

    def __iter__(self) -> Iterator[Integer]:
        return iter(self.coeffs)

    def __mul__(self, other: "IntegerPolynomial") -> "IntegerPolynomial":
        from ._integer_polynomial_multiply import integer_polynomial_multiply

        if not isinstance(other, IntegerPolynomial):
            return NotImplemented

        return integer_polynomial_multiply(self, other)

    def __pow__(self, n: int) -> "IntegerPolynomial":
        from ._integer_polynomial_pow import integer_polynomial_pow

        return integer_polynomial_pow(self, n)

    def __call__(self, x: Union[int, Integer]) -> Integer:
        from ._integer_polynomial_evaluate import integer_polynomial_evaluate

        return integer_polynomial_evaluate(self, x)


def integer_polynomial(
    coeffs: Iterable[Union[int, str, Integer]],
) -> IntegerPolynomial:
    """Create an integer polynomial from ascending coefficients.

    Parameters
    ----------
    coeffs : iterable of int, str or Integer
        Coefficients in ascending order. May be empty.

    Returns
    -------
    IntegerPolynomial
        Polynomial instance.

    Examples
    --------
    >>> p = integer_polynomial([-1, 0, 1])  # x^2 - 1
    >>> [int(c) for c in p]
    [-1, 0, 1]
    """
    return IntegerPolynomial(tuple(coeffs))

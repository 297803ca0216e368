from dataclasses import dataclass
from typing import NamedTuple, Tuple

from rodrigues.integer import Integer
from rodrigues.polynomial._integer_polynomial import IntegerPolynomial


class SignedCoefficient(NamedTuple):
    """Reduced coefficient magnitude with its sign kept separately.

    ``positive`` is strict: a zero coefficient has ``positive=False``.
    """

    magnitude: Integer
    positive: bool


@dataclass(frozen=True)
class RodriguesCoefficients:
    """Reduced power-basis coefficients of a Legendre polynomial.

    Represents P(x) = (1 / prefix) * sum_i sign_i * magnitude_i * x^i

    where gcd(prefix, magnitude_0, magnitude_1, ...) = 1.

    Attributes
    ----------
    degree : int
        Polynomial degree n.
    prefix : Integer
        Residual denominator after reduction. 1 when no fraction remains.
    coefficients : tuple of SignedCoefficient
        Coefficients in ascending order, degree + 1 entries.
    variant : str
        ``"ordinary"`` for P_n on [-1, 1] or ``"shifted"`` for the shifted
        polynomial on [0, 1].
    """

    degree: int
    prefix: Integer
    coefficients: Tuple[SignedCoefficient, ...]
    variant: str = "ordinary"

    def signed(self) -> Tuple[Integer, ...]:
        """Reduced coefficients with their signs applied."""
        return tuple(
            magnitude if positive else -magnitude
            for magnitude, positive in self.coefficients
        )

    def to_polynomial(self) -> IntegerPolynomial:
        """prefix * P(x) as an integer polynomial."""
        return IntegerPolynomial(self.signed())

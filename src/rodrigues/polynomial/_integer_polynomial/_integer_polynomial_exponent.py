from typing import Final

from rodrigues.integer import Integer
from rodrigues.polynomial._invalid_exponent_error import InvalidExponentError

# Degrees are 8-bit quantities; (x^2 - 1)^255 is already far past any
# published table.
MAXIMUM_EXPONENT: Final[int] = 255


def _check_exponent(n, name: str = "exponent") -> int:
    if isinstance(n, Integer):
        n = int(n)

    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidExponentError(
            f"{name} must be an integer, got {type(n).__name__}"
        )

    if n < 0:
        raise InvalidExponentError(f"{name} must be non-negative, got {n}")

    if n > MAXIMUM_EXPONENT:
        raise InvalidExponentError(
            f"{name} must be at most {MAXIMUM_EXPONENT}, got {n}"
        )

    return n

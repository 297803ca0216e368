"""rodrigues: exact Legendre polynomial coefficients over arbitrary-precision integers."""

from . import (
    integer,
    polynomial,
)

__all__ = [
    "integer",
    "polynomial",
]

__version__ = "0.1.0"

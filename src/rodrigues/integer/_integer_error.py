class IntegerError(ValueError):
    """Base class for arbitrary-precision integer errors."""

    pass

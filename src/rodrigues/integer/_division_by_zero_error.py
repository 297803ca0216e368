from rodrigues.integer._integer_error import IntegerError


class DivisionByZeroError(IntegerError, ZeroDivisionError):
    """Raised when an Integer is divided by zero.

    Also a ``ZeroDivisionError`` so callers written against the builtin
    ``int`` keep working.
    """

    pass

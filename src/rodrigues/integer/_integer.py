import functools
from typing import Final, Optional, Tuple, Union

from rodrigues.integer._division_by_zero_error import DivisionByZeroError
from rodrigues.integer._integer_error import IntegerError

# Limbs hold BASE_DIGITS decimal digits each so that printing and parsing
# never need a radix conversion.
BASE_DIGITS: Final[int] = 9
BASE: Final[int] = 10**BASE_DIGITS

Limbs = Tuple[int, ...]


def _normalize(limbs: list) -> Limbs:
    while limbs and limbs[-1] == 0:
        limbs.pop()
    return tuple(limbs)


def _compare_magnitude(a: Limbs, b: Limbs) -> int:
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return -1 if x < y else 1
    return 0


def _add_magnitude(a: Limbs, b: Limbs) -> Limbs:
    if len(a) < len(b):
        a, b = b, a

    result = []
    carry = 0
    for i in range(len(a)):
        limb = a[i] + carry
        if i < len(b):
            limb += b[i]
        if limb >= BASE:
            limb -= BASE
            carry = 1
        else:
            carry = 0
        result.append(limb)

    if carry:
        result.append(carry)

    return tuple(result)


def _subtract_magnitude(a: Limbs, b: Limbs) -> Limbs:
    # Requires |a| >= |b|.
    result = []
    borrow = 0
    for i in range(len(a)):
        limb = a[i] - borrow
        if i < len(b):
            limb -= b[i]
        if limb < 0:
            limb += BASE
            borrow = 1
        else:
            borrow = 0
        result.append(limb)

    return _normalize(result)


def _multiply_magnitude(a: Limbs, b: Limbs) -> Limbs:
    if not a or not b:
        return ()

    # Schoolbook convolution, O(len(a) * len(b)).
    result = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        if x == 0:
            continue
        carry = 0
        for j, y in enumerate(b):
            carry, result[i + j] = divmod(result[i + j] + x * y + carry, BASE)
        k = i + len(b)
        while carry:
            carry, result[k] = divmod(result[k] + carry, BASE)
            k += 1

    return _normalize(result)


def _multiply_magnitude_small(a: Limbs, m: int) -> Limbs:
    # 0 <= m < BASE
    if m == 0 or not a:
        return ()

    result = []
    carry = 0
    for x in a:
        carry, limb = divmod(x * m + carry, BASE)
        result.append(limb)
    if carry:
        result.append(carry)

    return tuple(result)


def _divmod_magnitude_small(a: Limbs, d: int) -> Tuple[Limbs, Limbs]:
    # 0 < d < BASE
    quotient = [0] * len(a)
    remainder = 0
    for i in reversed(range(len(a))):
        quotient[i], remainder = divmod(remainder * BASE + a[i], d)

    return _normalize(quotient), _normalize([remainder])


def _divmod_magnitude(a: Limbs, b: Limbs) -> Tuple[Limbs, Limbs]:
    if _compare_magnitude(a, b) < 0:
        return (), a

    if len(b) == 1:
        return _divmod_magnitude_small(a, b[0])

    # Long division, one limb of quotient per step. Each quotient limb is
    # the largest q in [0, BASE) with b * q <= remainder, found by bisection.
    quotient = [0] * len(a)
    remainder: Limbs = ()
    for i in reversed(range(len(a))):
        remainder = _normalize([a[i], *remainder])
        if _compare_magnitude(remainder, b) < 0:
            continue

        low, high = 1, BASE - 1
        while low < high:
            middle = (low + high + 1) // 2
            if _compare_magnitude(_multiply_magnitude_small(b, middle), remainder) <= 0:
                low = middle
            else:
                high = middle - 1

        quotient[i] = low
        remainder = _subtract_magnitude(
            remainder, _multiply_magnitude_small(b, low)
        )

    return _normalize(quotient), remainder


@functools.total_ordering
class Integer:
    """Signed integer of unbounded magnitude.

    Stored as a sign flag and a tuple of base ``10**9`` limbs, least
    significant limb first. The canonical form has no high-order zero limbs;
    zero is the empty tuple and is never negative.

    Instances are immutable. Arithmetic accepts other ``Integer`` instances
    and Python ``int`` operands. Floats are never coerced: an Integer is
    not equal to any float, integral or not.

    Parameters
    ----------
    value : int or Integer
        Initial value.

    Notes
    -----
    Division (``/``) truncates toward zero and ``%`` returns the matching
    remainder, which takes the sign of the dividend. Both agree with the
    exact quotient whenever the divisor divides the dividend.

    Examples
    --------
    >>> a = Integer(10**20)
    >>> str(a * a)
    '10000000000000000000000000000000000000000'
    >>> Integer(-7) / 2
    Integer(-3)
    >>> Integer(-7) % 2
    Integer(-1)
    """

    __slots__ = ("_negative", "_limbs")

    def __init__(self, value: Union[int, "Integer"] = 0):
        if isinstance(value, Integer):
            self._negative = value._negative
            self._limbs = value._limbs
            return

        if not isinstance(value, int):
            raise TypeError(
                f"Integer() argument must be int or Integer, "
                f"got {type(value).__name__}"
            )

        magnitude = -value if value < 0 else value
        limbs = []
        while magnitude:
            magnitude, limb = divmod(magnitude, BASE)
            limbs.append(limb)

        self._negative = value < 0
        self._limbs = tuple(limbs)

    @classmethod
    def _from_parts(cls, negative: bool, limbs: Limbs) -> "Integer":
        instance = cls.__new__(cls)
        instance._negative = negative and bool(limbs)
        instance._limbs = limbs
        return instance

    @classmethod
    def from_string(cls, text: str) -> "Integer":
        """Parse a decimal integer.

        Leading and trailing whitespace, one leading ``+`` or ``-`` and
        ``_`` digit separators are accepted.

        Raises
        ------
        IntegerError
            If ``text`` is not a decimal integer literal.
        """
        digits = text.strip().replace("_", "")

        negative = False
        if digits[:1] in ("+", "-"):
            negative = digits[0] == "-"
            digits = digits[1:]

        if not digits or not (digits.isascii() and digits.isdigit()):
            raise IntegerError(f"invalid decimal integer literal: {text!r}")

        limbs = []
        for end in range(len(digits), 0, -BASE_DIGITS):
            limbs.append(int(digits[max(0, end - BASE_DIGITS) : end]))

        return cls._from_parts(negative, _normalize(limbs))

    @property
    def negative(self) -> bool:
        return self._negative

    @property
    def limbs(self) -> Limbs:
        """Magnitude limbs, least significant first."""
        return self._limbs

    def is_positive(self) -> bool:
        """Strictly greater than zero."""
        return bool(self._limbs) and not self._negative

    def is_negative(self) -> bool:
        return self._negative

    def is_zero(self) -> bool:
        return not self._limbs

    def divmod_truncated(
        self, other: Union[int, "Integer"]
    ) -> Tuple["Integer", "Integer"]:
        """Quotient rounded toward zero and the matching remainder.

        Raises
        ------
        DivisionByZeroError
            If ``other`` is zero.
        """
        other = _coerce(other)
        if other is None:
            raise TypeError("divisor must be int or Integer")

        if other.is_zero():
            raise DivisionByZeroError("integer division by zero")

        quotient, remainder = _divmod_magnitude(self._limbs, other._limbs)

        return (
            Integer._from_parts(self._negative != other._negative, quotient),
            Integer._from_parts(self._negative, remainder),
        )

    def __add__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented

        if self._negative == other._negative:
            return Integer._from_parts(
                self._negative, _add_magnitude(self._limbs, other._limbs)
            )

        order = _compare_magnitude(self._limbs, other._limbs)
        if order == 0:
            return Integer()
        if order > 0:
            return Integer._from_parts(
                self._negative,
                _subtract_magnitude(self._limbs, other._limbs),
            )
        return Integer._from_parts(
            other._negative, _subtract_magnitude(other._limbs, self._limbs)
        )

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented

        return self + (-other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented

        return other - self

    def __mul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented

        return Integer._from_parts(
            self._negative != other._negative,
            _multiply_magnitude(self._limbs, other._limbs),
        )

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if _coerce(other) is None:
            return NotImplemented

        return self.divmod_truncated(other)[0]

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented

        return other.divmod_truncated(self)[0]

    def __mod__(self, other):
        if _coerce(other) is None:
            return NotImplemented

        return self.divmod_truncated(other)[1]

    def __rmod__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented

        return other.divmod_truncated(self)[1]

    def __neg__(self) -> "Integer":
        return Integer._from_parts(not self._negative, self._limbs)

    def __pos__(self) -> "Integer":
        return self

    def __abs__(self) -> "Integer":
        return Integer._from_parts(False, self._limbs)

    def __eq__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented

        return self._negative == other._negative and self._limbs == other._limbs

    def __lt__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented

        if self._negative != other._negative:
            return self._negative

        order = _compare_magnitude(self._limbs, other._limbs)
        return order > 0 if self._negative else order < 0

    def __hash__(self) -> int:
        return hash(int(self))

    def __bool__(self) -> bool:
        return bool(self._limbs)

    def __int__(self) -> int:
        value = 0
        for limb in reversed(self._limbs):
            value = value * BASE + limb
        return -value if self._negative else value

    __index__ = __int__

    def __float__(self) -> float:
        return float(int(self))

    def __str__(self) -> str:
        if not self._limbs:
            return "0"

        text = str(self._limbs[-1]) + "".join(
            str(limb).zfill(BASE_DIGITS) for limb in reversed(self._limbs[:-1])
        )
        return "-" + text if self._negative else text

    def __repr__(self) -> str:
        return f"Integer({self})"


def _coerce(value) -> Optional[Integer]:
    if isinstance(value, Integer):
        return value
    if isinstance(value, int):
        return Integer(value)
    return None


def integer(value: Union[int, str, Integer]) -> Integer:
    """Create an Integer from an int, a decimal string or another Integer.

    Parameters
    ----------
    value : int, str or Integer
        Value to convert. Strings are parsed with ``Integer.from_string``.

    Returns
    -------
    Integer
        Arbitrary-precision integer.

    Raises
    ------
    IntegerError
        If ``value`` is a string that is not a decimal integer literal.

    Examples
    --------
    >>> integer("-123_456_789_012")
    Integer(-123456789012)
    """
    if isinstance(value, Integer):
        return value
    if isinstance(value, str):
        return Integer.from_string(value)
    return Integer(value)

"""
Saturating signed 64-bit integer arithmetic for data quantities.

Every value type of the package stores a signed 64-bit count of bits. Python ints are unbounded, so this
module pins results to the int64 domain: arithmetic saturates instead of wrapping, and the true minimum
-2**63 is a reserved sentinel that is never returned by any operation.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import operator
from dataclasses import dataclass
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value

# Constants ------------------------------------------------------------------------------------------------------------

MAX_INT64 = (1 << 63) - 1
MIN_INT64 = -(1 << 63)


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True, order=True)
class BitCount:
    """
    Immutable signed 64-bit count of bits with saturating arithmetic.

    Base class of Size, BitSize and Bandwidth. Binary operators accept operands of the very same type
    only, plus plain integers for scaling, so a Size never mixes silently with a Bandwidth. Results of
    addition, subtraction, negation and scaling are clamped to [MIN_INT64 + 1, MAX_INT64].

    Attributes:
        bits (int): Signed number of bits. MIN_INT64 is remapped to MAX_INT64 on construction.

    Raises:
        TypeError: bits is not an integer (bool and float included).
        OverflowError: bits is outside the signed 64-bit range.
    """
    bits: int = 0

    def __post_init__(self):
        bits = std_int64(self.bits)
        if bits == MIN_INT64:
            bits = MAX_INT64
        object.__setattr__(self, "bits", bits)

    def __add__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(saturate(self.bits + other.bits))

    def __sub__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(saturate(self.bits - other.bits))

    def __neg__(self) -> Self:
        return type(self)(saturate(-self.bits))

    def __pos__(self) -> Self:
        return self

    def __abs__(self) -> Self:
        return type(self)(int_abs(self.bits))

    def __mul__(self, other: int) -> Self:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return type(self)(saturate(self.bits * other))

    __rmul__ = __mul__

    def __floordiv__(self, other):
        """
        Floor division.

        Dividing by the same type gives a plain int ratio, dividing by an int gives a value of this type.
        """
        if type(other) is type(self):
            return self.bits // other.bits
        if isinstance(other, int) and not isinstance(other, bool):
            return type(self)(saturate(self.bits // other))
        return NotImplemented

    def __truediv__(self, other: Self) -> float:
        if type(other) is not type(self):
            return NotImplemented
        return self.bits / other.bits

    def __bool__(self) -> bool:
        return self.bits != 0

    def __int__(self) -> int:
        return self.bits

    def truncate(self, m: Self) -> Self:
        """
        Round towards zero to a multiple of m.

        The value is returned unchanged if m is zero or negative.
        """
        return type(self)(int_truncate(self.bits, self._modulus(m)))

    def round(self, m: Self) -> Self:
        """
        Round to the nearest multiple of m, halfway values away from zero.

        The value is returned unchanged if m is zero or negative. Results beyond the representable range
        saturate instead of overflowing.
        """
        return type(self)(int_round(self.bits, self._modulus(m)))

    def _modulus(self, m) -> int:
        if type(m) is not type(self):
            raise TypeError(f"{type(self).__name__} modulus expected, but found {fmt_type(m)}")
        return m.bits


# Methods --------------------------------------------------------------------------------------------------------------

def std_int64(value) -> int:
    """
    Convert an integer-like value to a plain Python int within the signed 64-bit range.

    Accepts Python int and any type implementing __index__, which covers NumPy integer scalars and
    similar third-party types. A data quantity is an exact count, so floats and Decimals are rejected
    rather than truncated.

    Args:
        value: int or an object implementing __index__.

    Returns:
        int: The value as a plain int.

    Raises:
        TypeError: value is a bool, a float, a str, None or any other type without __index__.
        OverflowError: value is outside [MIN_INT64, MAX_INT64].

    Examples:
        >>> std_int64(42)
        42
        >>> std_int64(numpy.int32(7))
        7
    """
    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported, got {fmt_value(value)}")

    if isinstance(value, int):
        number = int(value)
    elif hasattr(value, "__index__"):
        try:
            number = operator.index(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e
    else:
        raise TypeError(f"unsupported integer type: {fmt_type(value)}. "
                        f"Expected int or a type implementing __index__")

    if not MIN_INT64 <= number <= MAX_INT64:
        raise OverflowError(f"value {number} out of signed 64-bit range [{MIN_INT64}, {MAX_INT64}]")
    return number


def saturate(v: int) -> int:
    """Clamp v to [MIN_INT64 + 1, MAX_INT64]."""
    return max(MIN_INT64 + 1, min(MAX_INT64, v))


def int_abs(v: int) -> int:
    """Absolute value of v, MIN_INT64 maps to MAX_INT64."""
    if v >= 0:
        return v
    if v == MIN_INT64:
        return MAX_INT64
    return -v


def trunc_divmod(v: int, m: int) -> tuple[int, int]:
    """
    Quotient and remainder of v / m with the quotient truncated toward zero.

    The remainder takes the sign of the dividend, unlike builtin divmod().
    """
    q = abs(v) // abs(m)
    if (v < 0) != (m < 0):
        q = -q
    return q, v - q * m


def int_truncate(v: int, m: int) -> int:
    """Round v toward zero to a multiple of m. Returns v unchanged when m <= 0."""
    if m <= 0:
        return v
    return v - trunc_divmod(v, m)[1]


def int_round(v: int, m: int) -> int:
    """
    Round v to the nearest multiple of m, halfway values away from zero.

    Returns v unchanged when m <= 0. A result above MAX_INT64 saturates to MAX_INT64, a result at or
    below MIN_INT64 saturates to MIN_INT64 + 1.

    Examples:
        >>> int_round(1499, 1000)
        1000
        >>> int_round(-1500, 1000)
        -2000
    """
    if m <= 0:
        return v
    r = abs(v) % m
    if 2 * r < m:
        return v - r if v >= 0 else v + r
    if v >= 0:
        return min(v + m - r, MAX_INT64)
    return max(v - m + r, MIN_INT64 + 1)


def ratio(v: int, scale: int) -> float:
    """
    Value of v / scale as float.

    The whole part is converted separately from the remainder, so large values keep their integer
    digits exactly where a float can hold them.
    """
    q, r = trunc_divmod(v, scale)
    return float(q) + float(r) / float(scale)


def scale_fraction(r: int, l: int, unit: int) -> int:
    """
    Exact r * unit / l rounded half up, for non-negative integers.

    Used by the parser to turn a decimal fraction r / l of a unit into bits, and by the formatter to check
    that a shortened fraction parses back to the same bits.
    """
    return (2 * r * unit + l) // (2 * l)

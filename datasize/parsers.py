"""
Parse data size and bandwidth strings.

A size string is an optionally signed decimal number with an optional fraction, directly followed by a
unit suffix: "64KB", "-1.5GiB", ".5MB" or "8.888Mbit". Digits are ASCII only, units are matched
case-sensitively against a closed table, and no whitespace or trailing characters are permitted.

Fractions are converted to bits exactly, rounding half up to the nearest bit, so every string printed by
format_size() parses back to the same size.
Digits past the 64th fraction digit cannot change the result; they are validated and otherwise ignored.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Mapping

# Local ----------------------------------------------------------------------------------------------------------------
from .bandwidth import Bandwidth
from .bitsize import BitSize
from .log import get_logger
from .numeric import MAX_INT64, MIN_INT64, scale_fraction
from .size import Size
from .tools import fmt_type
from .units import BIT_SIZE_UNITS, SIZE_UNITS, UnitsConf

logger = get_logger(__name__)

# Unit scales are 2**a * 5**b with a, b < 64, so every rounding boundary of a fraction has at most this many
# decimal digits. Digits past it cannot change the parsed number of bits.
FRACTION_DIGITS = 64


# Classes --------------------------------------------------------------------------------------------------------------

class InvalidSizeError(ValueError):
    """
    Raised when a string is not a valid size.

    Attributes:
        value (str): The rejected input, verbatim.
    """

    def __init__(self, value: str, kind: str = "size"):
        self.value = value
        super().__init__(f"invalid {kind} '{value}'")


class InvalidBandwidthError(InvalidSizeError):
    """Raised when a string is not a valid bandwidth."""

    def __init__(self, value: str):
        super().__init__(value, kind="bandwidth")


# Methods --------------------------------------------------------------------------------------------------------------

def parse_size(s: str) -> Size:
    """
    Parse a size string such as "1.5GiB", "-64KB" or "8Mbit".

    Accepts decimal byte units (b kb mb gb tb pb), binary byte units (kib mib gib tib pib) in lower case or
    with upper case prefixes (B KB MB GB TB PB, KiB MiB GiB TiB PiB), and bit units (bit kbit mbit gbit tbit,
    Kbit Mbit Gbit Tbit).

    Raises:
        InvalidSizeError: s is malformed, has an unknown unit or overflows the representable range.
        TypeError: s is not a str.

    Examples:
        >>> parse_size("1.111MB") == parse_size("8.888Mbit")
        True
    """
    return Size(_parse_bits(s, SIZE_UNITS, "size"))


def parse_bit_size(s: str) -> BitSize:
    """
    Parse a bit size string such as "8.172Kbit". Only bit units are accepted.

    Raises:
        InvalidSizeError: s is malformed, has a byte or unknown unit or overflows.
        TypeError: s is not a str.
    """
    return BitSize(_parse_bits(s, BIT_SIZE_UNITS, "bit size"))


def parse_bandwidth(s: str) -> Bandwidth:
    """
    Parse a bandwidth string, a size followed by "/s", such as "1.5MB/s" or "100Mbit/s".

    Raises:
        InvalidBandwidthError: s does not end with "/s" or its size part is invalid.
        TypeError: s is not a str.
    """
    if not isinstance(s, str):
        raise TypeError(f"bandwidth must be a str, but found {fmt_type(s)}")

    suffix = UnitsConf.BANDWIDTH_SUFFIX
    if not s.endswith(suffix):
        raise InvalidBandwidthError(s)
    try:
        size = parse_size(s[:-len(suffix)])
    except InvalidSizeError as e:
        raise InvalidBandwidthError(s) from e
    return Bandwidth(size.bits)


# Helper Functions -----------------------------------------------------------------------------------------------------

def _parse_bits(s: str, unit_table: Mapping[str, int], kind: str) -> int:
    """Parse s into a signed number of bits using the given suffix table."""
    if not isinstance(s, str):
        raise TypeError(f"{kind} must be a str, but found {fmt_type(s)}")

    text = s
    negative = False
    if text[:1] in ("+", "-"):
        negative = text[0] == "-"
        text = text[1:]

    whole, frac, frac_digits = 0, 0, 0
    has_digits = has_dot = False
    for i, c in enumerate(text):
        if "0" <= c <= "9":
            has_digits = True
            if has_dot:
                if frac_digits < FRACTION_DIGITS:
                    frac = frac * 10 + ord(c) - ord("0")
                    frac_digits += 1
            elif whole <= MAX_INT64 + 1:
                # Past this bound the integer part overflows every unit, stop growing it
                whole = whole * 10 + ord(c) - ord("0")
        elif c == "." and not has_dot:
            has_dot = True
        else:
            unit = unit_table.get(text[i:])
            if not has_digits or unit is None:
                raise InvalidSizeError(s, kind)
            return _to_bits(s, negative, whole, frac, 10 ** frac_digits, unit, kind)

    # Ran out of input without a unit
    raise InvalidSizeError(s, kind)


def _to_bits(s: str, negative: bool, whole: int, frac: int, frac_scale: int, unit: int, kind: str) -> int:
    """
    Combine the parsed parts into a signed number of bits.

    An integer part beyond the range is an error. Overflow caused by the fraction saturates: to MAX_INT64
    above the range and to MIN_INT64 + 1 below it. Exactly MIN_INT64 is the reserved minimum and maps to
    MAX_INT64.
    """
    limit = MAX_INT64 + 1 if negative else MAX_INT64
    if whole * unit > limit:
        raise InvalidSizeError(s, kind)

    magnitude = whole * unit + scale_fraction(frac, frac_scale, unit)
    bits = -magnitude if negative else magnitude
    if bits > MAX_INT64:
        logger.debug(f"{kind} {s!r} saturated to {MAX_INT64} bits")
        return MAX_INT64
    if bits == MIN_INT64:
        # Reserved minimum, remapped to the maximum
        logger.debug(f"{kind} {s!r} mapped to {MAX_INT64} bits")
        return MAX_INT64
    if bits < MIN_INT64:
        logger.debug(f"{kind} {s!r} saturated to {MIN_INT64 + 1} bits")
        return MIN_INT64 + 1
    return bits

"""
Format data sizes and bandwidths as unit strings.

A size prints as an optionally signed decimal number followed by a unit suffix, such as "1.5GiB" or
"-8.888Mbit". The number uses the largest unit of the selected family that does not exceed the magnitude.

Precision -1 prints the fewest fractional digits that parse back to the very same number of bits, so for
every size s and every selector f:

    parse_size(format_size(s, f)) == s

Precision 0 prints the integer part only and precision N > 0 prints exactly N digits rounded half to even.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, replace
from itertools import count
from typing import TYPE_CHECKING, Any, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import BitCount, scale_fraction
from .tools import fmt_type, fmt_value
from .units import SizeFormat, UnitsConf

if TYPE_CHECKING:
    from .bandwidth import Bandwidth
    from .bitsize import BitSize
    from .size import Size


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class FormatOptions:
    """
    Reusable format selector and precision.

    Attributes:
        fmt (str)       : Format selector, one of SizeFormat values
        precision (int) : Fractional digits, -1 for the shortest exact representation

    Examples:
        >>> opts = FormatOptions.binary(precision=2)
        >>> opts.format(MB)
        '976.56KiB'
    """
    fmt: str = UnitsConf.SIZE_FORMAT
    precision: int = UnitsConf.PRECISION

    def __post_init__(self):
        if not isinstance(self.fmt, str):
            raise TypeError(f"fmt must be a str, but found {fmt_type(self.fmt)}")
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise TypeError(f"precision must be an int, but found {fmt_type(self.precision)}")
        if self.precision < -1:
            raise ValueError(f"precision must be >= -1, but found {fmt_value(self.precision)}")

    @classmethod
    def decimal(cls, precision: int = -1, *, upper: bool = True) -> Self:
        """Decimal byte units - KB, MB, GB..."""
        return cls(fmt=SizeFormat.DECIMAL_UPPER if upper else SizeFormat.DECIMAL, precision=precision)

    @classmethod
    def binary(cls, precision: int = -1, *, upper: bool = True) -> Self:
        """Binary byte units - KiB, MiB, GiB..."""
        return cls(fmt=SizeFormat.BINARY_UPPER if upper else SizeFormat.BINARY, precision=precision)

    @classmethod
    def bits(cls, precision: int = -1, *, upper: bool = True) -> Self:
        """Decimal bit units - Kbit, Mbit, Gbit..."""
        return cls(fmt=SizeFormat.BITS_UPPER if upper else SizeFormat.BITS, precision=precision)

    def merge(self, **kwargs) -> Self:
        """Return a copy with the given fields replaced."""
        return replace(self, **kwargs)

    def format(self, value: "Size | BitSize | Bandwidth") -> str:
        """Format a Size, BitSize or Bandwidth with these options."""
        from .bandwidth import Bandwidth
        from .bitsize import BitSize

        if isinstance(value, Bandwidth):
            return format_bandwidth(value, self.fmt, self.precision)
        if isinstance(value, BitSize):
            return format_bit_size(value, self.fmt, self.precision)
        return format_size(value, self.fmt, self.precision)


# Methods --------------------------------------------------------------------------------------------------------------

def format_size(size: "Size", fmt: str = UnitsConf.SIZE_FORMAT, prec: int = UnitsConf.PRECISION) -> str:
    """
    Format a size as a string with a unit suffix.

    Args:
        size: Size to format.
        fmt: Format selector - 'd', 'D' for decimal, 'b', 'B' for binary and 'i', 'I' for bit units.
            Lower case selectors print lower case suffixes.
        prec: Number of fractional digits, -1 for the shortest string that parses back to size.

    Returns:
        str: Formatted size, or "%" followed by fmt if fmt is not a known selector.

    Raises:
        TypeError: size is not a data quantity or prec is not an int.

    Examples:
        >>> format_size(MB + 111 * KB, "D")
        '1.111MB'
        >>> format_size(MB + 111 * KB, "d", 2)
        '1.11mb'
        >>> format_size(2 * TIB + 512 * MIB, "B", 4)
        '2.0005TiB'
    """
    return _format_bits(_as_bits(size), fmt, prec, UnitsConf.SUFFIXES)


def format_bit_size(size: "BitSize", fmt: str = UnitsConf.BIT_SIZE_FORMAT,
                    prec: int = UnitsConf.PRECISION) -> str:
    """
    Format a bit size as a string with a bit unit suffix.

    Only the bit selectors 'i' and 'I' are supported, any other selector yields "%" followed by fmt.

    Examples:
        >>> format_bit_size(MBIT + 111 * KBIT, "i", 2)
        '1.11mbit'
    """
    suffixes = {fmt: UnitsConf.SUFFIXES[fmt]} if fmt in UnitsConf.BIT_SIZE_FORMATS else {}
    return _format_bits(_as_bits(size), fmt, prec, suffixes)


def format_bandwidth(bandwidth: "Bandwidth", fmt: str = UnitsConf.BANDWIDTH_FORMAT,
                     prec: int = UnitsConf.PRECISION) -> str:
    """
    Format a bandwidth as a size per second, such as "1.5MB/s".

    Supports the same selectors as format_size.
    """
    return _format_bits(_as_bits(bandwidth), fmt, prec, UnitsConf.SUFFIXES) + UnitsConf.BANDWIDTH_SUFFIX


def parse_format_spec(spec: str, default: str) -> tuple[str, int]:
    """
    Split a __format__ spec of the form [selector][.precision] into selector and precision.

    Examples:
        >>> parse_format_spec("B.2", "D")
        ('B', 2)
        >>> parse_format_spec(".3", "D")
        ('D', 3)
    """
    fmt, dot, prec = spec.partition(".")
    if not dot:
        return fmt or default, UnitsConf.PRECISION
    try:
        precision = int(prec)
    except ValueError as e:
        raise ValueError(f"invalid format spec {spec!r}, expected [selector][.precision]") from e
    return fmt or default, precision


# Helper Functions -----------------------------------------------------------------------------------------------------

def _as_bits(value: Any) -> int:
    if not isinstance(value, BitCount):
        raise TypeError(f"data quantity expected, but found {fmt_type(value)}")
    return value.bits


def _format_bits(bits: int, fmt: str, prec: int, suffixes) -> str:
    if isinstance(prec, bool) or not isinstance(prec, int):
        raise TypeError(f"precision must be an int, but found {fmt_type(prec)}")

    units = suffixes.get(fmt) if isinstance(fmt, str) else None
    if units is None:
        return f"%{fmt}"
    if bits == 0:
        return UnitsConf.ZERO[fmt]

    magnitude = abs(bits)
    scale, suffix = units[-1]
    for scale, suffix in units:
        if magnitude >= scale:
            break
    return _fmt_number(bits, scale, prec) + suffix


def _fmt_number(v: int, base: int, prec: int) -> str:
    """Format v / base with prec fractional digits, -1 for the shortest exact fraction."""
    sign = "-" if v < 0 else ""
    whole, rem = divmod(abs(v), base)

    if rem == 0:
        if prec <= 0:
            return f"{sign}{whole}"
        return f"{sign}{whole}.{'0' * prec}"

    if prec < 0:
        digits, width = _shortest_fraction(rem, base)
        return f"{sign}{whole}.{digits:0{width}d}"

    if prec == 0:
        return f"{sign}{whole}"

    power = 10 ** prec
    scaled = _round_half_even(abs(v) * power, base)
    whole, frac = divmod(scaled, power)
    return f"{sign}{whole}.{frac:0{prec}d}"


def _shortest_fraction(rem: int, base: int) -> tuple[int, int]:
    """
    Fewest decimal digits of rem / base that scale back to exactly rem.

    Returns the digits as an int together with their count, leading zeros included in the count.
    """
    for width in count(1):
        power = 10 ** width
        digits = scale_fraction(rem, base, power)
        if scale_fraction(digits, power, base) == rem:
            return digits, width


def _round_half_even(n: int, d: int) -> int:
    q, r = divmod(n, d)
    if 2 * r > d or (2 * r == d and q % 2 == 1):
        q += 1
    return q

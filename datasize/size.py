"""
Size, an amount of data stored as a signed 64-bit number of bits.

Sizes are immutable and exact. Arithmetic saturates at the representable range, roughly +/-1024PiB, and
formatting prints sizes in bytes by default:

    >>> str(MB + 111 * KB)
    '1.111MB'
    >>> format(GIB + 512 * MIB, "B")
    '1.5GiB'
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import TYPE_CHECKING

# Local ----------------------------------------------------------------------------------------------------------------
from . import units
from .formatters import format_size, parse_format_spec
from .numeric import MAX_INT64, BitCount, ratio
from .units import UnitsConf

if TYPE_CHECKING:
    from .bitsize import BitSize


# Classes --------------------------------------------------------------------------------------------------------------

class Size(BitCount):
    """
    An amount of data, measured in bits and displayed in bytes.

    Size(8) is one byte. Multiply the unit constants to build sizes, e.g. 5 * MIB, and use the float
    accessors to read them back in any unit.
    """

    @property
    def bytes(self) -> float:
        return ratio(self.bits, units.BYTE)

    @property
    def kilobytes(self) -> float:
        return ratio(self.bits, units.KB)

    @property
    def megabytes(self) -> float:
        return ratio(self.bits, units.MB)

    @property
    def gigabytes(self) -> float:
        return ratio(self.bits, units.GB)

    @property
    def terabytes(self) -> float:
        return ratio(self.bits, units.TB)

    @property
    def petabytes(self) -> float:
        return ratio(self.bits, units.PB)

    @property
    def kibibytes(self) -> float:
        return ratio(self.bits, units.KIB)

    @property
    def mebibytes(self) -> float:
        return ratio(self.bits, units.MIB)

    @property
    def gibibytes(self) -> float:
        return ratio(self.bits, units.GIB)

    @property
    def tebibytes(self) -> float:
        return ratio(self.bits, units.TIB)

    @property
    def pebibytes(self) -> float:
        return ratio(self.bits, units.PIB)

    @property
    def kilobits(self) -> float:
        return ratio(self.bits, units.KBIT)

    @property
    def megabits(self) -> float:
        return ratio(self.bits, units.MBIT)

    @property
    def gigabits(self) -> float:
        return ratio(self.bits, units.GBIT)

    @property
    def terabits(self) -> float:
        return ratio(self.bits, units.TBIT)

    def to_bit_size(self) -> "BitSize":
        """The same amount of data as a BitSize."""
        from .bitsize import BitSize
        return BitSize(self.bits)

    def format(self, fmt: str = UnitsConf.SIZE_FORMAT, prec: int = UnitsConf.PRECISION) -> str:
        """Shortcut for format_size(self, fmt, prec)."""
        return format_size(self, fmt, prec)

    def __str__(self) -> str:
        return format_size(self)

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return format_size(self, *parse_format_spec(spec, UnitsConf.SIZE_FORMAT))


# Constants ------------------------------------------------------------------------------------------------------------

# @formatter:off
BIT  = Size(units.BIT)
KBIT = Size(units.KBIT)
MBIT = Size(units.MBIT)
GBIT = Size(units.GBIT)
TBIT = Size(units.TBIT)

BYTE = Size(units.BYTE)

KB = Size(units.KB)
MB = Size(units.MB)
GB = Size(units.GB)
TB = Size(units.TB)
PB = Size(units.PB)

KIB = Size(units.KIB)
MIB = Size(units.MIB)
GIB = Size(units.GIB)
TIB = Size(units.TIB)
PIB = Size(units.PIB)

MAX_SIZE = Size(MAX_INT64)
# @formatter:on

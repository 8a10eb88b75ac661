"""
Bandwidth, an amount of data per second.

A Bandwidth stores bits per second and reuses Size for everything numeric: accessors and rounding
reinterpret the value as a Size, and formatting prints a size with "/s" appended.

    >>> str(5 * MBYTE_PER_SECOND)
    '5MB/s'
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from . import units
from .formatters import format_bandwidth, parse_format_spec
from .numeric import BitCount
from .size import Size
from .units import UnitsConf


# Helper Functions -----------------------------------------------------------------------------------------------------

def _size_property(name: str) -> property:
    """Read-only accessor delegating to the Size property of the same name."""
    return property(lambda self: getattr(self.size, name), doc=f"Data per second in {name}.")


# Classes --------------------------------------------------------------------------------------------------------------

class Bandwidth(BitCount):
    """
    An amount of data per second, measured in bits per second.
    """

    bytes = _size_property("bytes")
    kilobytes = _size_property("kilobytes")
    megabytes = _size_property("megabytes")
    gigabytes = _size_property("gigabytes")
    terabytes = _size_property("terabytes")
    petabytes = _size_property("petabytes")
    kibibytes = _size_property("kibibytes")
    mebibytes = _size_property("mebibytes")
    gibibytes = _size_property("gibibytes")
    tebibytes = _size_property("tebibytes")
    pebibytes = _size_property("pebibytes")
    kilobits = _size_property("kilobits")
    megabits = _size_property("megabits")
    gigabits = _size_property("gigabits")
    terabits = _size_property("terabits")

    @property
    def size(self) -> Size:
        """The amount of data transferred in one second."""
        return Size(self.bits)

    def truncate(self, m: Self) -> Self:
        """Round towards zero to a multiple of m, see Size.truncate()."""
        return Bandwidth(self.size.truncate(Size(self._modulus(m))).bits)

    def round(self, m: Self) -> Self:
        """Round to the nearest multiple of m, see Size.round()."""
        return Bandwidth(self.size.round(Size(self._modulus(m))).bits)

    def __abs__(self) -> Self:
        return Bandwidth(abs(self.size).bits)

    def format(self, fmt: str = UnitsConf.BANDWIDTH_FORMAT, prec: int = UnitsConf.PRECISION) -> str:
        """Shortcut for format_bandwidth(self, fmt, prec)."""
        return format_bandwidth(self, fmt, prec)

    def __str__(self) -> str:
        return format_bandwidth(self)

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return format_bandwidth(self, *parse_format_spec(spec, UnitsConf.BANDWIDTH_FORMAT))


# Constants ------------------------------------------------------------------------------------------------------------

# @formatter:off
BIT_PER_SECOND  = Bandwidth(units.BIT)
KBIT_PER_SECOND = Bandwidth(units.KBIT)
MBIT_PER_SECOND = Bandwidth(units.MBIT)
GBIT_PER_SECOND = Bandwidth(units.GBIT)
TBIT_PER_SECOND = Bandwidth(units.TBIT)

BYTE_PER_SECOND  = Bandwidth(units.BYTE)
KBYTE_PER_SECOND = Bandwidth(units.KB)
MBYTE_PER_SECOND = Bandwidth(units.MB)
GBYTE_PER_SECOND = Bandwidth(units.GB)
TBYTE_PER_SECOND = Bandwidth(units.TB)

KIBYTE_PER_SECOND = Bandwidth(units.KIB)
MIBYTE_PER_SECOND = Bandwidth(units.MIB)
GIBYTE_PER_SECOND = Bandwidth(units.GIB)
TIBYTE_PER_SECOND = Bandwidth(units.TIB)
# @formatter:on

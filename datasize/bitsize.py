"""
BitSize, an amount of data counted in bits and displayed in bit units.
"""

# Local ----------------------------------------------------------------------------------------------------------------
from . import units
from .formatters import format_bit_size, parse_format_spec
from .numeric import MAX_INT64, BitCount, ratio, trunc_divmod
from .size import Size
from .units import UnitsConf


# Classes --------------------------------------------------------------------------------------------------------------

class BitSize(BitCount):
    """
    An amount of data in bits, formatted as bit, Kbit, Mbit...

    Shares the storage of Size, so converting between the two never loses or overflows anything.
    """

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

    def to_size(self) -> tuple[Size, "BitSize"]:
        """
        Split into whole bytes and the remaining bits.

        The remainder has the sign of the bit size and lies within [-7, 7], so that

            b == BitSize(size.bits) + rest

        Examples:
            >>> BitSize(8 * 1000 + 3).to_size()
            (Size(bits=8000), BitSize(bits=3))
        """
        whole, rest = trunc_divmod(self.bits, units.BYTE)
        return Size(whole * units.BYTE), BitSize(rest)

    def format(self, fmt: str = UnitsConf.BIT_SIZE_FORMAT, prec: int = UnitsConf.PRECISION) -> str:
        """Shortcut for format_bit_size(self, fmt, prec)."""
        return format_bit_size(self, fmt, prec)

    def __str__(self) -> str:
        return format_bit_size(self)

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return format_bit_size(self, *parse_format_spec(spec, UnitsConf.BIT_SIZE_FORMAT))


# Constants ------------------------------------------------------------------------------------------------------------

# @formatter:off
BIT  = BitSize(units.BIT)
KBIT = BitSize(units.KBIT)
MBIT = BitSize(units.MBIT)
GBIT = BitSize(units.GBIT)
TBIT = BitSize(units.TBIT)

MAX_BIT_SIZE = BitSize(MAX_INT64)
# @formatter:on

#
# Datasize Units
#

# Standard library -----------------------------------------------------------------------------------------------------
from enum import StrEnum, unique

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Constants ------------------------------------------------------------------------------------------------------------

# @formatter:off
BIT  = 1
KBIT = 1000 * BIT
MBIT = 1000 * KBIT
GBIT = 1000 * MBIT
TBIT = 1000 * GBIT

BYTE = 8 * BIT

KB = 1000 * BYTE
MB = 1000 * KB
GB = 1000 * MB
TB = 1000 * GB
PB = 1000 * TB

KIB = 1024 * BYTE
MIB = 1024 * KIB
GIB = 1024 * MIB
TIB = 1024 * GIB
PIB = 1024 * TIB

BIT_SIZE_UNITS = frozendict({
    "bit": BIT,
    "kbit": KBIT, "Kbit": KBIT,
    "mbit": MBIT, "Mbit": MBIT,
    "gbit": GBIT, "Gbit": GBIT,
    "tbit": TBIT, "Tbit": TBIT,
})

SIZE_UNITS = frozendict({
    "b": BYTE, "B": BYTE,
    "kb": KB, "KB": KB,
    "mb": MB, "MB": MB,
    "gb": GB, "GB": GB,
    "tb": TB, "TB": TB,
    "pb": PB, "PB": PB,
    "kib": KIB, "KiB": KIB,
    "mib": MIB, "MiB": MIB,
    "gib": GIB, "GiB": GIB,
    "tib": TIB, "TiB": TIB,
    "pib": PIB, "PiB": PIB,
    **BIT_SIZE_UNITS,
})
# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off
@unique
class SizeFormat(StrEnum):
    """
    Format selectors for sizes and bandwidths.

    Attributes:
        DECIMAL (str)       : Decimal byte units, lower case - 1.5mb
        DECIMAL_UPPER (str) : Decimal byte units - 1.5MB
        BINARY (str)        : Binary byte units, lower case - 1.5mib
        BINARY_UPPER (str)  : Binary byte units - 1.5MiB
        BITS (str)          : Decimal bit units, lower case - 1.5mbit
        BITS_UPPER (str)    : Decimal bit units - 1.5Mbit
    """
    DECIMAL = "d"
    DECIMAL_UPPER = "D"
    BINARY = "b"
    BINARY_UPPER = "B"
    BITS = "i"
    BITS_UPPER = "I"


class UnitsConf:
    """
    Static formatting configuration.

    SUFFIXES maps every format selector to its (scale, suffix) pairs from the largest unit down to the
    base unit. A size is printed in the largest unit not exceeding its magnitude.
    """
    SUFFIXES = frozendict({
        "d": ((PB, "pb"), (TB, "tb"), (GB, "gb"), (MB, "mb"), (KB, "kb"), (BYTE, "b")),
        "D": ((PB, "PB"), (TB, "TB"), (GB, "GB"), (MB, "MB"), (KB, "KB"), (BYTE, "B")),
        "b": ((PIB, "pib"), (TIB, "tib"), (GIB, "gib"), (MIB, "mib"), (KIB, "kib"), (BYTE, "b")),
        "B": ((PIB, "PiB"), (TIB, "TiB"), (GIB, "GiB"), (MIB, "MiB"), (KIB, "KiB"), (BYTE, "B")),
        "i": ((TBIT, "tbit"), (GBIT, "gbit"), (MBIT, "mbit"), (KBIT, "kbit"), (BIT, "bit")),
        "I": ((TBIT, "Tbit"), (GBIT, "Gbit"), (MBIT, "Mbit"), (KBIT, "Kbit"), (BIT, "bit")),
    })
    ZERO = frozendict({"d": "0b", "D": "0B", "b": "0b", "B": "0B", "i": "0bit", "I": "0bit"})

    BIT_SIZE_FORMATS = (SizeFormat.BITS, SizeFormat.BITS_UPPER)

    SIZE_FORMAT = SizeFormat.DECIMAL_UPPER
    BIT_SIZE_FORMAT = SizeFormat.BITS_UPPER
    BANDWIDTH_FORMAT = SizeFormat.DECIMAL_UPPER
    PRECISION = -1

    BANDWIDTH_SUFFIX = "/s"
# @formatter:on


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Every printed suffix must parse back to its own scale.
for _fmt in SizeFormat:
    if _fmt not in UnitsConf.SUFFIXES or _fmt not in UnitsConf.ZERO:
        raise AssertionError(f"Configuration Error: no suffixes for format {_fmt!r}")
    for _scale, _suffix in UnitsConf.SUFFIXES[_fmt]:
        if SIZE_UNITS.get(_suffix) != _scale:
            raise AssertionError(f"Configuration Error: suffix {_suffix!r} does not parse to {_scale}")

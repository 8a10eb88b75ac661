#
# Datasize - Formatters Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import random

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from datasize.bandwidth import Bandwidth
from datasize.bitsize import BitSize
from datasize.formatters import (
    FormatOptions,
    format_bandwidth, format_bit_size, format_size, parse_format_spec,
)
from datasize.numeric import MAX_INT64, MIN_INT64
from datasize.parsers import parse_bit_size, parse_size
from datasize.size import BIT, BYTE, KB, MB, GB, TBIT, MIB, GIB, TIB, PB, MAX_SIZE, Size
from datasize.units import SizeFormat

SELECTORS = ["d", "D", "b", "B", "i", "I"]


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFormatSize:

    @pytest.mark.parametrize(
        "size, fmt, expected",
        [
            pytest.param(Size(), "d", "0b", id="zero-d"),
            pytest.param(Size(), "D", "0B", id="zero-D"),
            pytest.param(Size(), "b", "0b", id="zero-b"),
            pytest.param(Size(), "B", "0B", id="zero-B"),
            pytest.param(Size(), "i", "0bit", id="zero-i"),
            pytest.param(Size(), "I", "0bit", id="zero-I"),
            pytest.param(MB + 111 * KB, "d", "1.111mb", id="mb-lower"),
            pytest.param(MB + 111 * KB, "D", "1.111MB", id="mb"),
            pytest.param(MB + 111 * KB, "b", "1.0595322mib", id="mib-lower"),
            pytest.param(MB + 111 * KB, "B", "1.0595322MiB", id="mib"),
            pytest.param(MB + 111 * KB, "i", "8.888mbit", id="mbit-lower"),
            pytest.param(MB + 111 * KB, "I", "8.888Mbit", id="mbit"),
            pytest.param(GIB + 512 * MIB, "D", "1.610612736GB", id="gib-as-gb"),
            pytest.param(GIB + 512 * MIB, "B", "1.5GiB", id="gib"),
            pytest.param(GIB + 512 * MIB, "I", "12.884901888Gbit", id="gib-as-gbit"),
            pytest.param(5 * TBIT, "D", "625GB", id="tbit-as-gb"),
            pytest.param(5 * TBIT, "B", "582.0766091347GiB", id="tbit-as-gib"),
            pytest.param(5 * TBIT, "I", "5Tbit", id="tbit"),
            pytest.param(BIT, "D", "0.1B", id="bit-as-byte"),
            pytest.param(BIT, "I", "1bit", id="bit"),
            pytest.param(-BYTE, "i", "-8bit", id="negative-byte-as-bits"),
            pytest.param(Size(-4), "D", "-0.5B", id="negative-half-byte"),
            pytest.param(Size(-1), "D", "-0.1B", id="negative-bit"),
            pytest.param(MAX_SIZE, "d", "1152.9215046068469759pb", id="max-d"),
            pytest.param(MAX_SIZE, "B", "1023.9999999999999999PiB", id="max-B"),
            pytest.param(MAX_SIZE, "I", "9223372.036854775807Tbit", id="max-I"),
            pytest.param(-MAX_SIZE, "D", "-1152.9215046068469759PB", id="min-D"),
        ],
    )
    def test_shortest(self, size, fmt, expected):
        assert format_size(size, fmt) == expected
        assert format_size(size, fmt, -1) == expected

    @pytest.mark.parametrize(
        "size, fmt, prec, expected",
        [
            pytest.param(MB + 111 * KB, "D", 2, "1.11MB", id="decimal"),
            pytest.param(MB + 111 * KB, "d", 2, "1.11mb", id="decimal-lower"),
            pytest.param(MB + 111 * KB, "B", 2, "1.06MiB", id="binary"),
            pytest.param(MB + 111 * KB, "I", 2, "8.89Mbit", id="bits"),
            pytest.param(2 * TIB + 512 * MIB, "B", 4, "2.0005TiB", id="tib"),
            pytest.param(MB, "D", 3, "1.000MB", id="exact-padded"),
            pytest.param(MB, "D", 0, "1MB", id="exact-integer"),
            pytest.param(Size(), "D", 3, "0B", id="zero-literal"),
            pytest.param(MB + 999 * KB, "D", 2, "2.00MB", id="carry"),
            pytest.param(MB + 999 * KB, "D", 0, "1MB", id="integer-truncates"),
            pytest.param(Size(-4), "D", 0, "-0B", id="integer-keeps-sign"),
            pytest.param(BIT, "D", 2, "0.12B", id="half-even-down"),
            pytest.param(3 * BIT, "D", 2, "0.38B", id="half-even-up"),
            pytest.param(-(MB + 111 * KB), "B", 2, "-1.06MiB", id="negative"),
            pytest.param(MAX_SIZE, "B", 2, "1024.00PiB", id="max-carry"),
            pytest.param(1000 * PB + BIT, "D", 20, "1000.00000000000000012500PB", id="long-precision"),
            pytest.param(MB + 111 * KB, "D", -5, "1.111MB", id="below-minus-one"),
        ],
    )
    def test_precision(self, size, fmt, prec, expected):
        assert format_size(size, fmt, prec) == expected

    @pytest.mark.parametrize(
        "fmt, expected",
        [
            pytest.param("x", "%x", id="unknown"),
            pytest.param("", "%", id="empty"),
            pytest.param("DD", "%DD", id="long"),
            pytest.param(7, "%7", id="non-str"),
        ],
    )
    def test_unknown_selector(self, fmt, expected):
        assert format_size(MB, fmt) == expected
        assert format_size(Size(), fmt) == expected

    def test_selector_enum(self):
        assert format_size(MB, SizeFormat.BINARY_UPPER) == "976.5625KiB"

    def test_invalid_arguments(self):
        with pytest.raises(TypeError, match=r"(?i)data quantity expected"):
            format_size(8000, "D")
        with pytest.raises(TypeError, match=r"(?i)precision must be an int"):
            format_size(MB, "D", 1.5)


class TestFormatBitSize:

    @pytest.mark.parametrize(
        "size, fmt, prec, expected",
        [
            pytest.param(BitSize(1_000_000), "I", -1, "1Mbit", id="mbit"),
            pytest.param(BitSize(1_111_000), "i", 2, "1.11mbit", id="mbit-lower"),
            pytest.param(BitSize(2_000_512_000_000), "I", 4, "2.0005Tbit", id="tbit"),
            pytest.param(BitSize(), "i", -1, "0bit", id="zero"),
            pytest.param(BitSize(1_000_000), "D", -1, "%D", id="byte-selector"),
            pytest.param(BitSize(1_000_000), "B", -1, "%B", id="binary-selector"),
        ],
    )
    def test_format_bit_size(self, size, fmt, prec, expected):
        assert format_bit_size(size, fmt, prec) == expected


class TestFormatBandwidth:

    @pytest.mark.parametrize(
        "bandwidth, fmt, expected",
        [
            pytest.param(Bandwidth(5 * 8_000_000), "D", "5MB/s", id="mb"),
            pytest.param(Bandwidth(8 * 1024), "B", "1KiB/s", id="kib"),
            pytest.param(Bandwidth(100_000_000), "I", "100Mbit/s", id="mbit"),
            pytest.param(Bandwidth(), "D", "0B/s", id="zero"),
            pytest.param(Bandwidth(8), "x", "%x/s", id="unknown"),
        ],
    )
    def test_format_bandwidth(self, bandwidth, fmt, expected):
        assert format_bandwidth(bandwidth, fmt) == expected


class TestRoundTrip:
    """Shortest output parses back to the exact same value."""

    @staticmethod
    def sample_bits() -> list[int]:
        rng = random.Random(108)
        values = [0, 1, -1, 7, 8, 9, MAX_INT64, MIN_INT64 + 1, 2 ** 53, 2 ** 53 + 1, 10 ** 18 + 1]
        values += [rng.randint(MIN_INT64 + 1, MAX_INT64) for _ in range(200)]
        values += [rng.randint(-10 ** 12, 10 ** 12) for _ in range(200)]
        return values

    @pytest.mark.parametrize("fmt", SELECTORS)
    def test_size(self, fmt):
        for bits in self.sample_bits():
            size = Size(bits)
            assert parse_size(format_size(size, fmt)) == size, bits

    @pytest.mark.parametrize("fmt", ["i", "I"])
    def test_bit_size(self, fmt):
        for bits in self.sample_bits():
            size = BitSize(bits)
            assert parse_bit_size(format_bit_size(size, fmt)) == size, bits


class TestFormatOptions:

    def test_defaults(self):
        opts = FormatOptions()
        assert opts.fmt == "D"
        assert opts.precision == -1
        assert opts.format(MB + 111 * KB) == "1.111MB"

    @pytest.mark.parametrize(
        "opts, expected",
        [
            pytest.param(FormatOptions.decimal(), "1.5GB", id="decimal"),
            pytest.param(FormatOptions.decimal(upper=False), "1.5gb", id="decimal-lower"),
            pytest.param(FormatOptions.binary(2), "1.40GiB", id="binary"),
            pytest.param(FormatOptions.bits(), "12Gbit", id="bits"),
            pytest.param(FormatOptions.bits(upper=False), "12gbit", id="bits-lower"),
        ],
    )
    def test_presets(self, opts, expected):
        assert opts.format(GB + 500 * MB) == expected

    def test_merge(self):
        opts = FormatOptions.binary().merge(precision=3)
        assert opts == FormatOptions(fmt="B", precision=3)
        assert FormatOptions.binary().precision == -1

    def test_dispatch(self):
        opts = FormatOptions.bits(1)
        assert opts.format(MB) == "8.0Mbit"
        assert opts.format(BitSize(1_500)) == "1.5Kbit"
        assert opts.format(Bandwidth(1_500)) == "1.5Kbit/s"
        assert FormatOptions().format(BitSize(1_500)) == "%D"

    @pytest.mark.parametrize(
        "kwargs, exc",
        [
            pytest.param({"precision": -2}, ValueError, id="precision-below"),
            pytest.param({"precision": 1.0}, TypeError, id="precision-float"),
            pytest.param({"precision": True}, TypeError, id="precision-bool"),
            pytest.param({"fmt": None}, TypeError, id="fmt-none"),
        ],
    )
    def test_invalid(self, kwargs, exc):
        with pytest.raises(exc):
            FormatOptions(**kwargs)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            FormatOptions().precision = 2


class TestParseFormatSpec:

    @pytest.mark.parametrize(
        "spec, expected",
        [
            pytest.param("B", ("B", -1), id="selector"),
            pytest.param("B.2", ("B", 2), id="selector-precision"),
            pytest.param(".3", ("D", 3), id="precision"),
            pytest.param("D.-1", ("D", -1), id="shortest"),
        ],
    )
    def test_parse(self, spec, expected):
        assert parse_format_spec(spec, "D") == expected

    def test_invalid(self):
        with pytest.raises(ValueError, match=r"(?i)invalid format spec"):
            parse_format_spec("B.", "D")

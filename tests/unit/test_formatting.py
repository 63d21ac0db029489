"""Unit tests for display and SQL-literal formatting."""

from datetime import datetime, timezone

import pytest

from anyconv.formatting import aligner, pretty_string, to_clickhouse
from anyconv.values import DynamicValue, Kind

JAN_31 = datetime(2024, 1, 31, tzinfo=timezone.utc)
UINT64_MAX = 2**64 - 1


class TestPrettyString:
    """Test pretty_string."""

    def test_integers(self):
        """Test thousands separators."""
        assert pretty_string(1234567) == "1,234,567"
        assert pretty_string(DynamicValue(kind=Kind.INT32, value=-1000)) == "-1,000"
        assert pretty_string(12) == "12"

    def test_unsigned_64_bit_integers(self):
        """Test ints wider than int64 are still formatted."""
        assert pretty_string(UINT64_MAX) == "18,446,744,073,709,551,615"

    @pytest.mark.parametrize("x,expected", [
        (0.05, "0.0500"),
        (-0.05, "-0.0500"),
        (0.5, "0.500"),
        (5.0, "5.00"),
        (12.345, "12.3"),
        (1500.0, "1500.0"),
    ])
    def test_float_decimals_by_magnitude(self, x, expected):
        """Test fewer decimals for larger magnitudes."""
        assert pretty_string(x) == expected

    def test_float32(self):
        """Test single-precision values use the same tiers."""
        assert pretty_string(DynamicValue(kind=Kind.FLOAT32, value=0.5)) == "0.500"

    def test_other_kinds(self):
        """Test strings, dates, absent and unsupported values."""
        assert pretty_string("abc") == "abc"
        assert pretty_string(JAN_31) == "2024-01-31"
        assert pretty_string(None) == ""
        assert pretty_string(True) == ""


class TestToClickHouse:
    """Test to_clickhouse."""

    def test_numbers(self):
        """Test numbers are written verbatim."""
        assert to_clickhouse(42) == "42"
        assert to_clickhouse(1.5) == "1.5"
        assert to_clickhouse(DynamicValue(kind=Kind.INT64, value=-3)) == "-3"
        assert to_clickhouse(DynamicValue(kind=Kind.FLOAT32, value=0.1)) == "0.1"

    def test_unsigned_64_bit_integers(self):
        """Test ints wider than int64 are written verbatim."""
        assert to_clickhouse(UINT64_MAX) == "18446744073709551615"

    def test_strings_are_quoted(self):
        """Test quoting and escaping of strings."""
        assert to_clickhouse("abc") == "'abc'"
        assert to_clickhouse("O'Brien") == "'O\\'Brien'"

    def test_dates(self):
        """Test dates use the compact layout by default."""
        assert to_clickhouse(JAN_31) == "'20240131'"
        assert to_clickhouse(JAN_31, date_format="%Y-%m-%d") == "'2024-01-31'"

    def test_unsupported(self):
        """Test values with no literal form."""
        assert to_clickhouse(None) == ""
        assert to_clickhouse([1, 2]) == ""


class TestAligner:
    """Test aligner."""

    def test_columns_line_up(self):
        """Test padding after the left column."""
        assert aligner(["a", "bbb"], [1, 2], 2) == ["a    1", "bbb  2"]

    def test_length_mismatch(self):
        """Test sequences of different length."""
        assert aligner([1], [1, 2], 1) is None
        assert aligner(None, [1], 1) is None

    def test_empty(self):
        """Test empty input."""
        assert aligner([], [], 3) == []

"""Tests for duration parsing and normalization."""

import pytest
from structlog.testing import capture_logs

from timeunit import (
    InvalidFormatError,
    NegativeValueError,
    TimeUnitType,
    UnsupportedUnitSuffixError,
    is_valid_unit_suffix,
    normalize,
    normalized_value,
    parse_duration,
    split_duration,
)


class TestParseDuration:
    """Tests for parse_duration function."""

    def test_milliseconds(self) -> None:
        """Test parsing milliseconds, which use an uppercase S."""
        assert parse_duration("100S") == 100
        assert parse_duration("1S") == 1
        assert parse_duration("0S") == 0

    def test_seconds(self) -> None:
        """Test parsing seconds."""
        assert parse_duration("1s") == 1000
        assert parse_duration("30s") == 30000
        assert parse_duration("0s") == 0

    def test_minutes(self) -> None:
        """Test parsing minutes."""
        assert parse_duration("1m") == 60_000
        assert parse_duration("5m") == 300_000
        assert parse_duration("0m") == 0

    def test_hours(self) -> None:
        """Test parsing hours."""
        assert parse_duration("1h") == 3_600_000
        assert parse_duration("2h") == 7_200_000
        assert parse_duration("0h") == 0

    def test_days(self) -> None:
        """Test parsing days."""
        assert parse_duration("1d") == 86_400_000
        assert parse_duration("7d") == 604_800_000

    def test_weeks(self) -> None:
        """Test parsing weeks."""
        assert parse_duration("1w") == 604_800_000
        assert parse_duration("19w") == 19 * 604_800_000

    def test_integer_passthrough(self) -> None:
        """Test that integers pass through unchanged."""
        assert parse_duration(1000) == 1000
        assert parse_duration(0) == 0
        assert parse_duration(999999) == 999999

    def test_negative_integer(self) -> None:
        """Test that negative counts are rejected."""
        with pytest.raises(NegativeValueError, match="Invalid duration"):
            parse_duration(-1)

    def test_bool_rejected(self) -> None:
        """Test that bools are not treated as millisecond counts."""
        with pytest.raises(TypeError):
            parse_duration(True)

    def test_invalid_format(self) -> None:
        """Test that invalid formats raise InvalidFormatError."""
        for text in ["invalid", "s10", "", "10", "5", "5mm", "4SS", "4srt", "655ss"]:
            with pytest.raises(InvalidFormatError, match="Invalid duration"):
                parse_duration(text)

    def test_invalid_format_is_value_error(self) -> None:
        """Test that parse failures can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_duration("10x")


class TestSplitDuration:
    """Tests for the strict compact-form grammar."""

    def test_returns_number_and_unit(self) -> None:
        """Test splitting a valid value."""
        assert split_duration("90m") == (90, TimeUnitType.MINUTES)
        assert split_duration("250S") == (250, TimeUnitType.MILLISECONDS)
        assert split_duration("250s") == (250, TimeUnitType.SECONDS)

    def test_too_short(self) -> None:
        """Test that a single character is rejected."""
        with pytest.raises(InvalidFormatError, match="too short"):
            split_duration("5")

    def test_leading_zeros_rejected(self) -> None:
        """Test that non-canonical numbers are rejected."""
        with pytest.raises(InvalidFormatError, match="canonical"):
            split_duration("05m")
        with pytest.raises(InvalidFormatError, match="canonical"):
            split_duration("00S")

    def test_signs_and_whitespace_rejected(self) -> None:
        """Test that only bare ASCII digits are accepted."""
        for text in ["-5m", "+5m", " 5m", "5 m", "5m ", "1.5h", "５m"]:
            with pytest.raises(InvalidFormatError):
                split_duration(text)

    def test_unsupported_suffix(self) -> None:
        """Test that an unknown unit character is reported as such."""
        with pytest.raises(UnsupportedUnitSuffixError) as exc_info:
            split_duration("6a")
        assert exc_info.value.suffix == "a"
        assert exc_info.value.value == "6a"

    def test_calendar_units_unsupported(self) -> None:
        """Test that months and years are not units."""
        for text in ["6M", "6y", "6W", "6D", "6H"]:
            with pytest.raises(UnsupportedUnitSuffixError):
                split_duration(text)

    def test_unsupported_suffix_is_invalid_format(self) -> None:
        """Test that catching InvalidFormatError covers every parse failure."""
        with pytest.raises(InvalidFormatError):
            split_duration("6a")

    def test_non_string(self) -> None:
        """Test that non-string input is a TypeError."""
        with pytest.raises(TypeError):
            split_duration(5)  # type: ignore[arg-type]

    def test_rejection_is_logged(self) -> None:
        """Test that rejected input is logged at debug level."""
        with capture_logs() as logs:
            with pytest.raises(InvalidFormatError):
                split_duration("5mm")

        assert logs[0]["event"] == "time_unit_parse_rejected"
        assert logs[0]["value"] == "5mm"
        assert logs[0]["log_level"] == "debug"


class TestIsValidUnitSuffix:
    """Tests for is_valid_unit_suffix function."""

    def test_valid_suffixes(self) -> None:
        """Test every supported suffix."""
        for suffix in "Ssmhdw":
            assert is_valid_unit_suffix(suffix)

    def test_invalid_suffixes(self) -> None:
        """Test characters outside the supported set."""
        for suffix in ["a", "M", "y", "W", "", "ss", "5"]:
            assert not is_valid_unit_suffix(suffix)

    def test_non_string(self) -> None:
        """Test that non-strings are simply invalid."""
        assert not is_valid_unit_suffix(None)
        assert not is_valid_unit_suffix(1)


class TestNormalize:
    """Tests for the largest-whole-unit normalization."""

    @pytest.mark.parametrize(
        ("milliseconds", "expected"),
        [
            (0, "0S"),
            (10, "10S"),
            (587, "587S"),
            (1000, "1s"),
            (60000, "1m"),
            (90000, "90s"),
            (180000, "3m"),
            (600000, "10m"),
            (2650000, "2650s"),
            (3600000, "1h"),
            (4000000, "4000s"),
            (5399000, "5399s"),
            (5400000, "90m"),
            (7200000, "2h"),
            (86400000, "1d"),
            (108000000, "30h"),
            (259200000, "3d"),
            (604800000, "1w"),
            (1209600000, "2w"),
        ],
    )
    def test_normalized_value(self, milliseconds: int, expected: str) -> None:
        """Test that the largest exact unit is chosen."""
        assert normalized_value(milliseconds) == expected

    def test_prefers_hours_over_minutes(self) -> None:
        """Test that an hour is reported in hours, not 60 minutes."""
        assert normalize(3_600_000) == (1, TimeUnitType.HOURS)

    def test_falls_back_to_seconds(self) -> None:
        """Test a value no larger unit divides."""
        assert normalize(5_399_000) == (5399, TimeUnitType.SECONDS)

    def test_zero(self) -> None:
        """Test that zero falls through to milliseconds."""
        assert normalize(0) == (0, TimeUnitType.MILLISECONDS)

    def test_negative(self) -> None:
        """Test that negative counts are rejected."""
        with pytest.raises(NegativeValueError):
            normalize(-1)

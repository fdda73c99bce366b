# tests/unit/core/test_duration.py
# Unit tests for duration parsing & HH:MM:SS formatting

import pytest

from countdown.core.duration import duration_from_fields, format_hms, parse_clock
from countdown.core.exceptions import InvalidDurationError


# * Test HH:MM:SS formatting
class TestFormatHms:

    @pytest.mark.parametrize(
        "ms, expected",
        [
            (0, "00:00:00"),
            (999, "00:00:00"),
            (1000, "00:00:01"),
            (59_999, "00:00:59"),
            (60_000, "00:01:00"),
            (3_661_000, "01:01:01"),
            (86_399_000, "23:59:59"),
            (360_000_000, "100:00:00"),
        ],
    )
    def test_formats(self, ms, expected):
        assert format_hms(ms) == expected

    # * Negative input is rejected
    def test_negative_rejected(self):
        with pytest.raises(InvalidDurationError):
            format_hms(-1)


# * Test conversion of input fields to milliseconds
class TestDurationFromFields:

    # * Weighted sum of hours, minutes & seconds
    def test_converts_ints(self):
        assert duration_from_fields(1, 1, 1) == 3_661_000
        assert duration_from_fields(0, 0, 5) == 5000

    # * Numeric strings are accepted, whitespace trimmed
    def test_converts_strings(self):
        assert duration_from_fields("2", " 30 ", "0") == 2 * 3_600_000 + 30 * 60_000

    # * Blank or missing fields count as zero
    def test_blank_fields_are_zero(self):
        assert duration_from_fields("", None, "7") == 7000
        assert duration_from_fields() == 0

    # * Fields are not range-limited (90 minutes is fine)
    def test_unnormalized_fields(self):
        assert duration_from_fields(0, 90, 0) == 5_400_000

    # * Non-numeric input is rejected w/ the offending value attached
    @pytest.mark.parametrize("bad", ["abc", "1.5", "-3", "1e3", "²"])
    def test_non_numeric_rejected(self, bad):
        with pytest.raises(InvalidDurationError) as exc_info:
            duration_from_fields(0, bad, 0)
        assert exc_info.value.value == bad
        assert "minutes" in str(exc_info.value)

    # * Negative ints & bools are rejected
    def test_negative_and_bool_rejected(self):
        with pytest.raises(InvalidDurationError):
            duration_from_fields(-1, 0, 0)
        with pytest.raises(InvalidDurationError):
            duration_from_fields(0, 0, True)


# * Test clock shorthand parsing
class TestParseClock:

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("45", 45_000),
            ("1:30", 90_000),
            ("01:01:01", 3_661_000),
            ("0:0:0", 0),
            ("90", 90_000),
        ],
    )
    def test_parses(self, text, expected):
        assert parse_clock(text) == expected

    @pytest.mark.parametrize("bad", ["", "1:2:3:4", "1::2", "a:30", ":30"])
    def test_rejects(self, bad):
        with pytest.raises(InvalidDurationError):
            parse_clock(bad)

"""
Unit Tests for Validation Rule Primitives.

Test Aspects Covered:
    ✅ Business Logic: presence, range, length, format, precision
    ✅ Parsing: ISO 8601 and regional dates, invariant and regional numbers
    ✅ Edge Cases: Blank input, boundaries, ambiguous separators
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from validated_primitives.config.models import ParsingConfig
from validated_primitives.validation import rules
from validated_primitives.validation.errors import ErrorCode


class TestRequired:
    """Test cases for the presence rule."""

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_missing_values_fail(self, value) -> None:
        """
        SCENARIO: None, empty or whitespace-only input
        EXPECTED: Required error
        """
        error = rules.required(value, "Name")

        assert error is not None
        assert error.code == ErrorCode.REQUIRED
        assert error.property_name == "Name"

    @pytest.mark.parametrize("value", ["x", 0, Decimal("0")])
    def test_present_values_pass(self, value) -> None:
        """
        SCENARIO: Non-blank string or a number (including zero)
        EXPECTED: No error
        """
        assert rules.required(value, "Name") is None

    def test_custom_message(self) -> None:
        error = rules.required(None, "Code", "Code must be provided.")

        assert error is not None
        assert error.message == "Code must be provided."


class TestInRange:
    """Test cases for the range rule."""

    def test_inclusive_bounds_accept_endpoints(self) -> None:
        """
        SCENARIO: Value equals min or max with inclusive bounds
        EXPECTED: No error
        """
        assert rules.in_range(1, 1, 10, "N") is None
        assert rules.in_range(10, 1, 10, "N") is None

    def test_exclusive_bounds_reject_endpoints(self) -> None:
        """
        SCENARIO: Value equals min or max with exclusive bounds
        EXPECTED: OutOfRange error
        """
        low = rules.in_range(1, 1, 10, "N", min_inclusive=False)
        high = rules.in_range(10, 1, 10, "N", max_inclusive=False)

        assert low is not None and low.code == ErrorCode.OUT_OF_RANGE
        assert high is not None and high.code == ErrorCode.OUT_OF_RANGE

    def test_outside_range(self) -> None:
        """
        SCENARIO: Value below min
        EXPECTED: Error message shows the bounds and the value
        """
        error = rules.in_range(0, 1, 10, "N", max_inclusive=False)

        assert error is not None
        assert "[1, 10)" in error.message
        assert "got 0" in error.message

    def test_custom_code(self) -> None:
        error = rules.in_range(13, 1, 12, "Month", code=ErrorCode.INVALID_MONTH)

        assert error is not None
        assert error.code == ErrorCode.INVALID_MONTH


class TestLength:
    """Test cases for the length rule."""

    def test_allowed_lengths(self) -> None:
        """
        SCENARIO: Only 8 or 11 characters permitted
        EXPECTED: 8 and 11 pass, 9 fails with InvalidLength
        """
        assert rules.length("A" * 8, "Code", allowed=(8, 11)) is None
        assert rules.length("A" * 11, "Code", allowed=(8, 11)) is None

        error = rules.length("A" * 9, "Code", allowed=(8, 11))
        assert error is not None
        assert error.code == ErrorCode.INVALID_LENGTH
        assert "8 or 11" in error.message

    def test_min_max_window(self) -> None:
        """
        SCENARIO: Length window of 2..4
        EXPECTED: Lengths outside the window fail
        """
        assert rules.length("abc", "F", minimum=2, maximum=4) is None
        assert rules.length("a", "F", minimum=2, maximum=4) is not None
        assert rules.length("abcde", "F", minimum=2, maximum=4) is not None


class TestFormat:
    """Test cases for matches and character_class."""

    def test_matches_full_pattern(self) -> None:
        """
        SCENARIO: Pattern must match the whole value
        EXPECTED: Partial matches fail with InvalidFormat
        """
        pattern = re.compile(r"\d{3}")

        assert rules.matches("123", pattern, "F") is None
        error = rules.matches("1234", pattern, "F")
        assert error is not None
        assert error.code == ErrorCode.INVALID_FORMAT

    def test_matches_accepts_string_pattern(self) -> None:
        assert rules.matches("AB", r"[A-Z]+", "F") is None

    def test_character_class(self) -> None:
        """
        SCENARIO: Segment restricted to letters
        EXPECTED: Digits rejected, custom code carried through
        """
        assert rules.character_class("DEUT", rules.LETTERS, "F") is None

        error = rules.character_class(
            "DE1T", rules.LETTERS, "F", code=ErrorCode.INVALID_INSTITUTION_CODE
        )
        assert error is not None
        assert error.code == ErrorCode.INVALID_INSTITUTION_CODE

    def test_character_class_rejects_empty(self) -> None:
        assert rules.character_class("", rules.ALPHANUMERIC, "F") is not None

    def test_character_class_rejects_lowercase(self) -> None:
        assert rules.character_class("deut", rules.LETTERS, "F") is not None


class TestDecimalPlaces:
    """Test cases for the precision rule."""

    def test_within_precision(self) -> None:
        assert rules.decimal_places(Decimal("12.34"), 2, "P") is None
        assert rules.decimal_places(Decimal("100"), 0, "P") is None

    def test_trailing_zeros_ignored(self) -> None:
        """
        SCENARIO: 12.50 with one allowed decimal place
        EXPECTED: Passes (trailing zero is not significant)
        """
        assert rules.decimal_places(Decimal("12.50"), 1, "P") is None

    def test_too_precise(self) -> None:
        error = rules.decimal_places(Decimal("1.234"), 2, "P")

        assert error is not None
        assert error.code == ErrorCode.DECIMAL_PLACES


class TestParseDate:
    """Test cases for the date parse rule."""

    def test_iso_date(self) -> None:
        """
        SCENARIO: ISO 8601 calendar date
        EXPECTED: Plain date returned
        """
        value, error = rules.parse_date("2024-06-15", "D")

        assert error is None
        assert value == date(2024, 6, 15)
        assert not isinstance(value, datetime)

    def test_iso_datetime(self) -> None:
        """
        SCENARIO: ISO 8601 with time of day
        EXPECTED: datetime keeps the time
        """
        value, error = rules.parse_date("2024-06-15T10:30:00", "D")

        assert error is None
        assert value == datetime(2024, 6, 15, 10, 30)

    def test_iso_datetime_with_offset(self) -> None:
        value, error = rules.parse_date("2024-06-15T10:30:00+02:00", "D")

        assert error is None
        assert value == datetime(
            2024, 6, 15, 10, 30, tzinfo=timezone(timedelta(hours=2))
        )

    def test_surrounding_whitespace(self) -> None:
        value, error = rules.parse_date("  2024-06-15  ", "D")

        assert error is None
        assert value == date(2024, 6, 15)

    @pytest.mark.parametrize(
        "text",
        ["06/15/2024", "15/06/2024", "15.06.2024", "15 June 2024", "June 15, 2024"],
    )
    def test_regional_formats(self, text: str) -> None:
        """
        SCENARIO: Common regional spellings of 15 June 2024
        EXPECTED: All parse to the same date
        """
        value, error = rules.parse_date(text, "D")

        assert error is None
        assert value == date(2024, 6, 15)

    def test_ambiguous_date_month_first_by_default(
        self, default_parsing: ParsingConfig
    ) -> None:
        """
        SCENARIO: 03/04/2024 with default settings
        EXPECTED: Read as March 4th
        """
        value, _ = rules.parse_date("03/04/2024", "D", default_parsing)

        assert value == date(2024, 3, 4)

    def test_ambiguous_date_day_first(self, day_first_parsing: ParsingConfig) -> None:
        """
        SCENARIO: 03/04/2024 with day-first settings
        EXPECTED: Read as April 3rd
        """
        value, _ = rules.parse_date("03/04/2024", "D", day_first_parsing)

        assert value == date(2024, 4, 3)

    def test_regional_datetime(self) -> None:
        value, error = rules.parse_date("06/15/2024 14:30", "D")

        assert error is None
        assert value == datetime(2024, 6, 15, 14, 30)

    @pytest.mark.parametrize("text", ["not-a-date", "", "2024-02-30", "32/13/2024", None])
    def test_unparseable(self, text) -> None:
        """
        SCENARIO: Text that is no date in any accepted format
        EXPECTED: InvalidDateString error, no value
        """
        value, error = rules.parse_date(text, "When")

        assert value is None
        assert error is not None
        assert error.code == ErrorCode.INVALID_DATE_STRING
        assert error.property_name == "When"


class TestParseDecimal:
    """Test cases for the number parse rule."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("12.5", Decimal("12.5")),
            ("-3", Decimal("-3")),
            ("1e3", Decimal("1000")),
            ("12,5", Decimal("12.5")),
            ("1,234.56", Decimal("1234.56")),
            ("1.234,56", Decimal("1234.56")),
            ("1 234,56", Decimal("1234.56")),
            ("1,234,567", Decimal("1234567")),
            ("1.234.567", Decimal("1234567")),
            ("1'234.50", Decimal("1234.50")),
        ],
    )
    def test_accepted_numbers(self, text: str, expected: Decimal) -> None:
        """
        SCENARIO: Invariant and regional number spellings
        EXPECTED: Parsed to the same Decimal
        """
        value, error = rules.parse_decimal(text, "N")

        assert error is None
        assert value == expected

    @pytest.mark.parametrize("text", ["abc", "", "NaN", "Infinity", "1,2,3.4.5", None])
    def test_rejected_numbers(self, text) -> None:
        """
        SCENARIO: Non-numeric or non-finite text
        EXPECTED: InvalidNumberString error
        """
        value, error = rules.parse_decimal(text, "N")

        assert value is None
        assert error is not None
        assert error.code == ErrorCode.INVALID_NUMBER_STRING

    def test_decimal_comma_disabled(self) -> None:
        """
        SCENARIO: '12,5' when a lone comma is not a decimal separator
        EXPECTED: Rejected (not a valid thousands grouping either)
        """
        parsing = ParsingConfig(decimal_comma=False)

        value, error = rules.parse_decimal("12,5", "N", parsing)

        assert value is None
        assert error is not None

    def test_grouping_comma_when_decimal_comma_disabled(self) -> None:
        parsing = ParsingConfig(decimal_comma=False)

        value, error = rules.parse_decimal("1,234", "N", parsing)

        assert error is None
        assert value == Decimal("1234")

"""Tests for the two-stage directive parser."""

import logging
from datetime import datetime

import pytest

from humanformat.diagnostics import DiagnosticCode
from humanformat.enums import DateField, DateTimePattern
from humanformat.syntax.compiler import compile_pattern
from humanformat.syntax.directives import AmPmMarker, Literal, NumericField
from humanformat.syntax.parser import DateTimeFields, parse_fields, resolve_fields


def _fields(text: str, pattern: DateTimePattern) -> DateTimeFields:
    fields, error = parse_fields(text, compile_pattern(pattern))
    assert error is None
    assert fields is not None
    return fields


class TestParseFields:
    """Test stage 1: text to fields."""

    def test_short_date(self) -> None:
        """SHORT_DATE yields day, month and year only."""
        fields = _fields("09:12:2000", DateTimePattern.SHORT_DATE)
        assert fields.as_dict() == {"day": 9, "month": 12, "year": 2000}

    def test_long_date_time_millis(self) -> None:
        """Names, 12-hour clock, marker and fraction are all recovered."""
        fields = _fields("Sat, Dec 09, 2000 07:30:45.123 PM", DateTimePattern.LONG_DATE_TIME_MILLIS)
        assert fields.day_of_week == 6
        assert fields.month == 12
        assert fields.hour_12 == 7
        assert fields.is_pm is True
        assert fields.microsecond == 123_000

    def test_two_digit_year_expanded(self) -> None:
        """'Dec 00' resolves to year 2000 in the 1960 window."""
        assert _fields("Dec 00", DateTimePattern.SHORT_MONTH_YEAR).year == 2000
        assert _fields("Dec 60", DateTimePattern.SHORT_MONTH_YEAR).year == 1960

    def test_signed_full_year_accepted(self) -> None:
        """Out-of-window years parse from their '+YYYY' form."""
        assert _fields("Mar +1959", DateTimePattern.SHORT_MONTH_YEAR).year == 1959

    def test_marker_prefix_does_not_shadow(self) -> None:
        """When one marker prefixes the other, the longer one is tried first."""
        directives = (NumericField(DateField.HOUR_12, 2), Literal(" "), AmPmMarker("P", "PM"))
        fields, error = parse_fields("07 PM", directives)
        assert error is None
        assert fields is not None
        assert fields.is_pm is True

    def test_has_full_date(self) -> None:
        """has_full_date requires a year plus month/day or day-of-year."""
        assert _fields("09:12:2000", DateTimePattern.SHORT_DATE).has_full_date
        assert _fields("344", DateTimePattern.DAY_OF_YEAR).has_full_date is False
        assert _fields("Dec 09", DateTimePattern.MONTH_DAY).has_full_date is False


class TestParseFieldErrors:
    """Test stage 1 error codes and positions."""

    @pytest.mark.parametrize(
        ("text", "pattern", "code", "position"),
        [
            ("9:12:2000", DateTimePattern.SHORT_DATE, DiagnosticCode.PARSE_DIGITS_EXPECTED, 0),
            ("09-12-2000", DateTimePattern.SHORT_DATE, DiagnosticCode.PARSE_LITERAL_MISMATCH, 2),
            ("09:12", DateTimePattern.SHORT_DATE, DiagnosticCode.PARSE_UNEXPECTED_END, 5),
            ("09:12:2000 ", DateTimePattern.SHORT_DATE, DiagnosticCode.PARSE_TRAILING_INPUT, 10),
            ("dec 2000", DateTimePattern.MONTH_YEAR, DiagnosticCode.PARSE_NAME_UNKNOWN, 0),
            ("07:30:45 am", DateTimePattern.TIME_12, DiagnosticCode.PARSE_MARKER_UNKNOWN, 9),
            ("07:30:45", DateTimePattern.TIME_12, DiagnosticCode.PARSE_UNEXPECTED_END, 8),
            ("Dec +19", DateTimePattern.SHORT_MONTH_YEAR, DiagnosticCode.PARSE_DIGITS_EXPECTED, 5),
            ("", DateTimePattern.YEAR_ONLY, DiagnosticCode.PARSE_UNEXPECTED_END, 0),
        ],
    )
    def test_error_code_and_position(
        self, text: str, pattern: DateTimePattern, code: DiagnosticCode, position: int
    ) -> None:
        """Each malformed input reports the expected code at the failing offset."""
        fields, error = parse_fields(text, compile_pattern(pattern))
        assert fields is None
        assert error is not None
        assert error.diagnostic.code is code
        assert error.position == position

    def test_trailing_input_has_no_directive(self) -> None:
        """Leftover text is reported without a directive."""
        _, error = parse_fields("2000x", compile_pattern(DateTimePattern.YEAR_ONLY))
        assert error is not None
        assert error.directive is None
        assert error.diagnostic.received == "'x'"

    def test_failing_directive_recorded(self) -> None:
        """Other failures record the directive being matched."""
        _, error = parse_fields("19.30", compile_pattern(DateTimePattern.TIME_HH_MM_24))
        assert error is not None
        assert error.directive == Literal(":")

    def test_non_ascii_digits_rejected(self) -> None:
        """Unicode decimal digits other than 0-9 are not accepted."""
        _, error = parse_fields("٢٠٠٠", compile_pattern(DateTimePattern.YEAR_ONLY))
        assert error is not None
        assert error.diagnostic.code is DiagnosticCode.PARSE_DIGITS_EXPECTED


class TestResolveFields:
    """Test stage 2: fields to datetime."""

    def test_defaults_to_epoch_date(self) -> None:
        """Missing date fields resolve to 1970-01-01."""
        result, error = resolve_fields(DateTimeFields(hour=19, minute=30))
        assert error is None
        assert result == datetime(1970, 1, 1, 19, 30)

    @pytest.mark.parametrize(
        ("hour_12", "is_pm", "hour"),
        [(12, False, 0), (1, False, 1), (12, True, 12), (7, True, 19), (11, True, 23)],
    )
    def test_twelve_hour_resolution(self, hour_12: int, is_pm: bool, hour: int) -> None:
        """12 AM is midnight and 12 PM is noon."""
        result, _ = resolve_fields(DateTimeFields(hour_12=hour_12, is_pm=is_pm))
        assert result is not None
        assert result.hour == hour

    def test_twelve_hour_without_marker_reads_as_am(self) -> None:
        """A bare 12-hour value is taken as AM."""
        result, _ = resolve_fields(DateTimeFields(hour_12=7))
        assert result is not None
        assert result.hour == 7

    def test_day_of_year_uses_parsed_year(self) -> None:
        """Day 366 exists in leap years only."""
        result, error = resolve_fields(DateTimeFields(year=2000, day_of_year=366))
        assert error is None
        assert result == datetime(2000, 12, 31)
        _, error = resolve_fields(DateTimeFields(year=2001, day_of_year=366))
        assert error is not None
        assert error.code is DiagnosticCode.PARSE_FIELD_OUT_OF_RANGE

    def test_day_of_year_default_year(self) -> None:
        """Without a year, day of year resolves in 1970."""
        result, _ = resolve_fields(DateTimeFields(day_of_year=344))
        assert result == datetime(1970, 12, 10)

    @pytest.mark.parametrize(
        "fields",
        [
            DateTimeFields(year=2000, month=13, day=1),
            DateTimeFields(year=2000, month=0, day=1),
            DateTimeFields(year=2001, month=2, day=29),
            DateTimeFields(year=2000, month=4, day=31),
            DateTimeFields(year=0),
            DateTimeFields(hour=24),
            DateTimeFields(hour_12=0),
            DateTimeFields(hour_12=13),
            DateTimeFields(minute=60),
            DateTimeFields(second=60),
            DateTimeFields(day_of_year=0),
        ],
    )
    def test_out_of_range(self, fields: DateTimeFields) -> None:
        """Values outside calendar ranges are rejected, not wrapped."""
        result, error = resolve_fields(fields)
        assert result is None
        assert error is not None
        assert error.code is DiagnosticCode.PARSE_FIELD_OUT_OF_RANGE

    def test_leap_day_accepted(self) -> None:
        """Feb 29 is valid in leap years."""
        result, error = resolve_fields(DateTimeFields(year=2000, month=2, day=29))
        assert error is None
        assert result == datetime(2000, 2, 29)

    def test_weekday_mismatch_rejected(self, caplog: pytest.LogCaptureFixture) -> None:
        """A weekday that contradicts a full date is an error."""
        fields = DateTimeFields(day_of_week=1, year=2000, month=12, day=9)
        with caplog.at_level(logging.DEBUG, logger="humanformat.syntax.parser"):
            result, error = resolve_fields(fields)
        assert result is None
        assert error is not None
        assert error.code is DiagnosticCode.PARSE_WEEKDAY_MISMATCH
        assert error.expected == "Sat"
        assert error.received == "Mon"
        assert "2000-12-09" in caplog.text

    def test_weekday_informational_without_full_date(self) -> None:
        """DAY_ONLY text resolves to the default date whatever the weekday."""
        result, error = resolve_fields(DateTimeFields(day_of_week=1))
        assert error is None
        assert result == datetime(1970, 1, 1)

    def test_fraction_carried(self) -> None:
        """Microseconds pass through unchanged."""
        result, _ = resolve_fields(DateTimeFields(second=45, microsecond=123_000))
        assert result == datetime(1970, 1, 1, 0, 0, 45, 123_000)

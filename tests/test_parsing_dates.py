"""Tests for parse_date_time, parse_date_time_fields and parse_date_time_to_millis.

Functions return tuple[result | None, tuple[FormatParseError, ...]] and never
raise for malformed input.
"""

import logging
from datetime import UTC, datetime, timedelta, timezone

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from humanformat import DateTimePattern, FormatParseError, PatternDefinitionError
from humanformat.constants import MAX_INPUT_LENGTH
from humanformat.diagnostics import DiagnosticCode
from humanformat.parsing import (
    parse_date_time,
    parse_date_time_fields,
    parse_date_time_to_millis,
)
from tests.strategies import all_patterns


def _code(errors: tuple[FormatParseError, ...]) -> DiagnosticCode:
    assert len(errors) == 1
    diagnostic = errors[0].diagnostic
    assert diagnostic is not None
    return diagnostic.code


class TestParseDateTime:
    """Test parse_date_time success paths."""

    def test_short_date(self) -> None:
        """'09:12:2000' with SHORT_DATE is 2000-12-09."""
        result, errors = parse_date_time("09:12:2000", DateTimePattern.SHORT_DATE)
        assert errors == ()
        assert result == datetime(2000, 12, 9)

    def test_long_date_time_millis(self) -> None:
        """Every field of the longest pattern is recovered."""
        result, errors = parse_date_time(
            "Sat, Dec 09, 2000 07:30:45.123 PM", DateTimePattern.LONG_DATE_TIME_MILLIS
        )
        assert errors == ()
        assert result == datetime(2000, 12, 9, 19, 30, 45, 123_000)

    def test_file_name(self) -> None:
        """FILE_NAME uses dashes throughout."""
        result, _ = parse_date_time("09-12-2000 19-30-45", DateTimePattern.FILE_NAME)
        assert result == datetime(2000, 12, 9, 19, 30, 45)

    def test_time_only_uses_default_date(self) -> None:
        """Time patterns resolve against 1970-01-01."""
        result, _ = parse_date_time("07:30:45 AM", DateTimePattern.TIME_12)
        assert result == datetime(1970, 1, 1, 7, 30, 45)

    def test_reduced_pattern_defaults(self) -> None:
        """MONTH_YEAR fills in day 1 and midnight."""
        result, _ = parse_date_time("Dec 2000", DateTimePattern.MONTH_YEAR)
        assert result == datetime(2000, 12, 1)

    def test_short_month_year_window(self) -> None:
        """Two-digit years land in 1960..2059."""
        result, _ = parse_date_time("Dec 00", DateTimePattern.SHORT_MONTH_YEAR)
        assert result == datetime(2000, 12, 1)

    def test_string_pattern_value(self) -> None:
        """The pattern's display name is accepted."""
        result, errors = parse_date_time("2000", "YEAR_ONLY")  # type: ignore[arg-type]
        assert errors == ()
        assert result == datetime(2000, 1, 1)


class TestParseDateTimeErrors:
    """Test parse_date_time error reporting."""

    def test_missing_zero_padding(self) -> None:
        """'9:12:2000' fails at position 0."""
        result, errors = parse_date_time("9:12:2000", DateTimePattern.SHORT_DATE)
        assert result is None
        assert _code(errors) is DiagnosticCode.PARSE_DIGITS_EXPECTED
        assert errors[0].position == 0
        assert errors[0].input_value == "9:12:2000"
        assert errors[0].pattern == "SHORT_DATE"

    def test_wrong_separator(self) -> None:
        """Separators must match exactly."""
        _, errors = parse_date_time("09/12/2000", DateTimePattern.SHORT_DATE)
        assert _code(errors) is DiagnosticCode.PARSE_LITERAL_MISMATCH
        assert errors[0].position == 2

    def test_lower_case_name(self) -> None:
        """Names are case-sensitive."""
        _, errors = parse_date_time("dec 09, 2000", DateTimePattern.LONG_DATE)
        assert _code(errors) is DiagnosticCode.PARSE_NAME_UNKNOWN

    def test_impossible_date(self) -> None:
        """Feb 30 is out of range; the error has no position."""
        _, errors = parse_date_time("30:02:2000", DateTimePattern.SHORT_DATE)
        assert _code(errors) is DiagnosticCode.PARSE_FIELD_OUT_OF_RANGE
        assert errors[0].position == -1

    def test_weekday_mismatch(self) -> None:
        """A contradicting weekday is rejected."""
        _, errors = parse_date_time("Mon, Dec 09, 2000 19:30", DateTimePattern.LONG_DATE_TIME_24)
        assert _code(errors) is DiagnosticCode.PARSE_WEEKDAY_MISMATCH

    def test_wrong_input_type(self) -> None:
        """Non-string input is reported, not raised."""
        result, errors = parse_date_time(20001209, DateTimePattern.YEAR_ONLY)  # type: ignore[arg-type]
        assert result is None
        assert _code(errors) is DiagnosticCode.PARSE_INPUT_TYPE
        assert errors[0].input_value == "20001209"

    def test_input_too_long(self) -> None:
        """Oversized input is rejected before parsing and not echoed in full."""
        value = "9" * (MAX_INPUT_LENGTH + 50)
        result, errors = parse_date_time(value, DateTimePattern.YEAR_ONLY)
        assert result is None
        assert _code(errors) is DiagnosticCode.PARSE_INPUT_TOO_LONG
        assert len(errors[0].input_value) == MAX_INPUT_LENGTH

    def test_unknown_pattern_raises(self) -> None:
        """Unknown patterns are programming errors, even for bad input."""
        with pytest.raises(PatternDefinitionError):
            parse_date_time("2000", "NOPE")  # type: ignore[arg-type]

    def test_failure_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Parse failures are logged at DEBUG with line:column."""
        with caplog.at_level(logging.DEBUG, logger="humanformat.parsing.dates"):
            parse_date_time("19.30", DateTimePattern.TIME_HH_MM_24)
        assert "1:3:" in caplog.text

    def test_error_message_is_formatted_diagnostic(self) -> None:
        """str(error) is the compiler-style diagnostic."""
        _, errors = parse_date_time("09/12/2000", DateTimePattern.SHORT_DATE)
        assert str(errors[0]).startswith("error[PARSE_LITERAL_MISMATCH]")

    @given(text=st.text(max_size=40), pattern=all_patterns)
    @settings(max_examples=300)
    def test_never_raises(self, text: str, pattern: DateTimePattern) -> None:
        """PROPERTY: Arbitrary text yields a result or errors, never an exception."""
        result, errors = parse_date_time(text, pattern)
        assert (result is None) == bool(errors)


class TestParseDateTimeFields:
    """Test the calendar-level parse."""

    def test_no_defaults_applied(self) -> None:
        """Fields absent from the pattern stay None."""
        fields, errors = parse_date_time_fields("Dec 09", DateTimePattern.MONTH_DAY)
        assert errors == ()
        assert fields is not None
        assert fields.as_dict() == {"month": 12, "day": 9}

    def test_day_only_keeps_weekday(self) -> None:
        """DAY_ONLY recovers the weekday, which resolution would drop."""
        fields, _ = parse_date_time_fields("Sat", DateTimePattern.DAY_ONLY)
        assert fields is not None
        assert fields.day_of_week == 6

    def test_error_tuple_on_failure(self) -> None:
        """Failures return None plus one error."""
        fields, errors = parse_date_time_fields("Foo", DateTimePattern.DAY_ONLY)
        assert fields is None
        assert _code(errors) is DiagnosticCode.PARSE_NAME_UNKNOWN


class TestParseDateTimeToMillis:
    """Test parse_date_time_to_millis."""

    def test_timestamp_compact_utc(self) -> None:
        """Text formatted in UTC parses back to the epoch instant."""
        assert parse_date_time_to_millis(
            "20001209193045", DateTimePattern.TIMESTAMP_COMPACT, tzinfo=UTC
        ) == (976_390_245_000, ())

    def test_millis_precision(self) -> None:
        """The millisecond fraction survives."""
        result, _ = parse_date_time_to_millis(
            "Sat, Dec 09, 2000 19:30:45.123", DateTimePattern.LONG_DATE_TIME_MILLIS_24, tzinfo=UTC
        )
        assert result == 976_390_245_123

    def test_fixed_offset(self) -> None:
        """The zone the text was formatted in shifts the instant."""
        offset = timezone(timedelta(hours=-5))
        result, _ = parse_date_time_to_millis(
            "20001209143045", DateTimePattern.TIMESTAMP_COMPACT, tzinfo=offset
        )
        assert result == 976_390_245_000

    @pytest.mark.usefixtures("local_zone")
    def test_host_zone_by_default(self) -> None:
        """Without tzinfo the host zone (US Eastern, winter) applies."""
        result, _ = parse_date_time_to_millis("20001209143045", DateTimePattern.TIMESTAMP_COMPACT)
        assert result == 976_390_245_000

    def test_parse_failure_passes_through(self) -> None:
        """Parse errors are returned unchanged."""
        result, errors = parse_date_time_to_millis("2000-12", DateTimePattern.YEAR_ONLY, tzinfo=UTC)
        assert result is None
        assert _code(errors) is DiagnosticCode.PARSE_TRAILING_INPUT

    def test_unrepresentable_instant(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A platform conversion failure becomes a returned error."""

        def _overflow(value: datetime, *, tzinfo: object = None) -> int:
            msg = "timestamp out of range for platform time_t"
            raise OverflowError(msg)

        monkeypatch.setattr("humanformat.parsing.dates.local_to_epoch_millis", _overflow)
        result, errors = parse_date_time_to_millis("0001", DateTimePattern.YEAR_ONLY)
        assert result is None
        assert _code(errors) is DiagnosticCode.PARSE_INSTANT_UNREPRESENTABLE
        assert "0001-01-01T00:00:00" in str(errors[0])

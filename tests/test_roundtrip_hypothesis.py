"""Property-based round-trip tests: format then parse with the same pattern.

Parsing accepts exactly the grammar the renderer emits, so every field a
pattern carries must survive the trip unchanged.
"""

from datetime import UTC, datetime

import pytest
from hypothesis import assume, event, given, settings
from hypothesis import strategies as st

from humanformat import DateTimePattern, format_date_time
from humanformat.diagnostics import DiagnosticCode
from humanformat.parsing import (
    parse_date_time,
    parse_date_time_fields,
    parse_date_time_to_millis,
)
from humanformat.runtime import hour_12, local_to_epoch_millis
from tests.strategies import all_patterns, millis_datetimes

# Patterns whose text carries every field down to the second.
FULL_PATTERNS = (
    DateTimePattern.LONG_DATE_TIME_MILLIS,
    DateTimePattern.LONG_DATE_TIME_MILLIS_24,
    DateTimePattern.FILE_NAME,
    DateTimePattern.TIMESTAMP_COMPACT,
)

# Reduced patterns that resolve against 1970 and may name a day that year lacks.
LEAP_SENSITIVE = (DateTimePattern.MONTH_DAY, DateTimePattern.DAY_OF_YEAR)


def _expected_field(value: datetime, attribute: str) -> int | bool:  # noqa: PLR0911
    match attribute:
        case "day_of_year":
            return value.timetuple().tm_yday
        case "day_of_week":
            return value.isoweekday()
        case "hour_12":
            return hour_12(value.hour)
        case "is_pm":
            return value.hour >= 12
        case "microsecond":
            return value.microsecond // 1000 * 1000
        case _:
            return int(getattr(value, attribute))


class TestFieldRoundTrip:
    """Every carried field is recovered exactly."""

    @given(value=millis_datetimes(), pattern=all_patterns)
    def test_fields_survive(self, value: datetime, pattern: DateTimePattern) -> None:
        """PROPERTY: parse_fields(format(v, p), p) projects v onto p's fields."""
        text = format_date_time(value, pattern)
        fields, errors = parse_date_time_fields(text, pattern)
        assert errors == (), f"{pattern}: {text!r} -> {errors}"
        assert fields is not None
        parsed = fields.as_dict()
        assert parsed
        for attribute, got in parsed.items():
            assert got == _expected_field(value, attribute), (pattern, text, attribute)
        event(f"pattern={pattern}")

    @given(value=millis_datetimes(), pattern=st.sampled_from(FULL_PATTERNS))
    def test_full_patterns_recover_datetime(
        self, value: datetime, pattern: DateTimePattern
    ) -> None:
        """PROPERTY: Full patterns recover the value at their precision."""
        result, errors = parse_date_time(format_date_time(value, pattern), pattern)
        assert errors == ()
        if "MILLIS" in pattern:
            assert result == value
        else:
            assert result == value.replace(microsecond=0)


class TestIdempotence:
    """Formatting a parsed value gives back the same text."""

    @given(value=millis_datetimes(), pattern=all_patterns)
    def test_format_parse_format(self, value: datetime, pattern: DateTimePattern) -> None:
        """PROPERTY: format(parse(format(v))) == format(v), except DAY_ONLY."""
        assume(pattern is not DateTimePattern.DAY_ONLY)
        text = format_date_time(value, pattern)
        result, errors = parse_date_time(text, pattern)
        if pattern in LEAP_SENSITIVE and result is None:
            # Feb 29 or day 366 do not exist in the 1970 default year.
            diagnostic = errors[0].diagnostic
            assert diagnostic is not None
            assert diagnostic.code is DiagnosticCode.PARSE_FIELD_OUT_OF_RANGE
            return
        assert result is not None, f"{pattern}: {text!r} -> {errors}"
        assert format_date_time(result, pattern) == text

    def test_day_only_resolves_to_default_date(self) -> None:
        """DAY_ONLY drops the weekday when resolving, so it is not idempotent."""
        result, _ = parse_date_time("Sat", DateTimePattern.DAY_ONLY)
        assert result is not None
        assert format_date_time(result, DateTimePattern.DAY_ONLY) == "Thu"


class TestFixedWidth:
    """Zero padding gives fixed-width output."""

    @pytest.mark.parametrize(
        ("pattern", "width"),
        [
            (DateTimePattern.TIMESTAMP_COMPACT, 14),
            (DateTimePattern.FILE_NAME, 19),
            (DateTimePattern.LONG_DATE_TIME_MILLIS, 33),
            (DateTimePattern.LONG_DATE_TIME_MILLIS_24, 30),
            (DateTimePattern.SHORT_DATE, 10),
            (DateTimePattern.TIME_12, 11),
            (DateTimePattern.DAY_OF_YEAR, 3),
        ],
    )
    @given(value=millis_datetimes())
    def test_width(self, value: datetime, pattern: DateTimePattern, width: int) -> None:
        """PROPERTY: Output length does not depend on the value."""
        assert len(format_date_time(value, pattern)) == width


class TestRejection:
    """Corrupted output is rejected."""

    @given(value=millis_datetimes())
    def test_wrong_separator(self, value: datetime) -> None:
        """PROPERTY: Swapping a separator fails with a literal mismatch."""
        text = format_date_time(value, DateTimePattern.SHORT_DATE)
        mutated = text[:2] + "/" + text[3:]
        _, errors = parse_date_time(mutated, DateTimePattern.SHORT_DATE)
        assert errors
        assert errors[0].position == 2

    @given(value=millis_datetimes(), index=st.integers(min_value=0, max_value=13))
    def test_dropped_digit(self, value: datetime, index: int) -> None:
        """PROPERTY: Removing any character of TIMESTAMP_COMPACT fails."""
        text = format_date_time(value, DateTimePattern.TIMESTAMP_COMPACT)
        mutated = text[:index] + text[index + 1 :]
        result, errors = parse_date_time(mutated, DateTimePattern.TIMESTAMP_COMPACT)
        assert result is None
        assert errors

    @given(value=millis_datetimes())
    def test_lower_cased_names(self, value: datetime) -> None:
        """PROPERTY: Names are case-sensitive."""
        text = format_date_time(value, DateTimePattern.LONG_DATE)
        _, errors = parse_date_time(text.lower(), DateTimePattern.LONG_DATE)
        assert errors
        diagnostic = errors[0].diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.PARSE_NAME_UNKNOWN


@pytest.mark.fuzz
class TestEpochRoundTripFuzz:
    """Intensive epoch-level round trip (run with -m fuzz)."""

    @given(value=millis_datetimes(), pattern=st.sampled_from(FULL_PATTERNS))
    @settings(max_examples=5000, deadline=None)
    def test_epoch_round_trip(self, value: datetime, pattern: DateTimePattern) -> None:
        """PROPERTY: Epoch millis survive format/parse in a fixed zone."""
        assume(value.year >= 2 and value.year <= 9998)
        millis = local_to_epoch_millis(value, tzinfo=UTC)
        text = format_date_time(millis, pattern, tzinfo=UTC)
        parsed, errors = parse_date_time_to_millis(text, pattern, tzinfo=UTC)
        assert errors == ()
        assert parsed is not None
        precision = 1 if "MILLIS" in pattern else 1000
        assert parsed == millis - millis % precision

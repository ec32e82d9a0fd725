"""Directive-sequence parser.

Inverts the renderer: walks the same compiled directive tuple over the input
with an immutable Cursor, in a single left-to-right pass with no backtracking.

Two stages:
    parse_fields()   text -> DateTimeFields (calendar-level, no defaults)
    resolve_fields() DateTimeFields -> naive datetime (defaults, range checks)

Neither stage raises for malformed input; both return (result, error) pairs.

Thread-safe. Python 3.13+. Zero external dependencies.
"""

import calendar
import logging
from dataclasses import dataclass, fields
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta
from typing import assert_never

from humanformat.catalog import DAY_OF_WEEK_NAMES
from humanformat.constants import DEFAULT_DAY, DEFAULT_MONTH, DEFAULT_YEAR
from humanformat.diagnostics import Diagnostic, ErrorTemplate
from humanformat.enums import DateField

from .cursor import Cursor, ParseError
from .directives import (
    AmPmMarker,
    Directive,
    DirectiveSequence,
    Literal,
    NamedField,
    NumericField,
    SecondFraction,
    TwoDigitYear,
)

__all__ = [
    "DateTimeFields",
    "parse_fields",
    "resolve_fields",
]

logger = logging.getLogger(__name__)

_MICROS_DIGITS = 6


@dataclass(frozen=True, slots=True)
class DateTimeFields:
    """Calendar fields recovered from text, before defaults are applied.

    Every attribute is None when the pattern does not carry that field.

    Attributes:
        year: Full year (two-digit years already expanded)
        month: 1..12
        day: Day of month
        day_of_year: 1..366
        day_of_week: ISO weekday, Monday=1 .. Sunday=7
        hour: 24-hour clock hour
        hour_12: 12-hour clock hour (1..12)
        is_pm: Half-day marker (True for PM, False for AM)
        minute: 0..59
        second: 0..59
        microsecond: Second fraction scaled to microseconds
    """

    year: int | None = None
    month: int | None = None
    day: int | None = None
    day_of_year: int | None = None
    day_of_week: int | None = None
    hour: int | None = None
    hour_12: int | None = None
    is_pm: bool | None = None
    minute: int | None = None
    second: int | None = None
    microsecond: int | None = None

    @property
    def has_full_date(self) -> bool:
        """True if the input fixed a specific calendar date."""
        if self.year is None:
            return False
        return self.day_of_year is not None or (self.month is not None and self.day is not None)

    def as_dict(self) -> dict[str, int | bool]:
        """Fields that were actually parsed, keyed by attribute name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


# ============================================================================
# STAGE 1: TEXT -> FIELDS
# ============================================================================


def _fail(cursor: Cursor, directive: Directive | None, diagnostic: Diagnostic) -> ParseError:
    return ParseError(diagnostic=diagnostic, cursor=cursor, directive=directive)


def _read_digits(
    cursor: Cursor, directive: Directive, field: str, width: int
) -> tuple[int, Cursor] | ParseError:
    """Consume exactly width ASCII digits."""
    if cursor.is_eof:
        return _fail(
            cursor,
            directive,
            ErrorTemplate.parse_unexpected_end(directive.describe(), cursor.span_to(cursor.pos)),
        )
    if cursor.count_digits(width) != width:
        received = cursor.slice_ahead(width)
        return _fail(
            cursor,
            directive,
            ErrorTemplate.parse_digits_expected(
                field, width, received, cursor.span_to(cursor.pos + width)
            ),
        )
    return int(cursor.slice_ahead(width)), cursor.advance(width)


def _match_literal(cursor: Cursor, directive: Literal) -> Cursor | ParseError:
    if cursor.starts_with(directive.text):
        return cursor.advance(len(directive.text))
    if cursor.is_eof:
        diagnostic = ErrorTemplate.parse_unexpected_end(
            directive.describe(), cursor.span_to(cursor.pos)
        )
    else:
        width = len(directive.text)
        diagnostic = ErrorTemplate.parse_literal_mismatch(
            directive.text, cursor.slice_ahead(width), cursor.span_to(cursor.pos + width)
        )
    return _fail(cursor, directive, diagnostic)


def _match_marker(cursor: Cursor, directive: AmPmMarker) -> tuple[bool, Cursor] | ParseError:
    # Longest first, so a marker that prefixes the other cannot shadow it.
    for marker, is_pm in sorted(
        ((directive.am, False), (directive.pm, True)), key=lambda item: -len(item[0])
    ):
        if cursor.starts_with(marker):
            return is_pm, cursor.advance(len(marker))
    if cursor.is_eof:
        diagnostic = ErrorTemplate.parse_unexpected_end(
            directive.describe(), cursor.span_to(cursor.pos)
        )
    else:
        width = max(len(directive.am), len(directive.pm))
        diagnostic = ErrorTemplate.parse_marker_unknown(
            cursor.slice_ahead(width),
            (directive.am, directive.pm),
            cursor.span_to(cursor.pos + width),
        )
    return _fail(cursor, directive, diagnostic)


def _match_name(cursor: Cursor, directive: NamedField) -> tuple[int, Cursor] | ParseError:
    table = directive.names
    found = table.match_at(cursor.source, cursor.pos)
    if found is not None:
        index, name = found
        return index, cursor.advance(len(name))
    if cursor.is_eof:
        diagnostic = ErrorTemplate.parse_unexpected_end(
            directive.describe(), cursor.span_to(cursor.pos)
        )
    else:
        width = max(len(name) for name in table.names)
        diagnostic = ErrorTemplate.parse_name_unknown(
            table.label, cursor.slice_ahead(width), table.names, cursor.span_to(cursor.pos + width)
        )
    return _fail(cursor, directive, diagnostic)


def _match_two_digit_year(
    cursor: Cursor, directive: TwoDigitYear
) -> tuple[int, Cursor] | ParseError:
    # Years outside the window are rendered in full as "+YYYY".
    if cursor.starts_with("+"):
        return _read_digits(cursor.advance(), directive, str(DateField.YEAR), 4)
    result = _read_digits(cursor, directive, str(DateField.YEAR), 2)
    if isinstance(result, ParseError):
        return result
    value, after = result
    return directive.expand(value), after


def _step(
    cursor: Cursor, directive: Directive
) -> tuple[str, int | bool, Cursor] | Cursor | ParseError:
    """Match one directive.

    Returns:
        (attribute, value, cursor) for value-bearing directives, a bare Cursor
        for literals, or a ParseError.
    """
    match directive:
        case Literal():
            return _match_literal(cursor, directive)
        case AmPmMarker():
            marker = _match_marker(cursor, directive)
            if isinstance(marker, ParseError):
                return marker
            return "is_pm", marker[0], marker[1]
        case NumericField(field=field, width=width):
            number = _read_digits(cursor, directive, str(field), width)
            if isinstance(number, ParseError):
                return number
            return field.value, number[0], number[1]
        case SecondFraction(digits=digits):
            fraction = _read_digits(cursor, directive, "second fraction", digits)
            if isinstance(fraction, ParseError):
                return fraction
            return "microsecond", fraction[0] * 10 ** (_MICROS_DIGITS - digits), fraction[1]
        case TwoDigitYear():
            year = _match_two_digit_year(cursor, directive)
            if isinstance(year, ParseError):
                return year
            return DateField.YEAR.value, year[0], year[1]
        case NamedField(field=field):
            name = _match_name(cursor, directive)
            if isinstance(name, ParseError):
                return name
            return field.value, name[0], name[1]
        case _ as unreachable:
            assert_never(unreachable)


def parse_fields(
    text: str, directives: DirectiveSequence
) -> tuple[DateTimeFields | None, ParseError | None]:
    """Parse text against a directive sequence.

    Args:
        text: Formatted input
        directives: Compiled sequence (from compile_pattern)

    Returns:
        (fields, None) on success, (None, error) on the first mismatch.
        Input left over after the last directive is an error.

    Example:
        >>> fields, error = parse_fields("19:30", compile_pattern(DateTimePattern.TIME_HH_MM_24))
        >>> (fields.hour, fields.minute)
        (19, 30)
    """
    cursor = Cursor(text, 0)
    values: dict[str, int | bool] = {}

    for directive in directives:
        result = _step(cursor, directive)
        match result:
            case ParseError():
                return None, result
            case Cursor():
                cursor = result
            case (attribute, value, after):
                values[attribute] = value
                cursor = after

    if not cursor.is_eof:
        leftover = cursor.rest()
        diagnostic = ErrorTemplate.parse_trailing_input(leftover, cursor.span_to(len(text)))
        return None, _fail(cursor, None, diagnostic)

    return DateTimeFields(**values), None  # type: ignore[arg-type]


# ============================================================================
# STAGE 2: FIELDS -> DATETIME
# ============================================================================


def _check_range(field: str, value: int, low: int, high: int) -> Diagnostic | None:
    if low <= value <= high:
        return None
    return ErrorTemplate.parse_field_out_of_range(field, value, low, high)


def _resolve_hour(parsed: DateTimeFields) -> tuple[int, Diagnostic | None]:
    if parsed.hour is not None:
        return parsed.hour, _check_range(str(DateField.HOUR), parsed.hour, 0, 23)
    if parsed.hour_12 is not None:
        error = _check_range(str(DateField.HOUR_12), parsed.hour_12, 1, 12)
        # Without a marker the value reads as AM.
        offset = 12 if parsed.is_pm else 0
        return parsed.hour_12 % 12 + offset, error
    return 0, None


def _resolve_date(parsed: DateTimeFields, year: int) -> tuple[date | None, Diagnostic | None]:
    if parsed.day_of_year is not None:
        days_in_year = 366 if calendar.isleap(year) else 365
        error = _check_range(str(DateField.DAY_OF_YEAR), parsed.day_of_year, 1, days_in_year)
        if error is not None:
            return None, error
        return date(year, 1, 1) + timedelta(days=parsed.day_of_year - 1), None

    month = parsed.month if parsed.month is not None else DEFAULT_MONTH
    error = _check_range(str(DateField.MONTH), month, 1, 12)
    if error is not None:
        return None, error

    day = parsed.day if parsed.day is not None else DEFAULT_DAY
    last_day = calendar.monthrange(year, month)[1]
    error = _check_range(str(DateField.DAY), day, 1, last_day)
    if error is not None:
        return None, error

    return date(year, month, day), None


def resolve_fields(parsed: DateTimeFields) -> tuple[datetime | None, Diagnostic | None]:
    """Build a naive datetime from parsed fields.

    Unset date fields default to 1970-01-01 and unset time fields to
    midnight. A 12-hour value without a marker reads as AM. Day-of-year
    resolves against the parsed (or default) year. A parsed weekday must
    agree with a fully parsed date; with a partial date it is informational.

    Args:
        parsed: Result of parse_fields()

    Returns:
        (datetime, None) on success, (None, diagnostic) on a range or
        consistency failure.
    """
    year = parsed.year if parsed.year is not None else DEFAULT_YEAR
    error = _check_range(str(DateField.YEAR), year, MINYEAR, MAXYEAR)
    if error is not None:
        return None, error

    day, error = _resolve_date(parsed, year)
    if error is not None or day is None:
        return None, error

    hour, error = _resolve_hour(parsed)
    if error is not None:
        return None, error

    minute = parsed.minute if parsed.minute is not None else 0
    error = _check_range(str(DateField.MINUTE), minute, 0, 59)
    if error is not None:
        return None, error

    second = parsed.second if parsed.second is not None else 0
    error = _check_range(str(DateField.SECOND), second, 0, 59)
    if error is not None:
        return None, error

    if parsed.day_of_week is not None and parsed.has_full_date:
        actual = day.isoweekday()
        if actual != parsed.day_of_week:
            logger.debug("Weekday %d contradicts %s", parsed.day_of_week, day.isoformat())
            return None, ErrorTemplate.parse_weekday_mismatch(
                DAY_OF_WEEK_NAMES.name_of(parsed.day_of_week),
                DAY_OF_WEEK_NAMES.name_of(actual),
                day.isoformat(),
            )

    microsecond = parsed.microsecond if parsed.microsecond is not None else 0
    return datetime(day.year, day.month, day.day, hour, minute, second, microsecond), None

"""Directive-sequence renderer.

Walks a compiled directive tuple left to right and concatenates the text of
each directive. Zero padding is explicit, never locale-driven, so output is
identical on every host.

12-hour law:
    hour 0 and 12 -> 12, hours 1..11 -> h, hours 13..23 -> h - 12

Thread-safe. Python 3.13+. Zero external dependencies.
"""

from datetime import datetime, time
from typing import assert_never

from humanformat.diagnostics import ErrorTemplate, PatternDefinitionError
from humanformat.enums import DateField
from humanformat.syntax.directives import (
    AmPmMarker,
    Directive,
    DirectiveSequence,
    Literal,
    NamedField,
    NumericField,
    SecondFraction,
    TwoDigitYear,
)

__all__ = ["hour_12", "render"]

_MICROS_DIGITS = 6


def hour_12(hour: int) -> int:
    """Convert a 24-hour clock hour to the 12-hour clock.

    Example:
        >>> [hour_12(h) for h in (0, 1, 11, 12, 13, 23)]
        [12, 1, 11, 12, 1, 11]
    """
    return hour % 12 or 12


def _pad(number: int, width: int) -> str:
    return str(number).zfill(width)


def _field_value(value: datetime | time, field: DateField) -> int:  # noqa: PLR0911 - one arm per field
    # Callers have already rejected date fields for bare times.
    match field:
        case DateField.YEAR:
            return value.year  # type: ignore[union-attr]
        case DateField.MONTH:
            return value.month  # type: ignore[union-attr]
        case DateField.DAY:
            return value.day  # type: ignore[union-attr]
        case DateField.DAY_OF_YEAR:
            return value.timetuple().tm_yday  # type: ignore[union-attr]
        case DateField.DAY_OF_WEEK:
            return value.isoweekday()  # type: ignore[union-attr]
        case DateField.HOUR:
            return value.hour
        case DateField.HOUR_12:
            return hour_12(value.hour)
        case DateField.MINUTE:
            return value.minute
        case DateField.SECOND:
            return value.second
        case _ as unreachable:
            assert_never(unreachable)


def _needs_date(directive: Directive) -> DateField | None:
    """Date field the directive reads, or None for time-of-day directives."""
    match directive:
        case NumericField(field=field) | NamedField(field=field):
            return field if field.is_date_field else None
        case TwoDigitYear():
            return DateField.YEAR
        case _:
            return None


def _render_one(value: datetime | time, directive: Directive) -> str:
    match directive:
        case Literal(text=text):
            return text
        case AmPmMarker(am=am, pm=pm):
            return am if value.hour < 12 else pm
        case NumericField(field=field, width=width):
            return _pad(_field_value(value, field), width)
        case SecondFraction(digits=digits):
            # Truncate, never round: .1239 with 3 digits is "123".
            return _pad(value.microsecond, _MICROS_DIGITS)[:digits]
        case TwoDigitYear():
            year = _field_value(value, DateField.YEAR)
            if directive.in_window(year):
                return _pad(year % 100, 2)
            return "+" + _pad(year, 4)
        case NamedField(field=field, names=names):
            return names.name_of(_field_value(value, field))
        case _ as unreachable:
            assert_never(unreachable)


def render(value: datetime | time, directives: DirectiveSequence, *, label: str = "") -> str:
    """Render a calendar value with a compiled directive sequence.

    Args:
        value: Naive datetime, or a bare time for time-only sequences
        directives: Sequence from compile_pattern() or time_directives()
        label: Pattern name used in diagnostics

    Returns:
        Formatted text

    Raises:
        PatternDefinitionError: If a date directive is applied to a time

    Example:
        >>> render(datetime(2000, 12, 9, 19, 30, 45), compile_pattern(DateTimePattern.TIME_12))
        '07:30:45 PM'
    """
    if not isinstance(value, datetime):
        for directive in directives:
            field = _needs_date(directive)
            if field is not None:
                raise PatternDefinitionError(
                    ErrorTemplate.pattern_needs_date(label or "sequence", str(field))
                )
    return "".join(_render_one(value, directive) for directive in directives)

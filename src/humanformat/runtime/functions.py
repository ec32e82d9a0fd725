"""Public date/time formatting functions.

Thin wrappers that normalize the input value, pick the compiled directive
sequence and hand both to the renderer.

Architecture:
    - format_date_time: epoch millis or datetime -> text (any pattern)
    - format_time: millis since midnight or time -> text (TIME_* patterns)
    - duration_to_millis: h/m/s -> millis, checked against signed 64-bit range

Example:
    >>> format_date_time(976390245123, DateTimePattern.FILE_NAME, tzinfo=UTC)
    '09-12-2000 19-30-45'
    >>> format_time(time(7, 30, 45), DateTimePattern.TIME_12)
    '07:30:45 AM'

Python 3.13+. Zero external dependencies.
"""

import logging
from datetime import datetime, time, tzinfo as TzInfo  # noqa: N812

from humanformat.constants import (
    INT64_MAX,
    INT64_MIN,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)
from humanformat.diagnostics import ErrorTemplate, FormatConversionError
from humanformat.enums import DateTimePattern
from humanformat.syntax.compiler import compile_pattern, time_directives

from .clock import epoch_millis_to_local
from .renderer import render

__all__ = ["duration_to_millis", "format_date_time", "format_time"]

logger = logging.getLogger(__name__)


def _to_local(value: int | datetime, tzinfo: TzInfo | None) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value
        # Aware values are shown in tzinfo, or the host zone when omitted.
        return value.astimezone(tzinfo).replace(tzinfo=None)
    return epoch_millis_to_local(value, tzinfo=tzinfo)


def format_date_time(
    value: int | datetime,
    pattern: DateTimePattern,
    *,
    tzinfo: TzInfo | None = None,
) -> str:
    """Format an instant or calendar value with a catalog pattern.

    Args:
        value: Epoch milliseconds, or a datetime (naive values are taken
            as already local)
        pattern: Catalog pattern
        tzinfo: Zone for epoch and aware values (default: host local zone)

    Returns:
        Formatted text

    Raises:
        PatternDefinitionError: If pattern is not a catalog member
        ValueError: If epoch milliseconds are outside the datetime range

    Examples:
        >>> when = datetime(2000, 12, 9, 19, 30, 45, 123000)
        >>> format_date_time(when, DateTimePattern.SHORT_DATE)
        '09:12:2000'
        >>> format_date_time(when, DateTimePattern.LONG_DATE_TIME_MILLIS)
        'Sat, Dec 09, 2000 07:30:45.123 PM'
        >>> format_date_time(when, DateTimePattern.SHORT_MONTH_YEAR)
        'Dec 00'

    Thread Safety:
        Thread-safe. Reads the host zone only through the standard library.
    """
    directives = compile_pattern(pattern)
    return render(_to_local(value, tzinfo), directives, label=str(pattern))


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def _time_from_millis(millis: int) -> time:
    """Decompose milliseconds since midnight, clamping each component.

    Negative input clamps to midnight; 24 hours or more clamps the hour to 23.
    """
    millis = max(millis, 0)
    return time(
        hour=_clamp(millis // MILLIS_PER_HOUR, 0, 23),
        minute=(millis // MILLIS_PER_MINUTE) % 60,
        second=(millis // MILLIS_PER_SECOND) % 60,
        microsecond=(millis % MILLIS_PER_SECOND) * 1000,
    )


def format_time(value: int | time, pattern: DateTimePattern) -> str:
    """Format a time of day.

    TIME_* patterns render with their own layout. Any other pattern needs a
    calendar date, so the time renders with TIME_12 instead.

    Args:
        value: Milliseconds since midnight, or a time
        pattern: Catalog pattern

    Returns:
        Formatted text

    Raises:
        PatternDefinitionError: If pattern is not a catalog member

    Examples:
        >>> format_time(27_045_000, DateTimePattern.TIME_24)
        '07:30:45'
        >>> format_time(27_045_000, DateTimePattern.SHORT_DATE)
        '07:30:45 AM'
    """
    if not isinstance(value, time):
        value = _time_from_millis(value)
    return render(value, time_directives(pattern), label=str(pattern))


def duration_to_millis(
    hours: int, minutes: int, seconds: int
) -> tuple[int | None, tuple[FormatConversionError, ...]]:
    """Convert hours, minutes and seconds to total milliseconds.

    Components are not range-checked (90 minutes is fine); only the total
    must fit in a signed 64-bit integer.

    Args:
        hours: Whole hours
        minutes: Whole minutes
        seconds: Whole seconds

    Returns:
        Tuple of (result, errors):
        - result: Total milliseconds, or None on overflow
        - errors: Tuple of FormatConversionError (empty tuple on success)

    Example:
        >>> duration_to_millis(1, 30, 0)
        (5400000, ())
    """
    total = hours * MILLIS_PER_HOUR + minutes * MILLIS_PER_MINUTE + seconds * MILLIS_PER_SECOND
    if INT64_MIN <= total <= INT64_MAX:
        return (total, ())

    operands = (str(hours), str(minutes), str(seconds))
    logger.warning("duration_to_millis(%s) overflows a signed 64-bit integer", ", ".join(operands))
    diagnostic = ErrorTemplate.conversion_overflow("duration_to_millis", ", ".join(operands), total)
    error = FormatConversionError(diagnostic, operation="duration_to_millis", operands=operands)
    return (None, (error,))

"""Parse formatted date/time text back into calendar values.

- parse_date_time_fields() returns tuple[DateTimeFields | None, tuple[FormatParseError, ...]]
- parse_date_time() returns tuple[datetime | None, tuple[FormatParseError, ...]]
- parse_date_time_to_millis() returns tuple[int | None, tuple[FormatParseError, ...]]
- Functions NEVER raise for malformed input, errors are returned in the tuple
- An unknown pattern is a programming error and raises PatternDefinitionError

Parsing accepts exactly what format_date_time() produces for the same
pattern: fixed digit counts, exact separators, case-sensitive names.

Reduced patterns (DAY_ONLY, MONTH_ONLY, YEAR_ONLY, ...) resolve missing
fields against 1970-01-01 00:00:00.000.

Thread-safe. Python 3.13+.
"""

import logging
from datetime import datetime, tzinfo as TzInfo  # noqa: N812

from humanformat.constants import MAX_INPUT_LENGTH
from humanformat.diagnostics import Diagnostic, ErrorTemplate, FormatParseError
from humanformat.enums import DateTimePattern
from humanformat.runtime.clock import local_to_epoch_millis
from humanformat.syntax.compiler import compile_pattern
from humanformat.syntax.parser import DateTimeFields, parse_fields, resolve_fields

__all__ = ["parse_date_time", "parse_date_time_fields", "parse_date_time_to_millis"]

logger = logging.getLogger(__name__)


def _error(
    diagnostic: Diagnostic, value: str, pattern: DateTimePattern, position: int = -1
) -> tuple[FormatParseError, ...]:
    return (
        FormatParseError(diagnostic, input_value=value, pattern=str(pattern), position=position),
    )


def parse_date_time_fields(
    value: str,
    pattern: DateTimePattern,
) -> tuple[DateTimeFields | None, tuple[FormatParseError, ...]]:
    """Parse text into the calendar fields the pattern carries.

    No defaults are applied: fields the pattern does not contain stay None.

    Args:
        value: Formatted text
        pattern: Pattern the text was formatted with

    Returns:
        Tuple of (result, errors):
        - result: Parsed fields, or None if parsing failed
        - errors: Tuple of FormatParseError (empty tuple on success)

    Raises:
        PatternDefinitionError: If pattern is not a catalog member

    Example:
        >>> fields, errors = parse_date_time_fields("Dec 00", DateTimePattern.SHORT_MONTH_YEAR)
        >>> (fields.month, fields.year)
        (12, 2000)
    """
    directives = compile_pattern(pattern)

    # Type check: value must be string (runtime defense for untyped callers)
    if not isinstance(value, str):
        type_name = type(value).__name__  # type: ignore[unreachable]
        diagnostic = ErrorTemplate.parse_input_type(type_name, str(pattern))
        return (None, _error(diagnostic, str(value), pattern))

    if len(value) > MAX_INPUT_LENGTH:
        diagnostic = ErrorTemplate.parse_input_too_long(len(value), MAX_INPUT_LENGTH, str(pattern))
        # Do not echo oversized input back to the caller.
        return (None, _error(diagnostic, value[:MAX_INPUT_LENGTH], pattern))

    fields, parse_error = parse_fields(value, directives)
    if parse_error is not None:
        logger.debug("Parse of %r with %s failed: %s", value, pattern, parse_error.format_error())
        return (None, _error(parse_error.diagnostic, value, pattern, parse_error.position))

    return (fields, ())


def parse_date_time(
    value: str,
    pattern: DateTimePattern,
) -> tuple[datetime | None, tuple[FormatParseError, ...]]:
    """Parse formatted text into a naive datetime.

    Args:
        value: Formatted text
        pattern: Pattern the text was formatted with

    Returns:
        Tuple of (result, errors):
        - result: Naive datetime, or None if parsing failed
        - errors: Tuple of FormatParseError (empty tuple on success)

    Raises:
        PatternDefinitionError: If pattern is not a catalog member

    Examples:
        >>> result, errors = parse_date_time("09:12:2000", DateTimePattern.SHORT_DATE)
        >>> result
        datetime.datetime(2000, 12, 9, 0, 0)
        >>> errors
        ()

        >>> result, errors = parse_date_time("9:12:2000", DateTimePattern.SHORT_DATE)
        >>> result is None
        True
        >>> errors[0].position
        0
    """
    fields, errors = parse_date_time_fields(value, pattern)
    if fields is None:
        return (None, errors)

    result, diagnostic = resolve_fields(fields)
    if diagnostic is not None:
        logger.debug("Parsed fields of %r with %s rejected: %s", value, pattern, diagnostic)
        return (None, _error(diagnostic, value, pattern))

    return (result, ())


def parse_date_time_to_millis(
    value: str,
    pattern: DateTimePattern,
    *,
    tzinfo: TzInfo | None = None,
) -> tuple[int | None, tuple[FormatParseError, ...]]:
    """Parse formatted text into epoch milliseconds.

    The calendar value is interpreted in tzinfo, or the host local zone when
    tzinfo is None.

    Args:
        value: Formatted text
        pattern: Pattern the text was formatted with
        tzinfo: Zone the text was formatted in

    Returns:
        Tuple of (result, errors):
        - result: Epoch milliseconds, or None if parsing failed
        - errors: Tuple of FormatParseError (empty tuple on success)

    Example:
        >>> parse_date_time_to_millis("20001209193045", DateTimePattern.TIMESTAMP_COMPACT, tzinfo=UTC)
        (976390245000, ())
    """
    result, errors = parse_date_time(value, pattern)
    if result is None:
        return (None, errors)

    try:
        millis = local_to_epoch_millis(result, tzinfo=tzinfo)
    except (OverflowError, OSError, ValueError) as e:
        diagnostic = ErrorTemplate.parse_instant_unrepresentable(result.isoformat(), str(e))
        logger.debug("Cannot convert %s to epoch millis: %s", result.isoformat(), e)
        return (None, _error(diagnostic, value, pattern))

    return (millis, ())

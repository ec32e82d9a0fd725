"""Pattern compiler: DateTimePattern -> directive sequence.

Every catalog member maps to exactly one immutable tuple of directives.
The mapping is a closed match over the enum that ends in assert_never(),
so a member without a mapping is reported by the type checker instead of
silently falling through to a default format.

Sequences are built from shared fragments (date, 12-hour time, 24-hour time)
so that related patterns cannot drift apart. Results are memoised per
pattern in an lru_cache sized to the catalog. Recomputation is
deterministic, so the cache population race between threads is benign.

Thread-safe. Python 3.13+. Zero external dependencies.
"""

import logging
from functools import lru_cache
from typing import assert_never

from humanformat.catalog import DAY_OF_WEEK_NAMES, MONTH_NAMES
from humanformat.constants import (
    DAY_OF_YEAR_WIDTH,
    FIELD_WIDTH,
    MILLIS_DIGITS,
    TWO_DIGIT_YEAR_BASE,
    YEAR_WIDTH,
)
from humanformat.diagnostics import ErrorTemplate, PatternDefinitionError
from humanformat.enums import DateField, DateTimePattern

from .directives import (
    AmPmMarker,
    DirectiveSequence,
    Literal,
    NamedField,
    NumericField,
    SecondFraction,
    TwoDigitYear,
)

__all__ = [
    "TIME_PATTERNS",
    "compile_pattern",
    "time_directives",
]

logger = logging.getLogger(__name__)

# ============================================================================
# FRAGMENTS
# ============================================================================

_COLON = Literal(":")
_SPACE = Literal(" ")
_DASH = Literal("-")
_COMMA_SPACE = Literal(", ")

_YEAR = NumericField(DateField.YEAR, YEAR_WIDTH)
_MONTH = NumericField(DateField.MONTH, FIELD_WIDTH)
_DAY = NumericField(DateField.DAY, FIELD_WIDTH)
_DAY_OF_YEAR = NumericField(DateField.DAY_OF_YEAR, DAY_OF_YEAR_WIDTH)
_HOUR = NumericField(DateField.HOUR, FIELD_WIDTH)
_HOUR_12 = NumericField(DateField.HOUR_12, FIELD_WIDTH)
_MINUTE = NumericField(DateField.MINUTE, FIELD_WIDTH)
_SECOND = NumericField(DateField.SECOND, FIELD_WIDTH)
_MILLIS = SecondFraction(MILLIS_DIGITS)
_SHORT_YEAR = TwoDigitYear(TWO_DIGIT_YEAR_BASE)

_MONTH_NAME = NamedField(DateField.MONTH, MONTH_NAMES)
_DAY_NAME = NamedField(DateField.DAY_OF_WEEK, DAY_OF_WEEK_NAMES)
_AM_PM = AmPmMarker()

# dd:MM:yyyy
_SHORT_DATE: DirectiveSequence = (_DAY, _COLON, _MONTH, _COLON, _YEAR)

# MMM dd, yyyy
_LONG_DATE: DirectiveSequence = (_MONTH_NAME, _SPACE, _DAY, _COMMA_SPACE, _YEAR)

# EEE, MMM dd, yyyy
_FULL_DATE: DirectiveSequence = (_DAY_NAME, _COMMA_SPACE, *_LONG_DATE)

_HM_12: DirectiveSequence = (_HOUR_12, _COLON, _MINUTE)
_HM_24: DirectiveSequence = (_HOUR, _COLON, _MINUTE)
_HMS_12: DirectiveSequence = (*_HM_12, _COLON, _SECOND)
_HMS_24: DirectiveSequence = (*_HM_24, _COLON, _SECOND)

# Patterns that reference only time-of-day fields.
TIME_PATTERNS: frozenset[DateTimePattern] = frozenset(
    {
        DateTimePattern.TIME_HH_MM,
        DateTimePattern.TIME_HH_MM_24,
        DateTimePattern.TIME_HH_MM_SS,
        DateTimePattern.TIME_HH_MM_SS_24,
        DateTimePattern.TIME_12,
        DateTimePattern.TIME_24,
    }
)


def _coerce_pattern(pattern: object) -> DateTimePattern:
    """Return pattern as a catalog member or raise PatternDefinitionError."""
    if isinstance(pattern, DateTimePattern):
        return pattern
    try:
        return DateTimePattern(pattern)
    except ValueError:
        raise PatternDefinitionError(ErrorTemplate.pattern_unknown(pattern)) from None


@lru_cache(maxsize=len(DateTimePattern))
def _compile(pattern: DateTimePattern) -> DirectiveSequence:  # noqa: PLR0911 - one arm per pattern
    match pattern:
        case DateTimePattern.TIME_HH_MM:
            return _HM_12
        case DateTimePattern.TIME_HH_MM_24:
            return _HM_24
        case DateTimePattern.TIME_HH_MM_SS:
            return _HMS_12
        case DateTimePattern.TIME_HH_MM_SS_24:
            return _HMS_24
        case DateTimePattern.TIME_12:
            return (*_HMS_12, _SPACE, _AM_PM)
        case DateTimePattern.TIME_24:
            return _HMS_24
        case DateTimePattern.SHORT_DATE:
            return _SHORT_DATE
        case DateTimePattern.LONG_DATE:
            return _LONG_DATE
        case DateTimePattern.SHORT_DATE_TIME:
            return (*_SHORT_DATE, _SPACE, *_HM_12, _SPACE, _AM_PM)
        case DateTimePattern.SHORT_DATE_TIME_24:
            return (*_SHORT_DATE, _SPACE, *_HM_24)
        case DateTimePattern.LONG_DATE_TIME:
            return (*_FULL_DATE, _SPACE, *_HM_12, _SPACE, _AM_PM)
        case DateTimePattern.LONG_DATE_TIME_24:
            return (*_FULL_DATE, _SPACE, *_HM_24)
        case DateTimePattern.LONG_DATE_TIME_MILLIS:
            return (*_FULL_DATE, _SPACE, *_HMS_12, Literal("."), _MILLIS, _SPACE, _AM_PM)
        case DateTimePattern.LONG_DATE_TIME_MILLIS_24:
            return (*_FULL_DATE, _SPACE, *_HMS_24, Literal("."), _MILLIS)
        case DateTimePattern.FILE_NAME:
            return (
                _DAY, _DASH, _MONTH, _DASH, _YEAR,
                _SPACE,
                _HOUR, _DASH, _MINUTE, _DASH, _SECOND,
            )  # fmt: skip
        case DateTimePattern.DAY_ONLY:
            return (_DAY_NAME,)
        case DateTimePattern.MONTH_ONLY:
            return (_MONTH_NAME,)
        case DateTimePattern.YEAR_ONLY:
            return (_YEAR,)
        case DateTimePattern.MONTH_DAY:
            return (_MONTH_NAME, _SPACE, _DAY)
        case DateTimePattern.SHORT_MONTH_YEAR:
            return (_MONTH_NAME, _SPACE, _SHORT_YEAR)
        case DateTimePattern.MONTH_YEAR:
            return (_MONTH_NAME, _SPACE, _YEAR)
        case DateTimePattern.DAY_OF_YEAR:
            return (_DAY_OF_YEAR,)
        case DateTimePattern.DAY_OF_MONTH:
            return (_DAY,)
        case DateTimePattern.MONTH_OF_YEAR:
            return (_MONTH,)
        case DateTimePattern.TIMESTAMP_COMPACT:
            return (_YEAR, _MONTH, _DAY, _HOUR, _MINUTE, _SECOND)
        case _ as unreachable:
            # DateTimePattern is closed; a new member without an arm above
            # fails type checking here.
            assert_never(unreachable)


def compile_pattern(pattern: DateTimePattern) -> DirectiveSequence:
    """Compile a catalog pattern to its directive sequence.

    Pure and memoised: the same pattern always yields the identical tuple
    object, shared by the renderer and the parser.

    Args:
        pattern: Catalog member (its string value is also accepted)

    Returns:
        Immutable tuple of directives

    Raises:
        PatternDefinitionError: If pattern is not a catalog member

    Example:
        >>> [d.describe() for d in compile_pattern(DateTimePattern.TIME_HH_MM_24)]
        ['2-digit hour', "':'", '2-digit minute']
    """
    return _compile(_coerce_pattern(pattern))


def time_directives(pattern: DateTimePattern) -> DirectiveSequence:
    """Directive sequence used when rendering a bare time of day.

    TIME_* patterns use their own sequence. Date-bearing patterns cannot be
    applied to a time value and render as TIME_12 instead.

    Args:
        pattern: Catalog member

    Returns:
        Directive sequence containing only time-of-day fields

    Raises:
        PatternDefinitionError: If pattern is not a catalog member
    """
    member = _coerce_pattern(pattern)
    if member in TIME_PATTERNS:
        return _compile(member)
    logger.debug("Pattern %s has date fields; rendering time as TIME_12", member)
    return _compile(DateTimePattern.TIME_12)

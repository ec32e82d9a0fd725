"""Elapsed-duration formatting.

Durations are plain magnitudes (not calendar values), so they bypass the
directive compiler and format with fixed-width numeric templates. Hours are
not wrapped at 24: a 30-hour duration renders as 30:00:00.

Negative durations keep the sign on each non-zero component, matching
truncating integer division.

Python 3.13+. Zero external dependencies.
"""

from typing import assert_never

from humanformat.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)
from humanformat.enums import DurationPattern, DurationUnit

__all__ = ["format_duration", "round_time", "to_millis"]

_UNIT_MILLIS: dict[DurationUnit, int] = {
    DurationUnit.MILLISECONDS: 1,
    DurationUnit.SECONDS: MILLIS_PER_SECOND,
    DurationUnit.MINUTES: MILLIS_PER_MINUTE,
    DurationUnit.HOURS: MILLIS_PER_HOUR,
    DurationUnit.DAYS: MILLIS_PER_DAY,
}


def to_millis(value: int, unit: DurationUnit) -> int:
    """Convert a magnitude in unit to milliseconds.

    Example:
        >>> to_millis(90, DurationUnit.MINUTES)
        5400000
    """
    return value * _UNIT_MILLIS[DurationUnit(unit)]


def round_time(value: int) -> str:
    """Zero-pad one clock component to two digits.

    Example:
        >>> round_time(7)
        '07'
        >>> round_time(125)
        '125'
    """
    return f"{value:02d}"


def _components(millis: int) -> tuple[int, int, int, int]:
    """Split millis into (hours, minutes, seconds, millis), truncating toward zero."""
    sign = -1 if millis < 0 else 1
    magnitude = abs(millis)
    return (
        sign * (magnitude // MILLIS_PER_HOUR),
        sign * (magnitude // MILLIS_PER_MINUTE % 60),
        sign * (magnitude // MILLIS_PER_SECOND % 60),
        sign * (magnitude % MILLIS_PER_SECOND),
    )


def format_duration(value: int, unit: DurationUnit, pattern: DurationPattern) -> str:
    """Format an elapsed duration.

    Args:
        value: Duration magnitude
        unit: Unit of value
        pattern: Display format

    Returns:
        Formatted duration

    Examples:
        >>> format_duration(13_233_333, DurationUnit.MILLISECONDS, DurationPattern.HH_MM_SS_MS)
        '03:40:33.333'
        >>> format_duration(2433, DurationUnit.SECONDS, DurationPattern.AUTO)
        '40:33'
        >>> format_duration(0, DurationUnit.SECONDS, DurationPattern.AUTO)
        '00'
    """
    millis = to_millis(value, unit)
    hours, minutes, seconds, fraction = _components(millis)

    match DurationPattern(pattern):
        case DurationPattern.SS_MS:
            return f"{seconds:02d}.{fraction:03d}"
        case DurationPattern.MM_SS:
            return f"{minutes:02d}:{seconds:02d}"
        case DurationPattern.MM_SS_MS:
            return f"{minutes:02d}:{seconds:02d}.{fraction:03d}"
        case DurationPattern.HH_MM_SS:
            return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
        case DurationPattern.HH_MM_SS_MS:
            return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{fraction:03d}"
        case DurationPattern.AUTO:
            if value == 0:
                return "00"
            if millis < MILLIS_PER_HOUR:
                return f"{minutes:02d}:{seconds:02d}"
            return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
        case _ as unreachable:
            assert_never(unreachable)

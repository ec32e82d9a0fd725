"""Type guard functions for parsing result type narrowing.

All parse_* functions return tuple[result | None, tuple[FormatParseError, ...]].
Type guards check the result component to narrow types for mypy.

Python 3.13+ with TypeIs support (PEP 742).

Note: All guards accept None and return False. This simplifies the pattern from
`if not errors and is_valid_millis(result)` to just `if is_valid_millis(result)`.

Example:
    >>> from humanformat.parsing import parse_date_time_to_millis, is_valid_millis
    >>> result, errors = parse_date_time_to_millis("2000", DateTimePattern.YEAR_ONLY)
    >>> if is_valid_millis(result):
    ...     # mypy knows result is int
    ...     day = result // 86_400_000
"""

from datetime import datetime
from typing_extensions import TypeIs

from humanformat.constants import INT64_MAX, INT64_MIN

__all__ = [
    "is_valid_datetime",
    "is_valid_millis",
]


def is_valid_datetime(value: datetime | None) -> TypeIs[datetime]:
    """Type guard: Check if parsed datetime is valid (not None).

    Safe to call directly on parse_date_time() result without checking errors first.

    Args:
        value: Datetime from parse_date_time() result tuple (may be None on error)

    Returns:
        True if value is a datetime object, False otherwise

    Example:
        >>> result, errors = parse_date_time("09:12:2000", DateTimePattern.SHORT_DATE)
        >>> if is_valid_datetime(result):
        ...     # Type-safe: mypy knows result is datetime
        ...     year = result.year
    """
    return value is not None


def is_valid_millis(value: int | None) -> TypeIs[int]:
    """Type guard: Check if parsed epoch milliseconds are valid.

    Returns False for None and for values outside the signed 64-bit range.
    Booleans are rejected even though bool subclasses int.

    Args:
        value: Milliseconds from parse_date_time_to_millis() (may be None on error)

    Returns:
        True if value is an int within the signed 64-bit range, False otherwise
    """
    if value is None or isinstance(value, bool):
        return False
    return INT64_MIN <= value <= INT64_MAX

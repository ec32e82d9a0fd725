"""Bi-directional formatting: parse formatted strings back to Python types.

- Functions NEVER raise for malformed input - errors are returned in tuple
- An unknown pattern still raises PatternDefinitionError (programming error)

This module provides the inverse operations to humanformat.runtime.functions:
- Formatting: Python datetime / epoch millis -> display string
- Parsing: Display string -> Python datetime / epoch millis

Public API:
    Parsing Functions:
        parse_date_time - Returns tuple[datetime | None, tuple[FormatParseError, ...]]
        parse_date_time_fields - Returns tuple[DateTimeFields | None, tuple[FormatParseError, ...]]
        parse_date_time_to_millis - Returns tuple[int | None, tuple[FormatParseError, ...]]

    Type Guards:
        is_valid_datetime - TypeIs guard for datetime (not None)
        is_valid_millis - TypeIs guard for int within signed 64-bit range

Example:
    >>> from humanformat.parsing import parse_date_time, is_valid_datetime
    >>> result, errors = parse_date_time("Dec 09, 2000", DateTimePattern.LONG_DATE)
    >>> if is_valid_datetime(result):
    ...     print(result.date())
    2000-12-09

Python 3.13+.
"""

from .dates import parse_date_time, parse_date_time_fields, parse_date_time_to_millis
from .guards import is_valid_datetime, is_valid_millis

__all__ = [
    # Type guards
    "is_valid_datetime",
    "is_valid_millis",
    # Parsing functions
    "parse_date_time",
    "parse_date_time_fields",
    "parse_date_time_to_millis",
]

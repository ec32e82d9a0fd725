"""Enumerations for humanformat type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.
Every member's value equals its name, so the value doubles as the
canonical display name.

Python 3.13+.
"""

from enum import StrEnum

__all__ = [
    "DateField",
    "DateTimePattern",
    "DurationPattern",
    "DurationUnit",
]


class DateTimePattern(StrEnum):
    """Closed catalog of date/time display patterns.

    Each member compiles to exactly one directive sequence
    (see humanformat.syntax.compiler). Examples show 2000-12-09 19:30:45.123.

    StrEnum provides automatic string conversion: str(DateTimePattern.TIME_24) == "TIME_24"
    """

    TIME_HH_MM = "TIME_HH_MM"
    """12-hour time: 07:30"""

    TIME_HH_MM_24 = "TIME_HH_MM_24"
    """24-hour time: 19:30"""

    TIME_HH_MM_SS = "TIME_HH_MM_SS"
    """12-hour time with seconds: 07:30:45"""

    TIME_HH_MM_SS_24 = "TIME_HH_MM_SS_24"
    """24-hour time with seconds: 19:30:45"""

    TIME_12 = "TIME_12"
    """12-hour time with AM/PM marker: 07:30:45 PM"""

    TIME_24 = "TIME_24"
    """24-hour time: 19:30:45"""

    SHORT_DATE = "SHORT_DATE"
    """Short date: 09:12:2000"""

    LONG_DATE = "LONG_DATE"
    """Long date: Dec 09, 2000"""

    SHORT_DATE_TIME = "SHORT_DATE_TIME"
    """Short date with 12-hour time: 09:12:2000 07:30 PM"""

    SHORT_DATE_TIME_24 = "SHORT_DATE_TIME_24"
    """Short date with 24-hour time: 09:12:2000 19:30"""

    LONG_DATE_TIME = "LONG_DATE_TIME"
    """Full date with 12-hour time: Sat, Dec 09, 2000 07:30 PM"""

    LONG_DATE_TIME_24 = "LONG_DATE_TIME_24"
    """Full date with 24-hour time: Sat, Dec 09, 2000 19:30"""

    LONG_DATE_TIME_MILLIS = "LONG_DATE_TIME_MILLIS"
    """Full date with milliseconds: Sat, Dec 09, 2000 07:30:45.123 PM"""

    LONG_DATE_TIME_MILLIS_24 = "LONG_DATE_TIME_MILLIS_24"
    """Full date with milliseconds, 24-hour: Sat, Dec 09, 2000 19:30:45.123"""

    FILE_NAME = "FILE_NAME"
    """File-name safe date and time: 09-12-2000 19-30-45"""

    DAY_ONLY = "DAY_ONLY"
    """Day of week: Sat"""

    MONTH_ONLY = "MONTH_ONLY"
    """Month name: Dec"""

    YEAR_ONLY = "YEAR_ONLY"
    """Year: 2000"""

    MONTH_DAY = "MONTH_DAY"
    """Month name and day: Dec 09"""

    SHORT_MONTH_YEAR = "SHORT_MONTH_YEAR"
    """Month name and two-digit year: Dec 00"""

    MONTH_YEAR = "MONTH_YEAR"
    """Month name and year: Dec 2000"""

    DAY_OF_YEAR = "DAY_OF_YEAR"
    """Day of year: 344"""

    DAY_OF_MONTH = "DAY_OF_MONTH"
    """Day of month: 09"""

    MONTH_OF_YEAR = "MONTH_OF_YEAR"
    """Month number: 12"""

    TIMESTAMP_COMPACT = "TIMESTAMP_COMPACT"
    """Compact timestamp (yyyyMMddHHmmss): 20001209193045"""

    @property
    def display_name(self) -> str:
        """Canonical display name (identical to the member name)."""
        return self.name


class DurationPattern(StrEnum):
    """Display formats for elapsed durations.

    Examples show a duration of 3h 40m 33s 333ms where relevant.
    """

    SS_MS = "SS_MS"
    """Seconds and milliseconds: 33.333"""

    MM_SS = "MM_SS"
    """Minutes and seconds: 40:33"""

    MM_SS_MS = "MM_SS_MS"
    """Minutes, seconds and milliseconds: 40:33.333"""

    HH_MM_SS = "HH_MM_SS"
    """Hours, minutes and seconds: 03:40:33"""

    HH_MM_SS_MS = "HH_MM_SS_MS"
    """Hours, minutes, seconds and milliseconds: 03:40:33.333"""

    AUTO = "AUTO"
    """Zero renders as 00, MM:SS below one hour, HH:MM:SS otherwise."""


class DurationUnit(StrEnum):
    """Unit of a raw duration magnitude."""

    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"


class DateField(StrEnum):
    """Calendar field addressed by a directive.

    StrEnum provides automatic string conversion: str(DateField.YEAR) == "year"
    """

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    DAY_OF_YEAR = "day_of_year"
    DAY_OF_WEEK = "day_of_week"
    HOUR = "hour"
    HOUR_12 = "hour_12"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def is_date_field(self) -> bool:
        """True for fields that need a calendar date (not just a time of day)."""
        return self in _DATE_FIELDS


_DATE_FIELDS: frozenset[DateField] = frozenset(
    {
        DateField.YEAR,
        DateField.MONTH,
        DateField.DAY,
        DateField.DAY_OF_YEAR,
        DateField.DAY_OF_WEEK,
    }
)

"""Quickstart example for humanformat.

Formats a single instant with a few catalog patterns, formats a duration,
and runs the humanize helpers.

Note: Examples pass tzinfo=UTC so output does not depend on the host zone.
Omit it to render in the host local zone.
"""

from datetime import UTC, time

from humanformat import (
    DateTimePattern,
    DurationPattern,
    DurationUnit,
    duration_to_millis,
    format_date_time,
    format_duration,
    format_time,
)
from humanformat.humanize import (
    aspect_ratio,
    color_to_hex,
    format_file_size,
    hex_to_color,
    resolution_label,
    shortened_notation,
)

# 2000-12-09 19:30:45.123 UTC
INSTANT = 976_390_245_123

# Example 1: Date/time patterns
print("=" * 50)
print("Example 1: Date/Time Patterns")
print("=" * 50)

for pattern in (
    DateTimePattern.SHORT_DATE,
    DateTimePattern.TIME_24,
    DateTimePattern.FILE_NAME,
    DateTimePattern.LONG_DATE_TIME_MILLIS,
    DateTimePattern.SHORT_MONTH_YEAR,
):
    print(f"{pattern:<24} {format_date_time(INSTANT, pattern, tzinfo=UTC)}")

# Example 2: Times of day
print("\n" + "=" * 50)
print("Example 2: Times of Day")
print("=" * 50)

print(format_time(time(7, 30, 45), DateTimePattern.TIME_12))  # 07:30:45 AM
print(format_time(27_045_000, DateTimePattern.TIME_24))  # 07:30:45

# Example 3: Durations
print("\n" + "=" * 50)
print("Example 3: Durations")
print("=" * 50)

millis, errors = duration_to_millis(1, 30, 0)
if millis is not None:
    print(format_duration(millis, DurationUnit.MILLISECONDS, DurationPattern.HH_MM_SS))
print(format_duration(2433, DurationUnit.SECONDS, DurationPattern.AUTO))  # 40:33

# Example 4: Humanize helpers
print("\n" + "=" * 50)
print("Example 4: Humanize Helpers")
print("=" * 50)

print(format_file_size(1536))  # 1.50 KB
print(format_file_size(1536, "de-DE"))  # 1,50 KB
print(shortened_notation(1_234_567))  # 1.2M
print(resolution_label(3840, 2160), aspect_ratio(3840, 2160))  # 4K UHD 16:9

color, errors = hex_to_color("#336699")
if color is not None:
    print(color_to_hex(color))  # FF336699

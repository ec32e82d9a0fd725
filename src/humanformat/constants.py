"""Shared constants for humanformat.

This module provides centralized configuration constants used across
the syntax, runtime and humanize packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Calendar: defaults applied when parsed input omits fields
- Grammar: fixed widths and bases used by the pattern compiler
- Input limits: bounds on parser input
- Units: millisecond conversion factors and integer bounds
- Locale: default locale for the humanize helpers

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Calendar
    "DEFAULT_YEAR",
    "DEFAULT_MONTH",
    "DEFAULT_DAY",
    # Grammar
    "TWO_DIGIT_YEAR_BASE",
    "YEAR_WIDTH",
    "DAY_OF_YEAR_WIDTH",
    "FIELD_WIDTH",
    "MILLIS_DIGITS",
    "AM_MARKER",
    "PM_MARKER",
    # Input limits
    "MAX_INPUT_LENGTH",
    # Units
    "MILLIS_PER_SECOND",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "INT64_MIN",
    "INT64_MAX",
    # Locale
    "DEFAULT_LOCALE",
]

# ============================================================================
# CALENDAR DEFAULTS
# ============================================================================

# Parsed input that omits date fields resolves against the Unix epoch date.
# Time fields that are not present resolve to midnight.
DEFAULT_YEAR: int = 1970
DEFAULT_MONTH: int = 1
DEFAULT_DAY: int = 1

# ============================================================================
# GRAMMAR
# ============================================================================

# Two-digit years cover [TWO_DIGIT_YEAR_BASE, TWO_DIGIT_YEAR_BASE + 99].
# "60".."99" read as 1960..1999, "00".."59" as 2000..2059.
TWO_DIGIT_YEAR_BASE: int = 1960

# Zero-padding widths for numeric fields.
YEAR_WIDTH: int = 4
DAY_OF_YEAR_WIDTH: int = 3
FIELD_WIDTH: int = 2

# Fixed length of the fractional-second field (milliseconds).
MILLIS_DIGITS: int = 3

AM_MARKER: str = "AM"
PM_MARKER: str = "PM"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# The longest rendered pattern is well under 64 characters; anything past
# this bound cannot match any grammar and is rejected before parsing.
MAX_INPUT_LENGTH: int = 256

# ============================================================================
# UNITS
# ============================================================================

MILLIS_PER_SECOND: int = 1_000
MILLIS_PER_MINUTE: int = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR: int = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY: int = 24 * MILLIS_PER_HOUR

# Millisecond values are exchanged as signed 64-bit integers.
# Arithmetic leaving this range is reported as a conversion error.
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

# ============================================================================
# LOCALE
# ============================================================================

# Humanize helpers default to a fixed locale rather than the host locale
# so output is identical across environments.
DEFAULT_LOCALE: str = "en_US"

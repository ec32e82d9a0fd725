"""humanformat - Pattern-driven date/time formatting and humanize helpers.

Converts raw values (epoch timestamps, durations, byte counts, magnitudes,
colors, pixel dimensions) into human-readable strings, and parses formatted
date/time strings back into raw values with the exact grammar used to
produce them.

Public API:
    DateTimePattern - Closed catalog of date/time display patterns
    format_date_time - Epoch millis or datetime -> text
    format_time - Millis since midnight or time -> text
    parse_date_time - Text -> naive datetime (errors returned, never raised)
    parse_date_time_to_millis - Text -> epoch millis
    duration_to_millis - h/m/s -> millis (64-bit checked)
    format_duration - Elapsed duration -> text (DurationPattern)

Exceptions:
    FormatError - Base exception class
    FormatParseError - Malformed input text (returned in result tuples)
    FormatConversionError - Overflow or malformed encoded values (returned)
    PatternDefinitionError - Programming errors (raised)

Submodules:
    humanformat.syntax - Directives, pattern compiler, parser
    humanformat.runtime - Renderer, clock helpers, formatting functions
    humanformat.parsing - Parsing functions and type guards
    humanformat.humanize - File sizes, compact notation, colors, resolutions
    humanformat.diagnostics - Error types, codes and formatters
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    FormatConversionError,
    FormatError,
    FormatParseError,
    PatternDefinitionError,
)
from .enums import DateTimePattern, DurationPattern, DurationUnit
from .parsing import parse_date_time, parse_date_time_to_millis
from .runtime import duration_to_millis, format_date_time, format_duration, format_time

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("humanformat")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DateTimePattern",
    "DurationPattern",
    "DurationUnit",
    "FormatConversionError",
    "FormatError",
    "FormatParseError",
    "PatternDefinitionError",
    "__version__",
    "duration_to_millis",
    "format_date_time",
    "format_duration",
    "format_time",
    "parse_date_time",
    "parse_date_time_to_millis",
]

"""Bi-Directional Formatting Examples.

humanformat parses exactly the text it formats:
- Format: instant -> display (format_date_time)
- Parse: display -> instant (humanformat.parsing)

API Notes:
- Type guards (is_valid_datetime, is_valid_millis) accept None for simplified patterns
- All parse functions return tuple[result, tuple[FormatParseError, ...]] (immutable)
- Functions never raise for malformed input - errors returned in immutable tuple
"""

from datetime import UTC

from humanformat import DateTimePattern, format_date_time
from humanformat.diagnostics import DiagnosticFormatter, OutputFormat
from humanformat.parsing import (
    is_valid_datetime,
    is_valid_millis,
    parse_date_time,
    parse_date_time_to_millis,
)


def example_roundtrip() -> None:
    """Format an instant and parse it back."""
    print("[Example 1] Round Trip")
    print("-" * 60)

    instant = 976_390_245_123
    text = format_date_time(instant, DateTimePattern.LONG_DATE_TIME_MILLIS, tzinfo=UTC)
    print(f"Formatted: {text}")

    parsed, _ = parse_date_time_to_millis(text, DateTimePattern.LONG_DATE_TIME_MILLIS, tzinfo=UTC)
    if is_valid_millis(parsed):
        print(f"Parsed back: {parsed} (match: {parsed == instant})")


def example_form_validation() -> None:
    """Validate user input against a pattern and report errors."""
    print("\n[Example 2] Form Validation")
    print("-" * 60)

    formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
    for user_input in ("09:12:2000", "9:12:2000", "09/12/2000", "31:02:2000"):
        result, errors = parse_date_time(user_input, DateTimePattern.SHORT_DATE)
        if is_valid_datetime(result):
            print(f"  {user_input!r:14} -> {result.date().isoformat()}")
            continue
        for error in errors:
            print(f"  {user_input!r:14} -> {formatter.format_error(error)}")


def example_reduced_patterns() -> None:
    """Reduced patterns resolve missing fields against 1970-01-01."""
    print("\n[Example 3] Reduced Patterns")
    print("-" * 60)

    for text, pattern in (
        ("Dec 00", DateTimePattern.SHORT_MONTH_YEAR),
        ("344", DateTimePattern.DAY_OF_YEAR),
        ("07:30:45 PM", DateTimePattern.TIME_12),
    ):
        result, _ = parse_date_time(text, pattern)
        print(f"  {pattern:<18} {text!r:14} -> {result}")


if __name__ == "__main__":
    print("=" * 60)
    print("humanformat Bi-Directional Formatting")
    print("=" * 60)

    example_roundtrip()
    example_form_validation()
    example_reduced_patterns()

    print("\n" + "=" * 60)
    print("All examples completed!")
    print("=" * 60)

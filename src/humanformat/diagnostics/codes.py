"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Definition errors (programming errors, raised)
        2000-2999: Parse errors (malformed input text, returned)
        3000-3999: Conversion errors (unit arithmetic, color codes, returned)
    """

    # Definition errors (1000-1999)
    PATTERN_UNKNOWN = 1001
    PATTERN_NEEDS_DATE = 1002

    # Parse errors (2000-2999)
    PARSE_INPUT_TYPE = 2001
    PARSE_INPUT_TOO_LONG = 2002
    PARSE_UNEXPECTED_END = 2003
    PARSE_LITERAL_MISMATCH = 2004
    PARSE_DIGITS_EXPECTED = 2005
    PARSE_NAME_UNKNOWN = 2006
    PARSE_MARKER_UNKNOWN = 2007
    PARSE_TRAILING_INPUT = 2008
    PARSE_FIELD_OUT_OF_RANGE = 2009
    PARSE_WEEKDAY_MISMATCH = 2010
    PARSE_INSTANT_UNREPRESENTABLE = 2011

    # Conversion errors (3000-3999)
    CONVERSION_OVERFLOW = 3001
    COLOR_HEX_INVALID = 3002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of a diagnostic within parsed input.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line/column
                is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Input location (None for errors not tied to a position)
        hint: Suggestion for fixing the error
        expected: What the grammar expected at the failure point
        received: What was actually found
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    expected: str | None = None
    received: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in multi-line compiler style.

        Example output:
            error[PARSE_LITERAL_MISMATCH]: Expected ':' at position 2
              --> line 1, column 3
              = expected: ':'
              = received: '-'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)

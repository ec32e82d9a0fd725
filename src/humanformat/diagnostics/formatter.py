"""Rendering of parse and conversion diagnostics.

A diagnostic can be shown on its own or against the text that failed to
parse. Rust-style output then echoes that text with a caret run under the
span, which points straight at the field that broke.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import assert_never

from .codes import Diagnostic
from .errors import FormatError, FormatParseError

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_GUTTER = "   | "


class OutputFormat(StrEnum):
    """Output styles for DiagnosticFormatter."""

    RUST = "rust"  # multi-line, with source echo
    SIMPLE = "simple"  # one line
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns diagnostics (or the errors carrying them) into text.

    Attributes:
        output_format: Output style (rust, simple, json)
        show_source: Echo the failing input under rust output when it is known

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.pattern_unknown("X")))
        PATTERN_UNKNOWN: Unknown date-time pattern: 'X'
    """

    output_format: OutputFormat = OutputFormat.RUST
    show_source: bool = True

    def format(self, diagnostic: Diagnostic, source: str | None = None) -> str:
        """Format one diagnostic, optionally against the input it refers to."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic, source)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic, source)
            case _ as unreachable:
                assert_never(unreachable)

    def format_error(self, error: FormatError) -> str:
        """Format a returned error; parse errors supply their input as source.

        Example:
            >>> _, errors = parse_date_time("9:12:2000", DateTimePattern.SHORT_DATE)
            >>> print(DiagnosticFormatter().format_error(errors[0]))
            error[PARSE_DIGITS_EXPECTED]: Expected 2 digits for day at position 0, found '9:'
              --> line 1, column 1
               | 9:12:2000
               | ^^
            ...
        """
        if error.diagnostic is None:
            return str(error)
        source = error.input_value if isinstance(error, FormatParseError) else None
        return self.format(error.diagnostic, source)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format several diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_errors(self, errors: Iterable[FormatError]) -> str:
        """Format the errors tuple of a parse or conversion call."""
        return "\n\n".join(self.format_error(e) for e in errors)

    def _format_rust(self, diagnostic: Diagnostic, source: str | None) -> str:
        lines = [f"{diagnostic.severity}[{diagnostic.code.name}]: {diagnostic.message}"]

        span = diagnostic.span
        if span is not None:
            lines.append(f"  --> line {span.line}, column {span.column}")
            if source is not None and self.show_source:
                underline = "^" * max(span.end - span.start, 1)
                lines.append(f"{_GUTTER}{source}")
                lines.append(f"{_GUTTER}{' ' * span.start}{underline}")

        for label, value in (
            ("expected", diagnostic.expected),
            ("received", diagnostic.received),
            ("help", diagnostic.hint),
        ):
            if value:
                lines.append(f"  = {label}: {value}")

        return "\n".join(lines)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        if diagnostic.span is None:
            return f"{diagnostic.code.name}: {diagnostic.message}"
        return f"{diagnostic.code.name}@{diagnostic.span.start}: {diagnostic.message}"

    def _format_json(self, diagnostic: Diagnostic, source: str | None) -> str:
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }
        if diagnostic.span is not None:
            data |= {
                "line": diagnostic.span.line,
                "column": diagnostic.span.column,
                "start": diagnostic.span.start,
                "end": diagnostic.span.end,
            }
        if source is not None:
            data["input"] = source
        for key in ("expected", "received", "hint"):
            if value := getattr(diagnostic, key):
                data[key] = value
        return json.dumps(data, ensure_ascii=False)

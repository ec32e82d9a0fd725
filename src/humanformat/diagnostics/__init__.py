"""Diagnostic system for humanformat errors.

Provides structured error diagnostics with codes, spans, hints and
expected/received context.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    FormatConversionError,
    FormatError,
    FormatParseError,
    PatternDefinitionError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormatConversionError",
    "FormatError",
    "FormatParseError",
    "OutputFormat",
    "PatternDefinitionError",
    "SourceSpan",
]

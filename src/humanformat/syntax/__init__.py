"""Pattern grammar package.

Provides directive definitions, the pattern compiler, and the parser that
inverts rendered text. Separate from runtime so the grammar can be inspected
without pulling in clock or formatting code.

Python 3.13+.
"""

from .compiler import TIME_PATTERNS, compile_pattern, time_directives
from .cursor import Cursor, ParseError
from .directives import (
    AmPmMarker,
    Directive,
    DirectiveSequence,
    Literal,
    NamedField,
    NumericField,
    SecondFraction,
    TwoDigitYear,
)
from .parser import DateTimeFields, parse_fields, resolve_fields

__all__ = [
    "TIME_PATTERNS",
    "AmPmMarker",
    "Cursor",
    "DateTimeFields",
    "Directive",
    "DirectiveSequence",
    "Literal",
    "NamedField",
    "NumericField",
    "ParseError",
    "SecondFraction",
    "TwoDigitYear",
    "compile_pattern",
    "parse_fields",
    "resolve_fields",
    "time_directives",
]

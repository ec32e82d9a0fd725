"""Immutable cursor over formatted input text.

Python 3.13+. Zero external dependencies.

Design:
    - Cursor is a frozen dataclass; every advance() returns a NEW cursor
    - EOF is a state (is_eof), not a return value
    - Line:column computed on demand, only when an error is reported

Formatted values are single-line, but the cursor still reports line and
column so diagnostics read the same for any input that slips a newline in.
"""

from dataclasses import dataclass

from humanformat.diagnostics import Diagnostic, SourceSpan

from .directives import Directive

__all__ = ["Cursor", "ParseError"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("09:12", 0)
        >>> cursor.current
        '0'
        >>> cursor.advance(2).current
        ':'
        >>> cursor.pos  # Original unchanged
        0
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_ahead(self, n: int) -> str:
        """Next n characters without advancing (fewer near EOF).

        Example:
            >>> Cursor("Dec 00", 0).slice_ahead(3)
            'Dec'
        """
        return self.source[self.pos : self.pos + n]

    def rest(self) -> str:
        """Everything from the current position to EOF."""
        return self.source[self.pos :]

    def starts_with(self, text: str) -> bool:
        """True if the input continues with text at the current position."""
        return self.source.startswith(text, self.pos)

    def count_digits(self, limit: int) -> int:
        """Count consecutive ASCII digits at the current position, up to limit.

        Only '0'..'9' count; other Unicode decimal digits (which str.isdigit()
        accepts) do not.

        Example:
            >>> Cursor("2000-12", 0).count_digits(4)
            4
            >>> Cursor("7:30", 0).count_digits(2)
            1
        """
        count = 0
        pos = self.pos
        end = min(len(self.source), pos + limit)
        while pos < end and "0" <= self.source[pos] <= "9":
            count += 1
            pos += 1
        return count

    def compute_line_col(self) -> tuple[int, int]:
        """Compute (line, column) for the current position, both 1-indexed.

        Example:
            >>> Cursor("ab", 1).compute_line_col()
            (1, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def span_to(self, end_pos: int) -> SourceSpan:
        """SourceSpan from the current position to end_pos (exclusive).

        end_pos is clamped into [pos, len(source)].
        """
        end = max(self.pos, min(end_pos, len(self.source)))
        line, col = self.compute_line_col()
        return SourceSpan(start=self.pos, end=end, line=line, column=col)


@dataclass(frozen=True, slots=True)
class ParseError:
    """Parse failure with location and structured diagnostic.

    Attributes:
        diagnostic: What went wrong, with span and expected/received context
        cursor: Cursor at the failure point
        directive: Directive being matched (None for trailing input)

    Example:
        >>> error.format_error()
        "1:3: Expected ':' at position 2, found '-'"
    """

    diagnostic: Diagnostic
    cursor: Cursor
    directive: Directive | None = None

    @property
    def position(self) -> int:
        """Character offset of the failure."""
        return self.cursor.pos

    def format_error(self) -> str:
        """Format error with line:column prefix."""
        line, col = self.cursor.compute_line_col()
        return f"{line}:{col}: {self.diagnostic.message}"

    def format_with_context(self) -> str:
        """Format error with the offending input line and a caret.

        Example:
            >>> print(error.format_with_context())
            1:3: Expected ':' at position 2, found '-'
            <BLANKLINE>
               1 | 09-12:2000
                     ^
        """
        line, col = self.cursor.compute_line_col()
        lines = self.cursor.source.split("\n")
        prefix = f"{line:4} | "
        return "\n".join(
            [
                self.format_error(),
                "",
                prefix + lines[line - 1],
                " " * (len(prefix) + col - 1) + "^",
            ]
        )

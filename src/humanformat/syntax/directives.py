"""Directive node definitions.

A directive is one atomic formatting instruction. A compiled pattern is an
ordered, immutable tuple of directives shared by the renderer and the parser,
so both sides walk the exact same grammar.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeAlias

from humanformat.catalog import NameTable
from humanformat.constants import AM_MARKER, PM_MARKER
from humanformat.enums import DateField

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Fixed text
    "Literal",
    "AmPmMarker",
    # Numeric fields
    "NumericField",
    "SecondFraction",
    "TwoDigitYear",
    # Table lookups
    "NamedField",
    # Type aliases
    "Directive",
    "DirectiveSequence",
]


# ============================================================================
# FIXED TEXT
# ============================================================================


@dataclass(frozen=True, slots=True)
class Literal:
    """Fixed text copied verbatim on render and matched exactly on parse."""

    text: str

    def __post_init__(self) -> None:
        """Validate literal invariants."""
        if not self.text:
            msg = "Literal text must not be empty"
            raise ValueError(msg)

    def describe(self) -> str:
        """Short description for diagnostics."""
        return repr(self.text)


@dataclass(frozen=True, slots=True)
class AmPmMarker:
    """Half-day marker paired with a 12-hour hour field.

    Attributes:
        am: Marker for hours 0..11
        pm: Marker for hours 12..23
    """

    am: str = AM_MARKER
    pm: str = PM_MARKER

    def describe(self) -> str:
        """Short description for diagnostics."""
        return f"{self.am}/{self.pm} marker"


# ============================================================================
# NUMERIC FIELDS
# ============================================================================


@dataclass(frozen=True, slots=True)
class NumericField:
    """Zero-padded unsigned decimal field of fixed width.

    Attributes:
        field: Calendar field rendered by this directive
        width: Exact digit count (render pads to it, parse requires it)

    Example:
        NumericField(DateField.HOUR, 2) renders 7 o'clock as "07"
    """

    field: DateField
    width: int

    def __post_init__(self) -> None:
        """Validate numeric field invariants."""
        if self.field is DateField.DAY_OF_WEEK:
            msg = "Day of week is a named field, not a numeric one"
            raise ValueError(msg)
        if self.width < 1:
            msg = f"NumericField width must be >= 1, got {self.width}"
            raise ValueError(msg)

    def describe(self) -> str:
        """Short description for diagnostics."""
        return f"{self.width}-digit {self.field}"


@dataclass(frozen=True, slots=True)
class SecondFraction:
    """Fixed-length fraction of a second, truncated (never rounded).

    Attributes:
        digits: Number of fraction digits (1..6; 3 means milliseconds)
    """

    digits: int

    def __post_init__(self) -> None:
        """Validate fraction invariants."""
        if not 1 <= self.digits <= 6:
            msg = f"SecondFraction digits must be in 1..6, got {self.digits}"
            raise ValueError(msg)

    def describe(self) -> str:
        """Short description for diagnostics."""
        return f"{self.digits}-digit second fraction"


@dataclass(frozen=True, slots=True)
class TwoDigitYear:
    """Year rendered as two digits relative to a base year.

    Years in [base_year, base_year + 99] render as year % 100. Years outside
    that window render in full with a leading '+', so the value stays
    recoverable.

    Attributes:
        base_year: First year of the two-digit window
    """

    base_year: int

    def expand(self, two_digits: int) -> int:
        """Map a two-digit value back into the window.

        Example:
            >>> TwoDigitYear(1960).expand(0)
            2000
            >>> TwoDigitYear(1960).expand(60)
            1960
        """
        return self.base_year + (two_digits - self.base_year) % 100

    def in_window(self, year: int) -> bool:
        """True if year renders as two digits."""
        return self.base_year <= year <= self.base_year + 99

    def describe(self) -> str:
        """Short description for diagnostics."""
        return f"2-digit year (base {self.base_year})"


# ============================================================================
# TABLE LOOKUPS
# ============================================================================


@dataclass(frozen=True, slots=True)
class NamedField:
    """Field rendered through a name table.

    Attributes:
        field: DAY_OF_WEEK or MONTH
        names: Table mapping the 1-based field index to text
    """

    field: DateField
    names: NameTable

    def __post_init__(self) -> None:
        """Validate named field invariants."""
        if self.field not in (DateField.DAY_OF_WEEK, DateField.MONTH):
            msg = f"NamedField supports day_of_week and month, got {self.field}"
            raise ValueError(msg)

    def describe(self) -> str:
        """Short description for diagnostics."""
        return f"{self.names.label} name"


# ============================================================================
# TYPE ALIASES
# ============================================================================

Directive: TypeAlias = Literal | AmPmMarker | NumericField | SecondFraction | TwoDigitYear | NamedField

DirectiveSequence: TypeAlias = tuple[Directive, ...]

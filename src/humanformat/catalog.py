"""Built-in name tables for day-of-week and month directives.

The tables are immutable module constants, initialized once at import and
never written afterwards. Safe for unsynchronized reads from any thread.

Indexes are 1-based: Monday=1 .. Sunday=7 (ISO weekday) and January=1 .. December=12.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = [
    "DAY_OF_WEEK_NAMES",
    "MONTH_NAMES",
    "NameTable",
]


@dataclass(frozen=True, slots=True)
class NameTable:
    """Fixed mapping from a 1-based index to a display name.

    Attributes:
        label: Short description used in diagnostics ("day-of-week", "month")
        names: Names in index order; names[0] belongs to index 1

    Example:
        >>> MONTH_NAMES.name_of(12)
        'Dec'
        >>> MONTH_NAMES.index_of("Dec")
        12
        >>> MONTH_NAMES.index_of("dec") is None
        True
    """

    label: str
    names: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate table invariants.

        Raises:
            ValueError: If the table is empty, contains an empty name,
                or contains duplicate names.
        """
        if not self.names:
            msg = f"Name table '{self.label}' must not be empty"
            raise ValueError(msg)
        if any(not name for name in self.names):
            msg = f"Name table '{self.label}' contains an empty name"
            raise ValueError(msg)
        if len(set(self.names)) != len(self.names):
            msg = f"Name table '{self.label}' contains duplicate names"
            raise ValueError(msg)

    def name_of(self, index: int) -> str:
        """Return the name for a 1-based index.

        Raises:
            IndexError: If index is outside 1..len(names)
        """
        if not 1 <= index <= len(self.names):
            msg = f"{self.label} index {index} out of range 1..{len(self.names)}"
            raise IndexError(msg)
        return self.names[index - 1]

    def index_of(self, name: str) -> int | None:
        """Return the 1-based index of an exact (case-sensitive) name, or None."""
        try:
            return self.names.index(name) + 1
        except ValueError:
            return None

    def match_at(self, source: str, pos: int) -> tuple[int, str] | None:
        """Find the longest table name starting at pos in source.

        Args:
            source: Text being parsed
            pos: Offset to match at

        Returns:
            (index, name) for the longest matching name, or None
        """
        best: tuple[int, str] | None = None
        for i, name in enumerate(self.names, start=1):
            if source.startswith(name, pos) and (best is None or len(name) > len(best[1])):
                best = (i, name)
        return best


DAY_OF_WEEK_NAMES: NameTable = NameTable(
    label="day-of-week",
    names=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
)

MONTH_NAMES: NameTable = NameTable(
    label="month",
    names=("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
)

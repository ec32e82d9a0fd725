"""humanformat exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Parse and conversion errors are returned to callers inside result tuples;
only definition errors are raised.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class FormatError(Exception):
    """Base exception for all humanformat errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PatternDefinitionError(FormatError):
    """A pattern was used in a way its definition does not support.

    This is a programming error, not a recoverable condition: an unknown
    pattern value, or date directives applied to a bare time of day.
    """


class FormatParseError(FormatError):
    """Error while parsing a formatted string back into a calendar value.

    Returned (not raised) by the humanformat.parsing functions.

    Attributes:
        input_value: The string that failed to parse
        pattern: Name of the pattern used for parsing
        position: Character offset of the failure (-1 if not positional)

    Example:
        >>> result, errors = parse_date_time("9:12:2000", DateTimePattern.SHORT_DATE)
        >>> if errors:
        ...     for error in errors:
        ...         print(f"Parse failed at {error.position}: {error.input_value}")
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        pattern: str = "",
        position: int = -1,
    ) -> None:
        """Initialize FormatParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            pattern: Name of the pattern used for parsing
            position: Character offset of the failure
        """
        super().__init__(message)
        self.input_value = input_value
        self.pattern = pattern
        self.position = position


class FormatConversionError(FormatError):
    """Error during unit or code conversion.

    Returned (not raised) when arithmetic would leave the signed 64-bit
    range or when an encoded value (such as a hex color) is malformed.

    Attributes:
        operation: Name of the conversion that failed
        operands: String form of the inputs
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        operation: str = "",
        operands: tuple[str, ...] = (),
    ) -> None:
        """Initialize FormatConversionError.

        Args:
            message: Error message string OR Diagnostic object
            operation: Name of the conversion that failed
            operands: String form of the inputs
        """
        super().__init__(message)
        self.operation = operation
        self.operands = operands

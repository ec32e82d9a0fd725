"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable, consistently formatted, and documents every
    error case in one place.
    """

    # ------------------------------------------------------------------
    # Definition errors
    # ------------------------------------------------------------------

    @staticmethod
    def pattern_unknown(value: object) -> Diagnostic:
        """Value is not a member of the pattern catalog.

        Args:
            value: The offending value

        Returns:
            Diagnostic for PATTERN_UNKNOWN
        """
        msg = f"Unknown date-time pattern: {value!r}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNKNOWN,
            message=msg,
            hint="Use a member of humanformat.DateTimePattern",
            received=type(value).__name__,
        )

    @staticmethod
    def pattern_needs_date(pattern: str, field: str) -> Diagnostic:
        """Date directive applied to a bare time of day.

        Args:
            pattern: Pattern (or directive sequence) description
            field: The date field that cannot be rendered

        Returns:
            Diagnostic for PATTERN_NEEDS_DATE
        """
        msg = f"Pattern {pattern} needs a calendar date to render field '{field}'"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_NEEDS_DATE,
            message=msg,
            hint="Render a datetime instead of a time, or use a TIME_* pattern",
        )

    # ------------------------------------------------------------------
    # Parse errors
    # ------------------------------------------------------------------

    @staticmethod
    def parse_input_type(type_name: str, pattern: str) -> Diagnostic:
        """Parse input is not a string.

        Args:
            type_name: Name of the received type
            pattern: Pattern used for parsing

        Returns:
            Diagnostic for PARSE_INPUT_TYPE
        """
        msg = f"Cannot parse {type_name} with pattern {pattern}: expected str"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INPUT_TYPE,
            message=msg,
            expected="str",
            received=type_name,
        )

    @staticmethod
    def parse_input_too_long(length: int, limit: int, pattern: str) -> Diagnostic:
        """Parse input exceeds the maximum accepted length.

        Args:
            length: Actual input length
            limit: Maximum accepted length
            pattern: Pattern used for parsing

        Returns:
            Diagnostic for PARSE_INPUT_TOO_LONG
        """
        msg = f"Input of {length} characters exceeds limit of {limit} for pattern {pattern}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INPUT_TOO_LONG,
            message=msg,
            hint="Trim the input to the formatted value only",
        )

    @staticmethod
    def parse_unexpected_end(expected: str, span: SourceSpan) -> Diagnostic:
        """Input ended before the grammar was complete.

        Args:
            expected: Description of the missing directive
            span: Location of the end of input

        Returns:
            Diagnostic for PARSE_UNEXPECTED_END
        """
        msg = f"Unexpected end of input at position {span.start}, expected {expected}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_UNEXPECTED_END,
            message=msg,
            span=span,
            expected=expected,
            received="end of input",
        )

    @staticmethod
    def parse_literal_mismatch(expected: str, received: str, span: SourceSpan) -> Diagnostic:
        """Fixed literal text did not match.

        Args:
            expected: The literal the grammar requires
            received: The text found at that position
            span: Location of the mismatch

        Returns:
            Diagnostic for PARSE_LITERAL_MISMATCH
        """
        msg = f"Expected {expected!r} at position {span.start}, found {received!r}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_LITERAL_MISMATCH,
            message=msg,
            span=span,
            expected=repr(expected),
            received=repr(received),
        )

    @staticmethod
    def parse_digits_expected(
        field: str, width: int, received: str, span: SourceSpan
    ) -> Diagnostic:
        """Numeric field did not contain exactly the required digit count.

        Args:
            field: Field name (e.g., "hour", "year")
            width: Required number of digits
            received: Text found at that position
            span: Location of the field

        Returns:
            Diagnostic for PARSE_DIGITS_EXPECTED
        """
        msg = f"Expected {width} digits for {field} at position {span.start}, found {received!r}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_DIGITS_EXPECTED,
            message=msg,
            span=span,
            hint=f"Zero-pad {field} to exactly {width} digits",
            expected=f"{width} digits",
            received=repr(received),
        )

    @staticmethod
    def parse_name_unknown(
        label: str, received: str, choices: tuple[str, ...], span: SourceSpan
    ) -> Diagnostic:
        """Text at a named field is not in the name table.

        Args:
            label: Table label ("day-of-week", "month")
            received: Text found at that position
            choices: Accepted names
            span: Location of the field

        Returns:
            Diagnostic for PARSE_NAME_UNKNOWN
        """
        msg = f"Unknown {label} name {received!r} at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NAME_UNKNOWN,
            message=msg,
            span=span,
            hint="Names are case-sensitive",
            expected=", ".join(choices),
            received=repr(received),
        )

    @staticmethod
    def parse_marker_unknown(
        received: str, choices: tuple[str, ...], span: SourceSpan
    ) -> Diagnostic:
        """Text at the AM/PM position is not a known marker.

        Args:
            received: Text found at that position
            choices: Accepted markers
            span: Location of the marker

        Returns:
            Diagnostic for PARSE_MARKER_UNKNOWN
        """
        msg = f"Expected AM/PM marker at position {span.start}, found {received!r}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_MARKER_UNKNOWN,
            message=msg,
            span=span,
            expected=", ".join(choices),
            received=repr(received),
        )

    @staticmethod
    def parse_trailing_input(received: str, span: SourceSpan) -> Diagnostic:
        """Characters remain after every directive was consumed.

        Args:
            received: The leftover text
            span: Location of the leftover text

        Returns:
            Diagnostic for PARSE_TRAILING_INPUT
        """
        msg = f"Unexpected trailing input {received!r} at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_TRAILING_INPUT,
            message=msg,
            span=span,
            expected="end of input",
            received=repr(received),
        )

    @staticmethod
    def parse_field_out_of_range(field: str, value: int, low: int, high: int) -> Diagnostic:
        """Parsed field value is outside its calendar range.

        Args:
            field: Field name
            value: Parsed value
            low: Smallest accepted value
            high: Largest accepted value

        Returns:
            Diagnostic for PARSE_FIELD_OUT_OF_RANGE
        """
        msg = f"Value {value} for {field} is out of range {low}..{high}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_FIELD_OUT_OF_RANGE,
            message=msg,
            expected=f"{low}..{high}",
            received=str(value),
        )

    @staticmethod
    def parse_weekday_mismatch(parsed: str, actual: str, iso_date: str) -> Diagnostic:
        """Parsed weekday contradicts the parsed date.

        Args:
            parsed: Weekday name found in the input
            actual: Weekday name of the parsed date
            iso_date: The parsed date in ISO form

        Returns:
            Diagnostic for PARSE_WEEKDAY_MISMATCH
        """
        msg = f"Weekday {parsed!r} does not match {iso_date}, which is a {actual}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_WEEKDAY_MISMATCH,
            message=msg,
            expected=actual,
            received=parsed,
        )

    @staticmethod
    def parse_instant_unrepresentable(value: str, reason: str) -> Diagnostic:
        """Parsed calendar value cannot be converted to epoch milliseconds.

        Args:
            value: Calendar value in ISO form
            reason: Underlying platform error

        Returns:
            Diagnostic for PARSE_INSTANT_UNREPRESENTABLE
        """
        msg = f"Cannot convert {value} to an epoch instant: {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INSTANT_UNREPRESENTABLE,
            message=msg,
        )

    # ------------------------------------------------------------------
    # Conversion errors
    # ------------------------------------------------------------------

    @staticmethod
    def conversion_overflow(operation: str, operands: str, result: int) -> Diagnostic:
        """Arithmetic result leaves the signed 64-bit range.

        Args:
            operation: Name of the conversion
            operands: Description of the inputs
            result: The out-of-range result

        Returns:
            Diagnostic for CONVERSION_OVERFLOW
        """
        msg = f"{operation}({operands}) = {result} overflows a signed 64-bit integer"
        return Diagnostic(
            code=DiagnosticCode.CONVERSION_OVERFLOW,
            message=msg,
            expected="-2**63 .. 2**63 - 1",
            received=str(result),
        )

    @staticmethod
    def color_hex_invalid(value: str, reason: str) -> Diagnostic:
        """Hex color string is malformed.

        Args:
            value: The hex string
            reason: What is wrong with it

        Returns:
            Diagnostic for COLOR_HEX_INVALID
        """
        msg = f"Invalid hex color {value!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.COLOR_HEX_INVALID,
            message=msg,
            hint="Use #RRGGBB or #AARRGGBB",
            expected="6 or 8 hex digits",
            received=repr(value),
        )

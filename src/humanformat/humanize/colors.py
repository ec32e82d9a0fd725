"""ARGB color <-> hex string codec.

Colors are packed 32-bit ARGB integers (0xAARRGGBB). Hex text is
AARRGGBB, optionally prefixed with '#'; six-digit RRGGBB text is read as
fully opaque.

Python 3.13+. Zero external dependencies.
"""

import logging
import string

from humanformat.diagnostics import ErrorTemplate, FormatConversionError

__all__ = ["color_to_hex", "hex_to_color"]

logger = logging.getLogger(__name__)

_ARGB_MASK = 0xFFFFFFFF
_OPAQUE_ALPHA = "FF"
_HEX_DIGITS = frozenset(string.hexdigits)


def color_to_hex(argb: int) -> str:
    """Format a packed ARGB color as eight upper-case hex digits.

    Negative values (signed 32-bit ARGB) are taken modulo 2**32.

    Example:
        >>> color_to_hex(0xFF336699)
        'FF336699'
        >>> color_to_hex(-1)
        'FFFFFFFF'
    """
    return f"{argb & _ARGB_MASK:08X}"


def _invalid(value: str, reason: str) -> tuple[None, tuple[FormatConversionError, ...]]:
    logger.debug("hex_to_color(%r) failed: %s", value, reason)
    diagnostic = ErrorTemplate.color_hex_invalid(value, reason)
    return (None, (FormatConversionError(diagnostic, operation="hex_to_color", operands=(value,)),))


def hex_to_color(value: str) -> tuple[int | None, tuple[FormatConversionError, ...]]:
    """Parse #AARRGGBB or #RRGGBB text into a packed ARGB color.

    Args:
        value: Hex color, with or without a leading '#'

    Returns:
        Tuple of (result, errors):
        - result: Packed ARGB integer, or None if the text is malformed
        - errors: Tuple of FormatConversionError (empty tuple on success)

    Examples:
        >>> hex_to_color("#336699")
        (4281558681, ())
        >>> color, errors = hex_to_color("#12345")
        >>> color is None
        True
    """
    digits = value.removeprefix("#")
    if not all(c in _HEX_DIGITS for c in digits):
        return _invalid(value, "contains non-hex characters")
    match len(digits):
        case 8:
            return (int(digits, 16), ())
        case 6:
            return (int(_OPAQUE_ALPHA + digits, 16), ())
        case length:
            return _invalid(value, f"expected 6 or 8 hex digits, got {length}")

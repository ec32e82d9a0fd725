"""Magnitude formatting: byte counts, compact notation, percentages.

Output text is rendered through Babel with an explicit locale code (default
en_US), never the host locale, so the same call gives the same string on
every machine. Fixed patterns ("0.00", "0.0") keep the digit layout stable;
the locale contributes only the decimal and minus symbols. Values are
rounded half-up before Babel sees them, so 1.25 shows as "1.3".

Thread-safe. Python 3.13+. Uses Babel for i18n.
"""

import logging
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal, InvalidOperation
from typing import overload

from humanformat.constants import DEFAULT_LOCALE
from humanformat.core.babel_compat import get_babel_numbers
from humanformat.locale_utils import resolve_locale

__all__ = [
    "find_percentage",
    "format_file_size",
    "rounded_decimal",
    "shortened_notation",
]

logger = logging.getLogger(__name__)

_FILE_SIZE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
_FILE_SIZE_STEP = 1024

# Largest first; the first threshold the value reaches picks the suffix.
_NOTATION_SUFFIXES: tuple[tuple[int, str], ...] = (
    (10**15, "Q"),
    (10**12, "T"),
    (10**9, "B"),
    (10**6, "M"),
    (10**3, "K"),
)

_ONE_DECIMAL = Decimal("0.1")
_TWO_DECIMALS = Decimal("0.01")


def _half_up(value: int | float, quantum: Decimal) -> Decimal:
    # Babel rounds half-even; quantize first so the pattern only pads.
    number = Decimal(repr(value))
    if not number.is_finite():
        return number
    return number.quantize(quantum, rounding=ROUND_HALF_UP)


def format_file_size(size: int, locale_code: str = DEFAULT_LOCALE) -> str:
    """Format a byte count with binary (1024) units.

    Args:
        size: Number of bytes
        locale_code: Locale for the decimal separator (default: en_US)

    Returns:
        Size with two decimals and an upper-case unit

    Examples:
        >>> format_file_size(1536)
        '1.50 KB'
        >>> format_file_size(1536, "de_DE")
        '1,50 KB'
        >>> format_file_size(512)
        '512.00 B'
        >>> format_file_size(1152)
        '1.13 KB'
    """
    length = float(size)
    order = 0
    while length >= _FILE_SIZE_STEP and order < len(_FILE_SIZE_UNITS) - 1:
        order += 1
        length /= _FILE_SIZE_STEP

    numbers = get_babel_numbers()
    text = numbers.format_decimal(
        _half_up(length, _TWO_DECIMALS), format="0.00", locale=resolve_locale(locale_code)
    )
    return f"{text} {_FILE_SIZE_UNITS[order]}".upper()


def shortened_notation(value: int | float, locale_code: str = DEFAULT_LOCALE) -> str:
    """Abbreviate a large magnitude with a K/M/B/T/Q suffix.

    Values below 1000 are not abbreviated: integers render unchanged and
    floats with one decimal.

    Args:
        value: Magnitude to abbreviate
        locale_code: Locale for the decimal separator (default: en_US)

    Returns:
        Abbreviated text

    Examples:
        >>> shortened_notation(1_234_567)
        '1.2M'
        >>> shortened_notation(1250)
        '1.3K'
        >>> shortened_notation(999)
        '999'
        >>> shortened_notation(12.34)
        '12.3'
    """
    numbers = get_babel_numbers()
    locale = resolve_locale(locale_code)

    for threshold, suffix in _NOTATION_SUFFIXES:
        if value >= threshold:
            scaled = _half_up(value / threshold, _ONE_DECIMAL)
            text = numbers.format_decimal(scaled, format="0.0", locale=locale)
            return text + suffix

    if isinstance(value, int):
        return str(value)
    return numbers.format_decimal(_half_up(value, _ONE_DECIMAL), format="0.0", locale=locale)


def rounded_decimal(value: float, fraction: int = 0) -> float:
    """Round to a number of fraction digits using half-even rounding.

    The value is rounded through its shortest decimal representation, so
    2.675 rounds to 2.68 (not 2.67 as binary rounding would give).

    Args:
        value: Number to round
        fraction: Digits after the decimal point (>= 0)

    Returns:
        Rounded value; non-finite input is returned unchanged

    Raises:
        ValueError: If fraction is negative

    Example:
        >>> rounded_decimal(2.675, 2)
        2.68
        >>> rounded_decimal(0.5)
        0.0
    """
    if fraction < 0:
        msg = f"fraction must be >= 0, got {fraction}"
        raise ValueError(msg)
    try:
        quantum = Decimal(1).scaleb(-fraction)
        return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_EVEN))
    except InvalidOperation:
        # NaN and infinities have no quantized form.
        logger.debug("rounded_decimal(%r, %d): value returned unchanged", value, fraction)
        return value


@overload
def find_percentage(total: int, obtained: int) -> int: ...


@overload
def find_percentage(total: float, obtained: float) -> float: ...


def find_percentage(total: int | float, obtained: int | float) -> int | float:
    """Share of obtained in total, as a percentage.

    Integers in give a truncated integer out; floats give a value rounded to
    one decimal. A zero total gives zero rather than dividing by zero.

    Examples:
        >>> find_percentage(3, 1)
        33
        >>> find_percentage(3.0, 1.0)
        33.3
        >>> find_percentage(0, 5)
        0
    """
    if isinstance(total, int) and isinstance(obtained, int):
        if total == 0:
            return 0
        return int(obtained / total * 100)
    if total == 0:
        return 0.0
    return rounded_decimal(obtained / total * 100, 1)

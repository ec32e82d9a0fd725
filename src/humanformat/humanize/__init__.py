"""Humanize helpers: stateless formatters for peripheral values.

Byte counts, compact magnitudes, percentages, colors and display
resolutions. Locale-sensitive output goes through Babel with an explicit
locale code (default en_US).

Python 3.13+. Uses Babel for i18n.
"""

from .colors import color_to_hex, hex_to_color
from .display import aspect_ratio, resolution_label
from .numbers import find_percentage, format_file_size, rounded_decimal, shortened_notation

__all__ = [
    "aspect_ratio",
    "color_to_hex",
    "find_percentage",
    "format_file_size",
    "hex_to_color",
    "resolution_label",
    "rounded_decimal",
    "shortened_notation",
]

"""Display dimension labels: resolution names and aspect ratios.

Python 3.13+. Zero external dependencies.
"""

import math

__all__ = ["aspect_ratio", "resolution_label"]

# Keyed on the longer edge, largest first; the first threshold reached wins.
_RESOLUTION_LABELS: tuple[tuple[int, str], ...] = (
    (15360, "16K UHD"),
    (11520, "12K UHD"),
    (8192, "8K UHD"),
    (7680, "8K"),
    (5120, "5K"),
    (4096, "4K DCI"),
    (3840, "4K UHD"),
    (3200, "3K"),
    (2880, "WQHD+"),
    (2560, "2.5K"),
    (2048, "2K DCI"),
    (1920, "1080p HD"),
    (1600, "UXGA"),
    (1440, "HD+"),
    (1366, "HD"),
    (1280, "720p"),
    (1024, "XGA"),
    (960, "FWVGA"),
    (854, "480p"),
    (640, "360p"),
    (426, "240p"),
    (256, "144p"),
)


def resolution_label(width: int, height: int) -> str:
    """Common name for a pixel resolution.

    Orientation does not matter: the longer edge picks the label. Sizes
    below the smallest named tier render as WIDTHxHEIGHT.

    Examples:
        >>> resolution_label(1920, 1080)
        '1080p HD'
        >>> resolution_label(1080, 1920)
        '1080p HD'
        >>> resolution_label(200, 100)
        '200x100'
    """
    longer = max(width, height)
    for threshold, label in _RESOLUTION_LABELS:
        if longer >= threshold:
            return label
    return f"{width}x{height}"


def aspect_ratio(width: int, height: int) -> str:
    """Reduced WIDTH:HEIGHT ratio.

    Examples:
        >>> aspect_ratio(1920, 1080)
        '16:9'
        >>> aspect_ratio(0, 0)
        '0:0'
    """
    divisor = math.gcd(width, height)
    if divisor == 0:
        return "0:0"
    return f"{width // divisor}:{height // divisor}"

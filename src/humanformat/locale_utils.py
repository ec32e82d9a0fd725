"""Locale utilities for BCP-47 to POSIX conversion.

The humanize helpers take an explicit locale code (never the host locale);
this module normalizes it once at the boundary and validates it with Babel.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from humanformat.constants import DEFAULT_LOCALE
from humanformat.core.babel_compat import get_locale_class, get_unknown_locale_error

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "normalize_locale",
    "resolve_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> (locale.language, locale.territory)
        ('en', 'US')
    """
    return get_locale_class().parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the Babel locale cache.

    Useful in tests and after installing additional CLDR data at runtime.
    """
    get_babel_locale.cache_clear()


def resolve_locale(locale_code: str, fallback: str = DEFAULT_LOCALE) -> Locale:
    """Get a Babel Locale, falling back for unknown or malformed codes.

    For unknown or invalid locales, logs a warning and returns the fallback
    locale, so a bad locale code degrades output instead of failing it.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)
        fallback: Locale used when locale_code cannot be resolved

    Returns:
        Babel Locale object
    """
    unknown_locale_error = get_unknown_locale_error()
    try:
        return get_babel_locale(locale_code)
    except unknown_locale_error as e:
        logger.warning("Unknown locale '%s': %s. Falling back to %s", locale_code, e, fallback)
    except ValueError as e:
        logger.warning("Invalid locale '%s': %s. Falling back to %s", locale_code, e, fallback)
    return get_babel_locale(fallback)

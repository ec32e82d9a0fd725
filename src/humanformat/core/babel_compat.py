"""Lazy Babel accessors for the humanize helpers.

Babel is a hard dependency, but only the humanize helpers need it. Importing
it here, on first call, keeps CLDR loading out of the date/time engine
(compiler, renderer, parser), which never touches these functions.

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError


__all__ = [
    "BabelNumbersProtocol",
    "get_babel_numbers",
    "get_locale_class",
    "get_unknown_locale_error",
]


class BabelNumbersProtocol(Protocol):
    """The part of babel.numbers the humanize helpers call."""

    def format_decimal(  # noqa: D102
        self,
        number: int | float | Decimal,
        format: str | None = None,  # noqa: A002 - Babel's parameter name
        locale: Locale | str | None = None,
    ) -> str: ...


@lru_cache(maxsize=1)
def get_locale_class() -> type[Locale]:
    """babel.Locale, imported on first use."""
    from babel import Locale  # noqa: PLC0415

    return Locale


@lru_cache(maxsize=1)
def get_unknown_locale_error() -> type[UnknownLocaleError]:
    """babel.core.UnknownLocaleError, imported on first use."""
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


@lru_cache(maxsize=1)
def get_babel_numbers() -> BabelNumbersProtocol:
    """The babel.numbers module, imported on first use."""
    from babel import numbers  # noqa: PLC0415

    return numbers

"""Core utilities shared by the humanize helpers.

Isolates lazy Babel access so that the date/time engine keeps a
Babel-free import graph:

    core <- locale_utils <- humanize

Python 3.13+.
"""

from .babel_compat import get_babel_numbers, get_locale_class, get_unknown_locale_error

__all__ = ["get_babel_numbers", "get_locale_class", "get_unknown_locale_error"]

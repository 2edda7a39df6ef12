"""Locale utilities backed by Babel's CLDR data.

Used by the generator to sanity-check locale codes discovered on disk.
Codes are never rewritten: the intl data files and the .arb resources
must agree on the exact spelling (e.g. "zh_Hant"), so lookups only
normalize a private copy.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "is_known_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "en-US", "zh_Hant")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "zh_Hant")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("zh_Hant")  # Already normalized
        'zh_Hant'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def is_known_locale(locale_code: str) -> bool:
    """Check whether CLDR has data for a locale code.

    Example:
        >>> is_known_locale("en")
        True
        >>> is_known_locale("zh_Hant")
        True
        >>> is_known_locale("xx")
        False
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError):
        return False
    return True

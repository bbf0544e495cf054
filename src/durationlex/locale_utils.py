"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale normalization and Babel Locale lookup for the
localization module.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "FALLBACK_LOCALE",
    "get_babel_locale",
    "normalize_locale",
    "resolve_locale",
]

logger = logging.getLogger(__name__)

# Locale used when a requested locale is unknown or malformed.
FALLBACK_LOCALE: str = "en_US"


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
        >>> normalize_locale("lv")  # Already normalized
        'lv'
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
        >>> locale = get_babel_locale("de-DE")
        >>> locale.language, locale.territory
        ('de', 'DE')
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def resolve_locale(locale_code: str) -> Locale:
    """Get a Babel Locale, falling back to en_US for unknown locales.

    Never raises for a bad locale code: the failure is logged as a warning
    and FALLBACK_LOCALE is used instead.

    Example:
        >>> resolve_locale("xx_UNKNOWN").language  # warning logged
        'en'
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        return get_babel_locale(locale_code)
    except UnknownLocaleError as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE
        )
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE
        )
    return get_babel_locale(FALLBACK_LOCALE)

"""Locale tag utilities for structural subtag matching.

Locale tags are treated as opaque IETF-like strings (``language`` or
``language-REGION``). No registry validation or case normalization is
performed: matching is case-sensitive exact or prefix string comparison.

System locale detection is the one place Babel is consulted, to turn an
environment locale such as ``de_DE.UTF-8`` into the tag ``de-DE``.

Python 3.12+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from locresolve.constants import LOCALE_SEPARATOR

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "has_region",
    "is_locale_match",
    "language_subtag",
    "region_subtag",
    "to_locale_tag",
]

logger = logging.getLogger(__name__)


def language_subtag(tag: str) -> str:
    """Return the primary language subtag of a locale tag.

    Example:
        >>> language_subtag("pt-PT")
        'pt'
        >>> language_subtag("en")
        'en'
    """
    return tag.split(LOCALE_SEPARATOR, 1)[0]


def region_subtag(tag: str) -> str | None:
    """Return everything after the language subtag, or None.

    Example:
        >>> region_subtag("es-MX")
        'MX'
        >>> region_subtag("es") is None
        True
    """
    parts = tag.split(LOCALE_SEPARATOR, 1)
    return parts[1] if len(parts) > 1 else None


def has_region(tag: str) -> bool:
    """Check whether a locale tag carries a subtag after the language."""
    return LOCALE_SEPARATOR in tag


def is_locale_match(target: str, preferred: str) -> bool:
    """Check whether a target locale is covered by a preferred locale.

    A target matches when it is exactly the preferred tag's language, or
    when it is a regional tag beginning with that language. Used by
    visibility enablers to decide whether their locale is preferred.

    Args:
        target: Locale tag the caller is interested in (e.g. 'es-AR')
        preferred: One of the user's preferred locale tags (e.g. 'es-MX')

    Returns:
        True if the target should be treated as preferred

    Example:
        >>> is_locale_match("es", "es-MX")
        True
        >>> is_locale_match("es-AR", "es-MX")
        True
        >>> is_locale_match("fr", "es-MX")
        False
    """
    language = language_subtag(preferred)
    return target == language or (has_region(target) and target.startswith(language))


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Accepts either POSIX (``en_US``) or IETF (``en-US``) separators.

    Args:
        locale_code: Locale code to parse

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(locale_code, sep="-" if LOCALE_SEPARATOR in locale_code else "_")


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def to_locale_tag(locale: Locale) -> str:
    """Render a Babel Locale as an IETF-style tag.

    Example:
        >>> to_locale_tag(get_babel_locale("pt_BR"))
        'pt-BR'
    """
    parts = [locale.language, locale.script, locale.territory]
    return LOCALE_SEPARATOR.join(part for part in parts if part)


def get_system_locale() -> str | None:
    """Detect the system locale as an IETF-style tag.

    Uses Babel's environment detection (LANGUAGE, LC_ALL, LC_MESSAGES,
    LANG in that order). The "C" and "POSIX" pseudo-locales are
    reported by Babel as ``en_US_POSIX`` and are ignored here.

    Returns:
        Detected locale tag (e.g. 'de-DE'), or None when the environment
        does not name a usable locale.
    """
    from babel.core import UnknownLocaleError, default_locale  # noqa: PLC0415

    detected = default_locale("LC_MESSAGES")
    if not detected or detected == "en_US_POSIX":
        return None

    try:
        locale = get_babel_locale(detected)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning("Unknown system locale '%s': %s", detected, e)
        return None

    return to_locale_tag(locale)

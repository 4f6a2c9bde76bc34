"""Text resolution pipeline.

Turns a translation key plus request context into a display string:

1. Parse ``<segment>.<name>``; a malformed key is a lookup miss.
2. Append ``_<context>`` to the name when a context is given.
3. Walk the search locales in order. For each candidate, append
   ``_<plural category>`` computed with that candidate's own plural rules
   when counting, and return the first string found.
4. Fall back to the placeholder when no locale has the key.
5. Interpolate ``{{ key }}`` placeholders.
6. Optionally uppercase the result (locale-independent, one character
   in, one character out).

Each call is stateless given the store and the search list it is handed.
Lookup misses are never errors; only interpolation failures are
collected and returned.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from locresolve.constants import KEY_SEPARATOR, SUFFIX_SEPARATOR
from locresolve.runtime.interpolation import interpolate
from locresolve.runtime.plural_rules import select_plural_category

if TYPE_CHECKING:
    from locresolve.diagnostics import InterpolationError
    from locresolve.localization.store import ResourceStore
    from locresolve.localization.types import KeyName, LocaleCode, SegmentName, TranslationKey

__all__ = [
    "FoundValue",
    "ResolutionRequest",
    "find_value",
    "parse_key",
    "resolve_text",
    "to_upper_invariant",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolutionRequest:
    """Per-call input bundle, rebuilt from a UI element's state on every update.

    Attributes:
        key: Translation key of the form '<segment>.<name>'
        context: Context variant suffix; empty means no variant
        should_use_count: Whether to select a plural variant
        count: Number of items, used only when should_use_count is set
            (and always for a ``{{count}}`` placeholder)
        interpolation_keys: Placeholder keys, parallel to values
        interpolation_values: Placeholder values, parallel to keys
        uppercase: Uppercase the final string
    """

    key: TranslationKey
    context: str = ""
    should_use_count: bool = False
    count: int = 0
    interpolation_keys: tuple[str, ...] = ()
    interpolation_values: tuple[str, ...] = ()
    uppercase: bool = False


@dataclass(frozen=True, slots=True)
class FoundValue:
    """A stored string and the search locale that supplied it."""

    value: str
    locale: LocaleCode


def to_upper_invariant(text: str) -> str:
    """Uppercase with simple, locale-independent case mapping.

    Characters whose uppercase form is more than one character (such as
    ``ß`` or the ``ﬁ`` ligature) are kept unchanged, so the result always
    has the same length as the input.

    Example:
        >>> to_upper_invariant("Straße")
        'STRAßE'
    """
    mapped: list[str] = []
    for char in text:
        upper = char.upper()
        mapped.append(upper if len(upper) == 1 else char)
    return "".join(mapped)


def parse_key(key: TranslationKey) -> tuple[SegmentName, KeyName] | None:
    """Split a translation key into segment and name.

    Returns:
        (segment, name), or None unless the key has exactly two parts

    Example:
        >>> parse_key("ui.greeting")
        ('ui', 'greeting')
        >>> parse_key("ui.menu.open") is None
        True
    """
    parts = key.split(KEY_SEPARATOR)
    if len(parts) != 2:
        return None
    return (parts[0], parts[1])


def _find_value_in_locale(
    store: ResourceStore,
    segment_name: SegmentName,
    key_name: KeyName,
    locale: LocaleCode,
    should_use_count: bool,
    count: int,
) -> str | None:
    segment = store.get_segment(locale, segment_name)
    if segment is None:
        return None

    variant_name = key_name
    if should_use_count:
        variant_name += SUFFIX_SEPARATOR + select_plural_category(count, locale)

    value = segment.get(variant_name)
    if not isinstance(value, str):
        return None
    return value


def find_value(
    store: ResourceStore,
    key: TranslationKey,
    search_locales: Sequence[LocaleCode],
    context: str | None = None,
    should_use_count: bool = False,
    count: int = 0,
) -> FoundValue | None:
    """Look a key up across the search locales, first match wins.

    Args:
        store: Resource store to search
        key: Translation key '<segment>.<name>'
        search_locales: Locale tags in priority order
        context: Optional context variant
        should_use_count: Append the plural category suffix per candidate
        count: Count used for plural category selection

    Returns:
        FoundValue, or None for a malformed key or a miss in every locale
    """
    parsed = parse_key(key)
    if parsed is None:
        logger.debug("Malformed key '%s'", key)
        return None
    segment_name, key_name = parsed

    if context:
        key_name += SUFFIX_SEPARATOR + context

    for locale in search_locales:
        value = _find_value_in_locale(
            store, segment_name, key_name, locale, should_use_count, count
        )
        if value is not None:
            return FoundValue(value=value, locale=locale)
    return None


def resolve_text(
    store: ResourceStore,
    request: ResolutionRequest,
    search_locales: Sequence[LocaleCode],
    placeholder: str,
) -> tuple[str, FoundValue | None, tuple[InterpolationError, ...]]:
    """Run the full resolution pipeline for one request.

    Args:
        store: Resource store to search
        request: Key and context of this call
        search_locales: Locale tags in priority order
        placeholder: String used when no locale has the key

    Returns:
        Tuple of (text, found, errors). ``found`` is None when the
        placeholder was used; ``errors`` holds interpolation failures.
    """
    found = find_value(
        store,
        request.key,
        search_locales,
        request.context,
        request.should_use_count,
        request.count,
    )
    if found is None:
        logger.debug("Key '%s' not found, using placeholder", request.key)
        template = placeholder
    else:
        template = found.value

    text, errors = interpolate(
        template,
        request.interpolation_keys,
        request.interpolation_values,
        request.should_use_count,
        request.count,
    )

    if request.uppercase:
        text = to_upper_invariant(text)

    return (text, found, errors)

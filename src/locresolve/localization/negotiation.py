"""Search locale list construction.

Expands the user's preferred locales into the ordered list of resource
locales consulted during lookup. Each preferred tag contributes, in
order:

1. Exact: a supported tag equal to the preferred tag.
2. Generalization: for a regional preference (``es-MX``), the supported
   bare language tag (``es``).
3. Siblings: every supported regional tag of the same language
   (``es-AR``), in supported order.

The default locale is appended last unless it was itself one of the
preferred tags. Entries are not de-duplicated; lookups stop at the first
hit, so repeats never change the result.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from locresolve.locale_utils import has_region, language_subtag
from locresolve.localization.types import LocaleCode

__all__ = ["resolve_search_locales"]


def resolve_search_locales(
    preferred: Iterable[LocaleCode],
    supported: Iterable[LocaleCode],
    default_locale: LocaleCode,
) -> tuple[LocaleCode, ...]:
    """Build the search locale list.

    Args:
        preferred: User's preferred locale tags, most preferred first
        supported: Locale tags that have resources, in resource order
        default_locale: Locale of the source translation

    Returns:
        Ordered, possibly repeating tuple of locale tags

    Example:
        >>> resolve_search_locales(["es-MX"], ["es-AR", "en"], "en")
        ('es-AR', 'en')
        >>> resolve_search_locales(["pt-BR", "en"], ["en", "pt", "pt-BR"], "en")
        ('pt-BR', 'pt', 'pt-BR', 'en')
    """
    preferred_list = list(preferred)
    supported_list: Sequence[LocaleCode] = list(supported)
    supported_set = set(supported_list)
    search: list[LocaleCode] = []

    for tag in preferred_list:
        language = language_subtag(tag)

        if tag in supported_set:
            search.append(tag)

        if has_region(tag) and language in supported_set:
            search.append(language)

        search.extend(
            candidate
            for candidate in supported_list
            if has_region(candidate) and language_subtag(candidate) == language
        )

    if default_locale not in preferred_list:
        search.append(default_locale)

    return tuple(search)

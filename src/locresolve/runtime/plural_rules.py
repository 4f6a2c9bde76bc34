"""Cardinal plural category selection.

Maps a count and a locale tag to one of the CLDR cardinal plural
categories (zero, one, two, few, many, other). Languages are partitioned
into rule families; each family is a pure function of the count. Adding
or moving a language is an edit to ``_LANGUAGE_FAMILIES``.

Counts are integers and are not validated: zero and negative values are
passed through the formulas as-is. Remainders truncate toward zero, so
``-21`` has last digit ``-1`` and is not treated like ``21``.

Python 3.12+. Zero external dependencies.

Reference: http://translate.sourceforge.net/wiki/l10n/pluralforms
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from locresolve.enums import PluralCategory
from locresolve.locale_utils import language_subtag

__all__ = [
    "PluralFamily",
    "cardinal_category",
    "get_plural_family",
    "select_plural_category",
]

ZERO = PluralCategory.ZERO
ONE = PluralCategory.ONE
TWO = PluralCategory.TWO
FEW = PluralCategory.FEW
MANY = PluralCategory.MANY
OTHER = PluralCategory.OTHER


def _rem(n: int, m: int) -> int:
    """Remainder with the sign of the dividend (truncating division)."""
    r = abs(n) % m
    return -r if n < 0 else r


# ============================================================================
# RULE FORMULAS
# ============================================================================


def _one_for_zero_and_one(n: int) -> PluralCategory:
    return OTHER if n > 1 else ONE


def _one_for_one(n: int) -> PluralCategory:
    return OTHER if n != 1 else ONE


def _always_other(n: int) -> PluralCategory:  # noqa: ARG001
    return OTHER


def _slavic(n: int) -> PluralCategory:
    mod10, mod100 = _rem(n, 10), _rem(n, 100)
    if mod10 == 1 and mod100 != 11:
        return ONE
    if 2 <= mod10 <= 4 and (mod100 < 10 or mod100 >= 20):
        return FEW
    return OTHER


def _arabic(n: int) -> PluralCategory:
    mod100 = _rem(n, 100)
    if n == 0:
        return ZERO
    if n == 1:
        return ONE
    if n == 2:
        return TWO
    if 3 <= mod100 <= 10:
        return FEW
    if mod100 >= 11:
        return MANY
    return OTHER


def _czech(n: int) -> PluralCategory:
    if n == 1:
        return ONE
    if 2 <= n <= 4:
        return FEW
    return OTHER


def _polish(n: int) -> PluralCategory:
    mod10, mod100 = _rem(n, 10), _rem(n, 100)
    if n == 1:
        return ONE
    if 2 <= mod10 <= 4 and (mod100 < 10 or mod100 >= 20):
        return FEW
    return MANY


def _welsh(n: int) -> PluralCategory:
    if n == 1:
        return ONE
    if n == 2:
        return TWO
    if n not in (8, 11):
        return OTHER
    return FEW


def _irish(n: int) -> PluralCategory:
    if n == 1:
        return ONE
    if n == 2:
        return TWO
    if n < 7:
        return FEW
    if n < 11:
        return MANY
    return OTHER


def _scottish_gaelic(n: int) -> PluralCategory:
    if n in (1, 11):
        return ONE
    if n in (2, 12):
        return TWO
    if 2 < n < 20:
        return FEW
    return OTHER


def _icelandic(n: int) -> PluralCategory:
    if _rem(n, 10) != 1 or _rem(n, 100) == 11:
        return OTHER
    return ONE


def _javanese(n: int) -> PluralCategory:
    return OTHER if n != 0 else ZERO


def _cornish(n: int) -> PluralCategory:
    if n == 1:
        return ONE
    if n == 2:
        return TWO
    if n == 3:
        return FEW
    return OTHER


def _lithuanian(n: int) -> PluralCategory:
    mod10, mod100 = _rem(n, 10), _rem(n, 100)
    if mod10 == 1 and mod100 != 11:
        return ONE
    if mod10 >= 2 and (mod100 < 10 or mod100 >= 20):
        return FEW
    return OTHER


def _latvian(n: int) -> PluralCategory:
    if _rem(n, 10) == 1 and _rem(n, 100) != 11:
        return ONE
    if n != 0:
        return OTHER
    return ZERO


def _macedonian(n: int) -> PluralCategory:
    if n == 1 or (_rem(n, 10) == 1 and _rem(n, 100) != 11):
        return ONE
    return OTHER


def _mandinka(n: int) -> PluralCategory:
    if n == 0:
        return ZERO
    if n == 1:
        return ONE
    return OTHER


def _maltese(n: int) -> PluralCategory:
    mod100 = _rem(n, 100)
    if n == 1:
        return ONE
    if n == 2:
        return TWO
    if n == 0 or 1 < mod100 < 11:
        return FEW
    if 10 < mod100 < 20:
        return MANY
    return OTHER


def _romanian(n: int) -> PluralCategory:
    if n == 1:
        return ONE
    if n == 0 or 0 < _rem(n, 100) < 20:
        return FEW
    return OTHER


def _slovenian(n: int) -> PluralCategory:
    mod100 = _rem(n, 100)
    if mod100 == 1:
        return ONE
    if mod100 == 2:
        return TWO
    if mod100 in (3, 4):
        return FEW
    return OTHER


def _hebrew(n: int) -> PluralCategory:
    if n == 1:
        return ONE
    if n == 2:
        return TWO
    if (n < 0 or n > 10) and _rem(n, 10) == 0:
        return FEW
    return OTHER


# ============================================================================
# FAMILY TABLE
# ============================================================================


@dataclass(frozen=True, slots=True)
class PluralFamily:
    """A named plural rule shared by one or more languages.

    Attributes:
        name: Family identifier (e.g. 'slavic', 'arabic')
        select: Pure function from count to plural category
    """

    name: str
    select: Callable[[int], PluralCategory]

    def __call__(self, n: int) -> PluralCategory:
        return self.select(n)


FRENCH_LIKE = PluralFamily("french-like", _one_for_zero_and_one)
GERMANIC_LIKE = PluralFamily("germanic-like", _one_for_one)
ALWAYS_OTHER = PluralFamily("always-other", _always_other)
SLAVIC = PluralFamily("slavic", _slavic)
ARABIC = PluralFamily("arabic", _arabic)
CZECH = PluralFamily("czech", _czech)
POLISH = PluralFamily("polish", _polish)
WELSH = PluralFamily("welsh", _welsh)
IRISH = PluralFamily("irish", _irish)
SCOTTISH_GAELIC = PluralFamily("scottish-gaelic", _scottish_gaelic)
ICELANDIC = PluralFamily("icelandic", _icelandic)
JAVANESE = PluralFamily("javanese", _javanese)
CORNISH = PluralFamily("cornish", _cornish)
LITHUANIAN = PluralFamily("lithuanian", _lithuanian)
LATVIAN = PluralFamily("latvian", _latvian)
MACEDONIAN = PluralFamily("macedonian", _macedonian)
MANDINKA = PluralFamily("mandinka", _mandinka)
MALTESE = PluralFamily("maltese", _maltese)
ROMANIAN = PluralFamily("romanian", _romanian)
SLOVENIAN = PluralFamily("slovenian", _slovenian)
HEBREW = PluralFamily("hebrew", _hebrew)

# Unlisted languages fall back to this family.
DEFAULT_FAMILY = ALWAYS_OTHER

# Full tags that override their language's family. European Portuguese
# counts zero as plural, unlike the 'pt' family.
_TAG_FAMILIES: Mapping[str, PluralFamily] = MappingProxyType({
    "pt-PT": GERMANIC_LIKE,
})

_FAMILY_MEMBERS: tuple[tuple[PluralFamily, tuple[str, ...]], ...] = (
    (FRENCH_LIKE, (
        "ach", "ak", "am", "arn", "br", "fil", "fr", "gun", "ln", "mfe",
        "mg", "mi", "oc", "pt", "tg", "tl", "ti", "tr", "uz", "wa",
    )),
    (GERMANIC_LIKE, (
        "af", "an", "ast", "az", "bg", "bn", "ca", "da", "de", "dev",
        "el", "en", "eo", "es", "et", "eu", "fi", "fo", "fur", "fy",
        "gl", "gu", "ha", "hi", "hu", "hy", "ia", "it", "kk", "kn",
        "ku", "lb", "mai", "ml", "mn", "mr", "nah", "nap", "nb", "ne",
        "nl", "nn", "no", "nso", "or", "pa", "pap", "pms", "ps", "rm",
        "sco", "se", "si", "so", "son", "sq", "sv", "sw", "ta", "te",
        "tk", "ur", "yo",
    )),
    (ALWAYS_OTHER, (
        "ay", "bo", "cgg", "fa", "ht", "id", "ja", "jbo", "ka", "km",
        "ko", "ky", "lo", "ms", "sah", "su", "th", "tt", "ug", "vi",
        "wo", "zh",
    )),
    (SLAVIC, ("be", "bs", "cnr", "dz", "hr", "ru", "sr", "uk")),
    (ARABIC, ("ar",)),
    (CZECH, ("cs", "sk")),
    (POLISH, ("csb", "pl")),
    (WELSH, ("cy",)),
    (IRISH, ("ga",)),
    (SCOTTISH_GAELIC, ("gd",)),
    (ICELANDIC, ("is",)),
    (JAVANESE, ("jv",)),
    (CORNISH, ("kw",)),
    (LITHUANIAN, ("lt",)),
    (LATVIAN, ("lv",)),
    (MACEDONIAN, ("mk",)),
    (MANDINKA, ("mnk",)),
    (MALTESE, ("mt",)),
    (ROMANIAN, ("ro",)),
    (SLOVENIAN, ("sl",)),
    (HEBREW, ("he", "iw")),
)

_LANGUAGE_FAMILIES: Mapping[str, PluralFamily] = MappingProxyType({
    language: family
    for family, languages in _FAMILY_MEMBERS
    for language in languages
})


def get_plural_family(locale: str) -> PluralFamily:
    """Return the plural rule family a locale tag dispatches to.

    Full-tag overrides are checked first; otherwise only the language
    subtag is consulted and the region is ignored.

    Args:
        locale: Locale tag (e.g. 'pt-PT', 'ru', 'es-MX')

    Returns:
        The PluralFamily for the tag, or the always-other family when
        the language is not listed.
    """
    family = _TAG_FAMILIES.get(locale)
    if family is not None:
        return family
    return _LANGUAGE_FAMILIES.get(language_subtag(locale), DEFAULT_FAMILY)


def select_plural_category(n: int, locale: str) -> PluralCategory:
    """Select the cardinal plural category for a count.

    Args:
        n: Number of items
        locale: Locale tag whose rules apply

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> str(select_plural_category(0, "lv"))
        'zero'
        >>> str(select_plural_category(1, "en-US"))
        'one'
        >>> str(select_plural_category(5, "pl"))
        'many'
        >>> str(select_plural_category(2, "ar"))
        'two'
        >>> str(select_plural_category(0, "pt-PT"))
        'other'
        >>> str(select_plural_category(0, "pt"))
        'one'
    """
    return get_plural_family(locale)(n)


cardinal_category = select_plural_category

"""Tests for locale_utils.py.

Covers subtag extraction, the enabler match rule, and system locale
detection through Babel.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from locresolve.locale_utils import (
    clear_locale_cache,
    get_babel_locale,
    get_system_locale,
    has_region,
    is_locale_match,
    language_subtag,
    region_subtag,
    to_locale_tag,
)

_SUBTAG = st.text(alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ", min_size=1)


class TestSubtags:
    """Test language/region subtag extraction."""

    def test_bare_language(self) -> None:
        assert language_subtag("en") == "en"
        assert region_subtag("en") is None
        assert not has_region("en")

    def test_language_region(self) -> None:
        assert language_subtag("pt-PT") == "pt"
        assert region_subtag("pt-PT") == "PT"
        assert has_region("pt-PT")

    def test_only_first_separator_splits(self) -> None:
        assert language_subtag("zh-Hans-CN") == "zh"
        assert region_subtag("zh-Hans-CN") == "Hans-CN"

    def test_underscore_is_not_a_separator(self) -> None:
        """Tags are structural: POSIX underscores are not recognized."""
        assert language_subtag("en_US") == "en_US"
        assert not has_region("en_US")

    def test_empty_tag(self) -> None:
        assert language_subtag("") == ""
        assert region_subtag("") is None

    @given(language=_SUBTAG, region=_SUBTAG)
    def test_roundtrip_structure(self, language: str, region: str) -> None:
        """Property: joining and splitting on '-' recovers the parts."""
        tag = f"{language}-{region}"
        assert language_subtag(tag) == language
        assert region_subtag(tag) == region


class TestIsLocaleMatch:
    """Test the preferred-locale rule used by enablers."""

    def test_bare_language_matches_regional_preference(self) -> None:
        assert is_locale_match("es", "es-MX")

    def test_sibling_region_matches(self) -> None:
        assert is_locale_match("es-AR", "es-MX")

    def test_exact_language_matches(self) -> None:
        assert is_locale_match("fr", "fr")

    def test_other_language_does_not_match(self) -> None:
        assert not is_locale_match("fr", "es-MX")
        assert not is_locale_match("fr-CA", "es")

    def test_bare_target_needs_exact_language(self) -> None:
        """A bare target is not matched by prefix."""
        assert not is_locale_match("est", "es")

    def test_regional_target_matches_by_prefix(self) -> None:
        """Regional targets match when they start with the preferred language."""
        assert is_locale_match("est-EE", "es")


class TestBabelLocale:
    """Test cached Babel locale parsing."""

    def test_parses_both_separators(self) -> None:
        assert get_babel_locale("de-DE").territory == "DE"
        assert get_babel_locale("de_DE").territory == "DE"

    def test_to_locale_tag(self) -> None:
        assert to_locale_tag(get_babel_locale("pt_BR")) == "pt-BR"
        assert to_locale_tag(get_babel_locale("fr")) == "fr"

    def test_clear_locale_cache(self) -> None:
        get_babel_locale("en_US")
        assert get_babel_locale.cache_info().currsize > 0
        clear_locale_cache()
        assert get_babel_locale.cache_info().currsize == 0


class TestGetSystemLocale:
    """Test system locale detection from the environment."""

    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG"):
            monkeypatch.delenv(var, raising=False)

    def test_lang_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LANG", "de_DE.UTF-8")
        assert get_system_locale() == "de-DE"

    def test_lc_all_takes_precedence(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LANG", "de_DE.UTF-8")
        monkeypatch.setenv("LC_ALL", "fr_FR.UTF-8")
        assert get_system_locale() == "fr-FR"

    def test_posix_locale_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LANG", "C")
        assert get_system_locale() is None

    def test_unset_environment(self) -> None:
        assert get_system_locale() is None

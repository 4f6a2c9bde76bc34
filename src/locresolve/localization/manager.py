"""Engine-facing localization API.

LocalizationManager owns the immutable resource store, the user's
preferred locales, and the search locale list derived from them. UI
collaborators call ``resolve`` (or register themselves to be refreshed)
and the host calls ``set_preferred_locales`` when the user's language
changes.

Key architectural decisions:
- The store is built once, before the manager is constructed, from
  read-only copies of the documents; resolution needs no read lock.
- Preferred and search locales are swapped together as one immutable
  snapshot, so a concurrent resolve never sees a half-updated pair.
- Collaborators are notified synchronously in a fixed order: enablers,
  strings, texts, generic observers.

Python 3.12+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from locresolve.diagnostics import InterpolationError
from locresolve.locale_utils import get_system_locale
from locresolve.localization.bindings import (
    LocaleEnabler,
    LocalizedTarget,
    PreferredLocalesObserver,
)
from locresolve.localization.config import LocalizationConfig
from locresolve.localization.loading import LoadSummary, ResourceLoader, load_resource_set
from locresolve.localization.negotiation import resolve_search_locales
from locresolve.localization.store import ResourceStore
from locresolve.localization.types import LocaleCode, TranslationKey
from locresolve.runtime.resolver import ResolutionRequest, resolve_text

__all__ = ["FallbackInfo", "LocalizationManager"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Provided to the on_fallback callback when a key is resolved from a
    locale other than the first entry of the search list.

    Attributes:
        requested_locale: The first locale in the search list
        resolved_locale: The locale that actually contained the key
        key: The translation key that was resolved
    """

    requested_locale: LocaleCode
    resolved_locale: LocaleCode
    key: TranslationKey


@dataclass(frozen=True, slots=True)
class _LocaleState:
    preferred: tuple[LocaleCode, ...]
    search: tuple[LocaleCode, ...]


class LocalizationManager:
    """Resolves translation keys against a resource store.

    Example:
        >>> store = ResourceStore.from_documents([
        ...     ("en", {"ui": {"greeting_one": "You have {{count}} item",
        ...                    "greeting_other": "You have {{count}} items"}}),
        ... ])
        >>> manager = LocalizationManager(store)
        >>> manager.resolve("ui.greeting", should_use_count=True, count=5)
        'You have 5 items'
        >>> manager.resolve("ui.missing")
        'Unknown'
    """

    __slots__ = (
        "_config",
        "_enablers",
        "_load_summary",
        "_lock",
        "_observers",
        "_on_fallback",
        "_state",
        "_store",
        "_strings",
        "_texts",
    )

    def __init__(
        self,
        store: ResourceStore | None = None,
        config: LocalizationConfig | None = None,
        *,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize the manager.

        Args:
            store: Fully built resource store (empty store if None)
            config: Manager settings (defaults if None)
            on_fallback: Optional callback invoked when a key is resolved
                from a locale other than the first search locale. Useful
                for finding missing translations.
        """
        self._store = store if store is not None else ResourceStore()
        self._config = config if config is not None else LocalizationConfig()
        self._on_fallback = on_fallback
        self._load_summary: LoadSummary | None = None

        self._enablers: list[LocaleEnabler] = []
        self._strings: list[LocalizedTarget] = []
        self._texts: list[LocalizedTarget] = []
        self._observers: list[PreferredLocalesObserver] = []

        # Serializes writers only; readers take a snapshot of _state.
        self._lock = threading.Lock()
        self._state = self._build_state(self._config.preferred_locales)

    @classmethod
    def from_loader(
        cls,
        locales: Iterable[LocaleCode],
        loader: ResourceLoader,
        config: LocalizationConfig | None = None,
        *,
        max_workers: int = 1,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> LocalizationManager:
        """Load one document per locale, then build a manager over them.

        Load failures are logged and recorded in ``load_summary``; the
        failed locales are simply absent from the store.

        Args:
            locales: Resource locales, in resource order
            loader: Source of raw JSON documents
            config: Manager settings
            max_workers: Number of loader threads
            on_fallback: See ``__init__``

        Returns:
            New LocalizationManager
        """
        store, summary = load_resource_set(locales, loader, max_workers=max_workers)
        manager = cls(store, config, on_fallback=on_fallback)
        manager._load_summary = summary
        return manager

    def __repr__(self) -> str:
        return (
            f"LocalizationManager(preferred={self._state.preferred!r}, "
            f"search={self._state.search!r}, resources={len(self._store)})"
        )

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def store(self) -> ResourceStore:
        return self._store

    @property
    def config(self) -> LocalizationConfig:
        return self._config

    @property
    def default_locale(self) -> LocaleCode:
        return self._config.default_locale

    @property
    def placeholder_value(self) -> str:
        return self._config.placeholder_value

    @property
    def load_summary(self) -> LoadSummary | None:
        """Load results when built via ``from_loader``, else None."""
        return self._load_summary

    @property
    def preferred_locales(self) -> tuple[LocaleCode, ...]:
        return self._state.preferred

    @property
    def search_locales(self) -> tuple[LocaleCode, ...]:
        """Locale tags consulted by ``resolve``, in priority order."""
        return self._state.search

    # ------------------------------------------------------------------
    # Preferred locales
    # ------------------------------------------------------------------

    def _build_state(self, preferred: Iterable[LocaleCode]) -> _LocaleState:
        preferred_tuple = tuple(preferred)
        search = resolve_search_locales(
            preferred_tuple, self._store.locales, self._config.default_locale
        )
        logger.debug("Search locales for %s: %s", preferred_tuple, search)
        return _LocaleState(preferred=preferred_tuple, search=search)

    def set_preferred_locales(self, locales: Iterable[LocaleCode]) -> None:
        """Replace the preferred locales and refresh every collaborator.

        The search list is rebuilt and installed before any collaborator
        is notified.

        Args:
            locales: Preferred locale tags, most preferred first

        Raises:
            ValueError: If locales is a bare string
        """
        if isinstance(locales, str):
            msg = f"Expected a sequence of locale tags, got string: '{locales}'"
            raise ValueError(msg)

        with self._lock:
            self._state = self._build_state(locales)
        logger.info("Preferred locales changed to %s", self._state.preferred)
        self.refresh()

    def set_preferred_locale(self, locale: LocaleCode) -> None:
        """Prefer a single locale."""
        self.set_preferred_locales([locale])

    def start(self) -> None:
        """Adopt the system locale if configured, then refresh collaborators.

        Falls back to the configured preferences when the system locale
        cannot be determined.
        """
        if self._config.use_system_locale_on_start:
            system_locale = get_system_locale()
            if system_locale:
                self.set_preferred_locale(system_locale)
                return
        self.refresh()

    # ------------------------------------------------------------------
    # Collaborators
    # ------------------------------------------------------------------

    def register_enabler(self, enabler: LocaleEnabler) -> None:
        if hasattr(enabler, "manager"):
            enabler.manager = self  # type: ignore[attr-defined]
        self._enablers.append(enabler)

    def register_string(self, target: LocalizedTarget) -> None:
        if hasattr(target, "manager"):
            target.manager = self  # type: ignore[attr-defined]
        self._strings.append(target)

    def register_text(self, target: LocalizedTarget) -> None:
        if hasattr(target, "manager"):
            target.manager = self  # type: ignore[attr-defined]
        self._texts.append(target)

    def register_observer(self, observer: PreferredLocalesObserver) -> None:
        self._observers.append(observer)

    def refresh(self) -> None:
        """Notify collaborators: enablers, strings, texts, observers."""
        for enabler in self._enablers:
            enabler.on_change_preferred_locales()

        for target in self._strings:
            self.update_localized_string(target)

        for target in self._texts:
            self.update_localized_string(target)

        for observer in self._observers:
            observer.on_change_preferred_locales()

    def update_localized_string(self, target: LocalizedTarget) -> None:
        """Resolve a collaborator's request and write the result to it."""
        text, _ = self.resolve_request(target.request)
        target.text = text

    update_localized_text = update_localized_string

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve_request(
        self, request: ResolutionRequest
    ) -> tuple[str, tuple[InterpolationError, ...]]:
        """Resolve one request against the current search list.

        Returns:
            Tuple of (text, errors). Errors are interpolation failures;
            the text is always usable.
        """
        search = self._state.search
        text, found, errors = resolve_text(
            self._store, request, search, self._config.placeholder_value
        )

        if (
            found is not None
            and self._on_fallback is not None
            and found.locale != search[0]
        ):
            self._on_fallback(
                FallbackInfo(
                    requested_locale=search[0],
                    resolved_locale=found.locale,
                    key=request.key,
                )
            )

        return (text, errors)

    def resolve_with_errors(
        self,
        key: TranslationKey,
        context: str = "",
        should_use_count: bool = False,
        count: int = 0,
        interpolation_keys: Iterable[str] = (),
        interpolation_values: Iterable[str] = (),
        uppercase: bool = False,
    ) -> tuple[str, tuple[InterpolationError, ...]]:
        """Resolve a key, also returning interpolation errors.

        See ``resolve`` for arguments.
        """
        request = ResolutionRequest(
            key=key,
            context=context or "",
            should_use_count=should_use_count,
            count=count,
            interpolation_keys=tuple(interpolation_keys),
            interpolation_values=tuple(interpolation_values),
            uppercase=uppercase,
        )
        return self.resolve_request(request)

    def resolve(
        self,
        key: TranslationKey,
        context: str = "",
        should_use_count: bool = False,
        count: int = 0,
        interpolation_keys: Iterable[str] = (),
        interpolation_values: Iterable[str] = (),
        uppercase: bool = False,
    ) -> str:
        """Resolve a translation key to display text.

        Never raises for missing keys or bad templates: a miss yields the
        placeholder and a template error yields the template unchanged.

        Args:
            key: Translation key '<segment>.<name>'
            context: Context variant; appended as '_<context>' when non-empty
            should_use_count: Select the '_<plural category>' variant
            count: Count for plural selection and '{{count}}'
            interpolation_keys: Placeholder keys, parallel to values
            interpolation_values: Placeholder values, parallel to keys
            uppercase: Uppercase the result

        Returns:
            Final display string
        """
        text, _ = self.resolve_with_errors(
            key,
            context,
            should_use_count,
            count,
            interpolation_keys,
            interpolation_values,
            uppercase,
        )
        return text

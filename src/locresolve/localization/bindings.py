"""UI-facing collaborators notified when preferred locales change.

LocalizationManager fans out to four collaborator categories, always in
this order: enablers, strings, texts, then generic observers. The
protocols below describe what the manager needs from each; the concrete
classes cover the common cases.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from locresolve.locale_utils import is_locale_match
from locresolve.runtime.resolver import ResolutionRequest

if TYPE_CHECKING:
    from locresolve.localization.manager import LocalizationManager
    from locresolve.localization.types import LocaleCode, TranslationKey

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocols
    "LocaleEnabler",
    "LocalizedTarget",
    "PreferredLocalesObserver",
    # Concrete collaborators
    "LocalizedEnabler",
    "LocalizedString",
    "LocalizedText",
]


@runtime_checkable
class PreferredLocalesObserver(Protocol):
    """Anything that reacts to a preferred-locale change."""

    def on_change_preferred_locales(self) -> None:
        """Called after the search locale list has been recomputed."""


@runtime_checkable
class LocaleEnabler(PreferredLocalesObserver, Protocol):
    """Shows or hides content depending on the preferred locales.

    Notified before any text is re-resolved.
    """


@runtime_checkable
class LocalizedTarget(Protocol):
    """A UI element whose text is resolved by the manager.

    The manager reads ``request`` and writes the computed string to
    ``text``; it never retains either.
    """

    @property
    def request(self) -> ResolutionRequest: ...

    @property
    def text(self) -> str: ...

    @text.setter
    def text(self, value: str) -> None: ...


class LocalizedString:
    """Holds one Resolution Request and its most recently resolved text.

    Changing any request field through a ``set_*`` method re-resolves the
    text immediately when a manager is attached.

    Example:
        >>> item = LocalizedString("ui.greeting", should_use_count=True)
        >>> manager.register_string(item)
        >>> item.set_count(5)
        >>> item.text
        'You have 5 items'
    """

    __slots__ = ("_request", "_text", "manager")

    def __init__(
        self,
        key: TranslationKey,
        *,
        context: str = "",
        should_use_count: bool = False,
        count: int = 0,
        interpolation_keys: Iterable[str] = (),
        interpolation_values: Iterable[str] = (),
        uppercase: bool = False,
    ) -> None:
        self._request = ResolutionRequest(
            key=key,
            context=context,
            should_use_count=should_use_count,
            count=count,
            interpolation_keys=tuple(interpolation_keys),
            interpolation_values=tuple(interpolation_values),
            uppercase=uppercase,
        )
        self._text = ""
        self.manager: LocalizationManager | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self._request.key!r}, text={self._text!r})"

    @property
    def request(self) -> ResolutionRequest:
        """Current request snapshot."""
        return self._request

    @property
    def text(self) -> str:
        """Most recently resolved text."""
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value

    def _update(self, **changes: object) -> None:
        self._request = replace(self._request, **changes)
        self.refresh()

    def refresh(self) -> None:
        """Re-resolve the text through the attached manager, if any."""
        if self.manager is not None:
            self.manager.update_localized_string(self)

    def set_key(self, key: TranslationKey) -> None:
        self._update(key=key)

    def set_context(self, context: str) -> None:
        self._update(context=context)

    def set_count(self, count: int) -> None:
        self._update(count=count)

    def set_should_use_count(self, should_use_count: bool) -> None:
        self._update(should_use_count=should_use_count)

    def set_interpolation_values(self, values: Iterable[str]) -> None:
        self._update(interpolation_values=tuple(values))

    def set_interpolation(self, keys: Iterable[str], values: Iterable[str]) -> None:
        """Replace both interpolation arrays at once."""
        self._update(interpolation_keys=tuple(keys), interpolation_values=tuple(values))

    def set_uppercase(self, uppercase: bool) -> None:
        self._update(uppercase=uppercase)


class LocalizedText(LocalizedString):
    """A LocalizedString that pushes each resolved text into a UI sink.

    Args:
        key: Translation key
        sink: Called with the new text on every resolution (e.g. a
            widget's ``setText``)
    """

    __slots__ = ("_sink",)

    def __init__(self, key: TranslationKey, sink: Callable[[str], None], **kwargs: object) -> None:
        super().__init__(key, **kwargs)  # type: ignore[arg-type]
        self._sink = sink

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        self._sink(value)


class LocalizedEnabler:
    """Toggles content on when its locale matches a preferred locale.

    Args:
        locale: Locale tag this content belongs to (e.g. 'es' or 'es-AR')
        targets: Visibility setters, each called with True or False
    """

    __slots__ = ("_targets", "locale", "manager")

    def __init__(self, locale: LocaleCode, targets: Iterable[Callable[[bool], None]] = ()) -> None:
        self.locale = locale
        self._targets = tuple(targets)
        self.manager: LocalizationManager | None = None

    def __repr__(self) -> str:
        return f"LocalizedEnabler(locale={self.locale!r})"

    def is_locale_preferred(self) -> bool:
        """Check whether any preferred locale covers this enabler's locale."""
        if self.manager is None:
            return False
        return any(
            is_locale_match(self.locale, preferred)
            for preferred in self.manager.preferred_locales
        )

    def on_change_preferred_locales(self) -> None:
        is_preferred = self.is_locale_preferred()
        for target in self._targets:
            target(is_preferred)

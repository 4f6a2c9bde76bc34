"""Configuration for LocalizationManager.

Provides a single frozen dataclass that encapsulates the manager's
settings, validated once at construction.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from locresolve.constants import DEFAULT_LOCALE, DEFAULT_PLACEHOLDER
from locresolve.localization.types import LocaleCode

__all__ = ["LocalizationConfig"]


@dataclass(frozen=True, slots=True)
class LocalizationConfig:
    """Immutable configuration for LocalizationManager.

    All fields have sensible defaults; ``LocalizationConfig()`` with no
    arguments produces a usable configuration.

    Attributes:
        default_locale: Language of the source translation (default: 'en').
            Always searched last unless explicitly preferred.
        preferred_locales: Initial preferred locales, most preferred first
            (default: ('en',)).
        placeholder_value: Text returned when a key is not found
            (default: 'Unknown').
        use_system_locale_on_start: Replace the preferred locales with the
            detected system locale when the manager starts (default: True).

    Example:
        >>> config = LocalizationConfig(default_locale="en", preferred_locales=["es-MX"])
        >>> config.preferred_locales
        ('es-MX',)
    """

    default_locale: LocaleCode = DEFAULT_LOCALE
    preferred_locales: Sequence[LocaleCode] = (DEFAULT_LOCALE,)
    placeholder_value: str = DEFAULT_PLACEHOLDER
    use_system_locale_on_start: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If default_locale is empty or preferred_locales
                is a bare string.
        """
        if not self.default_locale:
            msg = "default_locale must not be empty"
            raise ValueError(msg)
        if isinstance(self.preferred_locales, str):
            msg = (
                "preferred_locales must be a sequence of locale tags, "
                f"got string: '{self.preferred_locales}'"
            )
            raise ValueError(msg)
        object.__setattr__(self, "preferred_locales", tuple(self.preferred_locales))

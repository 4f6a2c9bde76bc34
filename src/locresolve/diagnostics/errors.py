"""Localization exception hierarchy with structured diagnostics.

All exceptions may carry a Diagnostic object for rich error information.
Errors in the resolution pipeline are collected and returned as values,
never raised to the caller.

Python 3.12+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "InterpolationError",
    "LocalizationError",
    "ResourceLoadError",
]


class LocalizationError(Exception):
    """Base exception for all localization errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocalizationError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InterpolationError(LocalizationError):
    """Malformed template or unknown placeholder key.

    Fallback: the original, unmodified template.

    Attributes:
        template: The template that failed to interpolate
        key: The offending placeholder key (empty when unterminated)
    """

    def __init__(self, message: str | Diagnostic, *, template: str, key: str = "") -> None:
        """Initialize InterpolationError.

        Args:
            message: Error message string OR Diagnostic object
            template: The template that failed to interpolate
            key: The offending placeholder key
        """
        super().__init__(message)
        self.template = template
        self.key = key


class ResourceLoadError(LocalizationError):
    """A locale document could not be loaded.

    Fallback: the locale is absent from the resource store.

    Attributes:
        locale: Locale tag whose document failed to load
    """

    def __init__(self, message: str | Diagnostic, *, locale: str) -> None:
        """Initialize ResourceLoadError.

        Args:
            message: Error message string OR Diagnostic object
            locale: Locale tag whose document failed to load
        """
        super().__init__(message)
        self.locale = locale

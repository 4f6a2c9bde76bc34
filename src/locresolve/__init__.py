"""locresolve - key-based localization resolution for UI text.

Resolves a translation key plus runtime context (preferred locales,
interpolation arguments, plural count) into a display string, using
nested per-locale resource documents, a three-tier locale fallback list,
CLDR-style cardinal plural rules, and ``{{ key }}`` interpolation.

Public API:
    LocalizationManager - Engine-facing resolver with preferred-locale state
    LocalizationConfig - Manager settings
    ResourceStore - Immutable per-locale documents
    resolve_search_locales - Build the locale fallback list
    select_plural_category - Cardinal plural category for a count and locale
    interpolate - Substitute ``{{ key }}`` placeholders

Exceptions:
    LocalizationError - Base exception class
    InterpolationError - Malformed template or unknown placeholder key
    ResourceLoadError - Locale document could not be loaded

Submodules:
    locresolve.localization - Store, loaders, negotiation, UI collaborators
    locresolve.runtime - Plural rules, interpolation, resolution pipeline
    locresolve.diagnostics - Error types and diagnostic codes
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import InterpolationError, LocalizationError, ResourceLoadError
from .enums import PluralCategory
from .localization import (
    LocalizationConfig,
    LocalizationManager,
    PathResourceLoader,
    ResourceStore,
    resolve_search_locales,
)
from .runtime import cardinal_category, interpolate, select_plural_category

# Version information - Auto-populated from package metadata
try:
    __version__ = _get_version("locresolve")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "InterpolationError",
    "LocalizationConfig",
    "LocalizationError",
    "LocalizationManager",
    "PathResourceLoader",
    "PluralCategory",
    "ResourceLoadError",
    "ResourceStore",
    "__version__",
    "cardinal_category",
    "interpolate",
    "resolve_search_locales",
    "select_plural_category",
]

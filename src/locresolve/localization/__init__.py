"""Localization package: resources, locale negotiation, and the manager.

Submodules:
    types        - PEP 695 type aliases (LocaleCode, SegmentName, KeyName, ...)
    store        - ResourceStore (immutable per-locale documents)
    negotiation  - resolve_search_locales (three-tier fallback list)
    loading      - ResourceLoader protocol, PathResourceLoader,
                   StaticResourceLoader, ResourceLoadResult, LoadSummary
    config       - LocalizationConfig
    bindings     - UI collaborator protocols and LocalizedString/Text/Enabler
    manager      - LocalizationManager (engine-facing API)

Python 3.12+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from locresolve.enums import LoadStatus
from locresolve.localization.bindings import (
    LocaleEnabler,
    LocalizedEnabler,
    LocalizedString,
    LocalizedTarget,
    LocalizedText,
    PreferredLocalesObserver,
)
from locresolve.localization.config import LocalizationConfig
from locresolve.localization.loading import (
    LoadSummary,
    PathResourceLoader,
    ResourceLoader,
    ResourceLoadResult,
    StaticResourceLoader,
    load_resource_set,
)
from locresolve.localization.manager import FallbackInfo, LocalizationManager
from locresolve.localization.negotiation import resolve_search_locales
from locresolve.localization.store import ResourceStore
from locresolve.localization.types import (
    Document,
    KeyName,
    LocaleCode,
    Segment,
    SegmentName,
    TranslationKey,
)

__all__ = [
    # Main manager
    "LocalizationManager",
    "LocalizationConfig",
    "FallbackInfo",
    # Store and negotiation
    "ResourceStore",
    "resolve_search_locales",
    # Loader protocol and implementations
    "ResourceLoader",
    "PathResourceLoader",
    "StaticResourceLoader",
    "load_resource_set",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "ResourceLoadResult",
    # UI collaborators
    "LocaleEnabler",
    "LocalizedTarget",
    "PreferredLocalesObserver",
    "LocalizedEnabler",
    "LocalizedString",
    "LocalizedText",
    # Type aliases
    "Document",
    "KeyName",
    "LocaleCode",
    "Segment",
    "SegmentName",
    "TranslationKey",
]

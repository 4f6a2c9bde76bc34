"""Resource document loading for LocalizationManager.

Provides the protocol for locale document loaders, a filesystem
implementation with path-traversal checks, an in-memory implementation,
and result/summary data structures for tracking load attempts.

Documents are JSON of the form ``{"segment": {"key": "value"}}``. A
document that is missing, unreadable, or not a JSON object is reported
and its locale is left out of the store; it never aborts the load.

Components:
    ResourceLoader - Protocol for loading raw documents (structural typing)
    PathResourceLoader - Disk-based loader with path-traversal prevention
    StaticResourceLoader - Loader over in-memory document sources
    ResourceLoadResult - Immutable result of a single load attempt
    LoadSummary - Immutable aggregate of all load results
    load_resource_set - Load every locale and build a ResourceStore

Python 3.12+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Protocol

from locresolve.diagnostics import Diagnostic, DiagnosticCode, ResourceLoadError
from locresolve.enums import LoadStatus
from locresolve.localization.store import ResourceStore, freeze_document
from locresolve.localization.types import Document, LocaleCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "ResourceLoader",
    # Concrete loaders
    "PathResourceLoader",
    "StaticResourceLoader",
    # Load result types
    "ResourceLoadResult",
    "LoadSummary",
    # Entry point
    "load_resource_set",
]

logger = logging.getLogger(__name__)


class ResourceLoader(Protocol):
    """Protocol for loading raw locale documents.

    Implementations must provide a load() method that returns the
    document source text for a locale.

    Example:
        >>> class DiskLoader:
        ...     def load(self, locale: str) -> str:
        ...         return Path(f"locales/{locale}.json").read_text(encoding="utf-8")
        ...     def describe_path(self, locale: str) -> str:
        ...         return f"locales/{locale}.json"
    """

    def load(self, locale: LocaleCode) -> str:
        """Load the document source for a locale.

        Raises:
            FileNotFoundError: If no document exists for this locale
            OSError: If the document cannot be read
        """

    def describe_path(self, locale: LocaleCode) -> str:
        """Return human-readable path for diagnostics."""
        return locale


@dataclass(frozen=True, slots=True)
class PathResourceLoader:
    """File system loader using a path template.

    Security:
        Locale codes containing path separators or ".." are rejected, and
        every resolved path is validated against a fixed root directory.

    Example:
        >>> loader = PathResourceLoader("locales/{locale}.json")
        >>> source = loader.load("en")
        # Loads from: locales/en.json

    Attributes:
        base_path: Path template with {locale} placeholder
        root_dir: Fixed root directory for path traversal validation.
                  Defaults to the static prefix of base_path.
    """

    base_path: str
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate template.

        Raises:
            ValueError: If base_path does not contain {locale} placeholder
        """
        if "{locale}" not in self.base_path:
            msg = (
                f"base_path must contain '{{locale}}' placeholder for locale substitution, "
                f"got: '{self.base_path}'"
            )
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            static_prefix = self.base_path.split("{locale}")[0]
            static_dir = static_prefix if static_prefix.endswith(("/", "\\")) else str(
                Path(static_prefix).parent
            )
            resolved = Path(static_dir).resolve() if static_dir else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    @staticmethod
    def _validate_locale(locale: LocaleCode) -> None:
        """Reject locale codes that could escape the root directory.

        Raises:
            ValueError: If locale contains unsafe path components
        """
        if not locale:
            msg = "Locale code cannot be empty"
            raise ValueError(msg)
        if ".." in locale:
            msg = f"Path traversal sequences not allowed in locale: '{locale}'"
            raise ValueError(msg)
        if "/" in locale or "\\" in locale:
            msg = f"Path separators not allowed in locale: '{locale}'"
            raise ValueError(msg)

    def describe_path(self, locale: LocaleCode) -> str:
        """Return the locale-substituted path."""
        return self.base_path.replace("{locale}", locale)

    def load(self, locale: LocaleCode) -> str:
        """Read a locale document from disk.

        Raises:
            ValueError: If locale is unsafe or the path escapes the root
            FileNotFoundError: If file doesn't exist
            OSError: If file cannot be read
        """
        self._validate_locale(locale)

        full_path = Path(self.describe_path(locale)).resolve()
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = (
                f"Path traversal detected: resolved path escapes root directory. "
                f"locale='{locale}'"
            )
            raise ValueError(msg) from None

        return full_path.read_text(encoding="utf-8")


@dataclass(frozen=True, slots=True)
class StaticResourceLoader:
    """Loader over document sources already held in memory.

    Attributes:
        sources: Raw document text keyed by locale tag
    """

    sources: Mapping[LocaleCode, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "sources", MappingProxyType(dict(self.sources)))

    def describe_path(self, locale: LocaleCode) -> str:
        return f"<memory>/{locale}"

    def load(self, locale: LocaleCode) -> str:
        try:
            return self.sources[locale]
        except KeyError:
            msg = f"No document for locale '{locale}'"
            raise FileNotFoundError(msg) from None


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Result of loading one locale document.

    Attributes:
        locale: Locale tag of the document
        status: Load status (success, not_found, error)
        document: Read-only decoded document if status is SUCCESS, None otherwise
        error: ResourceLoadError if status is not SUCCESS, None otherwise
        source_path: Human-readable path to the document
    """

    locale: LocaleCode
    status: LoadStatus
    document: Document | None = field(default=None, repr=False)
    error: ResourceLoadError | None = None
    source_path: str | None = None

    @property
    def is_success(self) -> bool:
        """Check if the document loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the document was not found."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the document failed to read or decode."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of document load results.

    Attributes:
        results: All individual load results, in requested locale order

    Example:
        >>> store, summary = load_resource_set(["en", "de"], loader)
        >>> if summary.has_errors:
        ...     for result in summary.get_errors():
        ...         print(f"Failed: {result.source_path}: {result.error}")
    """

    results: tuple[ResourceLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of documents not found."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def has_errors(self) -> bool:
        """Check if any document failed to load with an error."""
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """Check if every requested document was found and decoded."""
        return self.errors == 0 and self.not_found == 0

    def get_errors(self) -> tuple[ResourceLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[ResourceLoadResult, ...]:
        """Get all results where the document was not found."""
        return tuple(r for r in self.results if r.is_not_found)

    def get_successful(self) -> tuple[ResourceLoadResult, ...]:
        """Get all successful load results."""
        return tuple(r for r in self.results if r.is_success)


def _failure(
    locale: LocaleCode,
    status: LoadStatus,
    code: DiagnosticCode,
    message: str,
    source_path: str,
) -> ResourceLoadResult:
    diagnostic = Diagnostic(code=code, message=message, locale=locale)
    if status == LoadStatus.NOT_FOUND:
        logger.warning("Failed to load locale %s: %s", locale, message)
    else:
        logger.error("Failed to load locale %s: %s", locale, message)
    return ResourceLoadResult(
        locale=locale,
        status=status,
        error=ResourceLoadError(diagnostic, locale=locale),
        source_path=source_path,
    )


def _load_single_document(locale: LocaleCode, loader: ResourceLoader) -> ResourceLoadResult:
    """Load and decode one locale document, recording the outcome."""
    source_path = loader.describe_path(locale)

    try:
        source = loader.load(locale)
    except FileNotFoundError:
        return _failure(
            locale,
            LoadStatus.NOT_FOUND,
            DiagnosticCode.RESOURCE_NOT_FOUND,
            f"No document at {source_path}",
            source_path,
        )
    except (OSError, ValueError) as e:
        return _failure(
            locale,
            LoadStatus.ERROR,
            DiagnosticCode.RESOURCE_READ_FAILED,
            f"Cannot read {source_path}: {e}",
            source_path,
        )

    try:
        document = json.loads(source)
    except json.JSONDecodeError as e:
        return _failure(
            locale,
            LoadStatus.ERROR,
            DiagnosticCode.RESOURCE_DECODE_FAILED,
            f"Invalid JSON in {source_path}: {e}",
            source_path,
        )

    if not isinstance(document, dict):
        return _failure(
            locale,
            LoadStatus.ERROR,
            DiagnosticCode.RESOURCE_NOT_MAPPING,
            f"Top level of {source_path} is {type(document).__name__}, expected object",
            source_path,
        )

    logger.debug("Loaded locale %s from %s", locale, source_path)
    return ResourceLoadResult(
        locale=locale,
        status=LoadStatus.SUCCESS,
        document=freeze_document(document),  # type: ignore[arg-type]
        source_path=source_path,
    )


def load_resource_set(
    locales: Iterable[LocaleCode],
    loader: ResourceLoader,
    *,
    max_workers: int = 1,
) -> tuple[ResourceStore, LoadSummary]:
    """Load one document per locale and build the resource store.

    Loads may run on a thread pool, but the store is only built once
    every load has finished, so no caller ever sees a partial store.

    Args:
        locales: Resource locales, in resource order
        loader: Source of raw documents
        max_workers: Number of loader threads (1 loads sequentially)

    Returns:
        Tuple of (store, summary). Locales that failed to load are absent
        from the store and reported in the summary.

    Raises:
        ValueError: If a locale is listed more than once or max_workers < 1
    """
    locale_list = list(locales)
    if len(set(locale_list)) != len(locale_list):
        msg = f"Duplicate resource locales: {locale_list}"
        raise ValueError(msg)
    if max_workers < 1:
        msg = "max_workers must be positive"
        raise ValueError(msg)

    if max_workers == 1:
        results = [_load_single_document(locale, loader) for locale in locale_list]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(
                executor.map(lambda locale: _load_single_document(locale, loader), locale_list)
            )

    store = ResourceStore.from_documents(
        (result.locale, result.document)
        for result in results
        if result.is_success and result.document is not None
    )
    summary = LoadSummary(results=tuple(results))
    logger.info("Resource store built: %r", summary)
    return (store, summary)

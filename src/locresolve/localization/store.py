"""Immutable per-locale resource store.

Holds, per locale tag, a decoded two-level document
``{segment: {key: string}}``. The store is built once from fully loaded
documents. Both levels are copied into read-only mappings at construction,
so later changes to the source dicts are not visible and concurrent
readers need no lock.

Lookups are structural: a document or segment that is not a mapping, or
a leaf that is not a string, is treated as absent rather than an error.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from locresolve.localization.types import Document, KeyName, LocaleCode, Segment, SegmentName

__all__ = ["ResourceStore", "freeze_document"]

logger = logging.getLogger(__name__)


def freeze_document(document: object) -> object:
    """Return a read-only two-level copy of a decoded document.

    Mapping documents are copied into a MappingProxyType whose mapping
    segments are copied the same way. Anything else is returned as is;
    lookups treat it as absent.

    Example:
        >>> source = {"ui": {"ok": "OK"}}
        >>> frozen = freeze_document(source)
        >>> source["ui"]["ok"] = "changed"
        >>> frozen["ui"]["ok"]
        'OK'
    """
    if not isinstance(document, Mapping):
        return document
    return MappingProxyType({
        segment_name: MappingProxyType(dict(segment))
        if isinstance(segment, Mapping)
        else segment
        for segment_name, segment in document.items()
    })


class ResourceStore:
    """Read-only mapping of locale tag to decoded document.

    Each locale tag appears at most once; lookups use exact string match.

    Example:
        >>> store = ResourceStore.from_documents([
        ...     ("en", {"ui": {"ok": "OK"}}),
        ...     ("de", {"ui": {"ok": "Okay"}}),
        ... ])
        >>> store.get_value("de", "ui", "ok")
        'Okay'
        >>> store.get_value("fr", "ui", "ok") is None
        True
    """

    __slots__ = ("_documents",)

    def __init__(self, documents: Mapping[LocaleCode, Document] | None = None) -> None:
        """Initialize store from a locale -> document mapping.

        Args:
            documents: Decoded documents keyed by locale tag
        """
        frozen: dict[LocaleCode, Document] = {
            locale: freeze_document(document)  # type: ignore[misc]
            for locale, document in (documents or {}).items()
        }
        self._documents: Mapping[LocaleCode, Document] = MappingProxyType(frozen)

    @classmethod
    def from_documents(cls, pairs: Iterable[tuple[LocaleCode, Document]]) -> ResourceStore:
        """Build a store from ordered (locale, document) pairs.

        Args:
            pairs: Resource Set entries in supplied order

        Returns:
            New ResourceStore

        Raises:
            ValueError: If a locale tag appears more than once
        """
        documents: dict[LocaleCode, Document] = {}
        for locale, document in pairs:
            if locale in documents:
                msg = f"Duplicate resource locale: '{locale}'"
                raise ValueError(msg)
            documents[locale] = document
        return cls(documents)

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Locale tags held by the store, in insertion order."""
        return tuple(self._documents)

    def __contains__(self, locale: object) -> bool:
        return locale in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[LocaleCode]:
        return iter(self._documents)

    def __repr__(self) -> str:
        return f"ResourceStore(locales={self.locales!r})"

    def get_document(self, locale: LocaleCode) -> Document | None:
        """Return the document for a locale, or None if absent or not a mapping."""
        document = self._documents.get(locale)
        if not isinstance(document, Mapping):
            return None
        return document

    def get_segment(self, locale: LocaleCode, segment_name: SegmentName) -> Segment | None:
        """Return one segment of a locale's document, or None."""
        document = self.get_document(locale)
        if document is None:
            return None
        segment = document.get(segment_name)
        if not isinstance(segment, Mapping):
            return None
        return segment

    def get_value(
        self, locale: LocaleCode, segment_name: SegmentName, key_name: KeyName
    ) -> str | None:
        """Return a string leaf, or None if any level is missing."""
        segment = self.get_segment(locale, segment_name)
        if segment is None:
            return None
        value = segment.get(key_name)
        if not isinstance(value, str):
            return None
        return value

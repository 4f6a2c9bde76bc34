"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating LocalizationManager call sites.

Python 3.12+. Zero external dependencies.
"""

from collections.abc import Mapping
from typing import TypeAlias

__all__ = [
    "Document",
    "KeyName",
    "LocaleCode",
    "Segment",
    "SegmentName",
    "TranslationKey",
]

LocaleCode: TypeAlias = str
"""IETF-style locale tag (e.g., 'en', 'pt-PT')."""

SegmentName: TypeAlias = str
"""Namespace of keys within a locale document (e.g., 'ui', 'menu')."""

KeyName: TypeAlias = str
"""Key within a segment, possibly carrying context/plural suffixes."""

TranslationKey: TypeAlias = str
"""Full lookup key of the form '<segment>.<name>' (e.g., 'ui.greeting')."""

Segment: TypeAlias = Mapping[KeyName, object]
"""Inner mapping of a document. Only string leaves are resolvable."""

Document: TypeAlias = Mapping[SegmentName, object]
"""Decoded locale document: segment name -> segment mapping."""

"""Resolution runtime: plural rules, interpolation, and the lookup pipeline.

Python 3.12+. Zero external dependencies.
"""

from .interpolation import interpolate
from .plural_rules import PluralFamily, cardinal_category, get_plural_family, select_plural_category
from .resolver import (
    FoundValue,
    ResolutionRequest,
    find_value,
    parse_key,
    resolve_text,
    to_upper_invariant,
)

__all__ = [
    "FoundValue",
    "PluralFamily",
    "ResolutionRequest",
    "cardinal_category",
    "find_value",
    "get_plural_family",
    "interpolate",
    "parse_key",
    "resolve_text",
    "select_plural_category",
    "to_upper_invariant",
]

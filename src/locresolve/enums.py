"""Enumerations for locresolve type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they can be appended directly
to lookup names and compared against plain strings.

Python 3.12+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """CLDR cardinal plural category.

    StrEnum provides automatic string conversion: str(PluralCategory.ONE) == "one"
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


class LoadStatus(StrEnum):
    """Outcome of loading one locale document.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Document decoded and installed in the store."""

    NOT_FOUND = "not_found"
    """No document exists for the locale."""

    ERROR = "error"
    """Document exists but could not be read or decoded."""


__all__ = [
    "LoadStatus",
    "PluralCategory",
]

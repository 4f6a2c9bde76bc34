"""Shared constants for locresolve.

Centralizes the literal tokens of the key, suffix and template syntax so
that the resolver, interpolator and locale utilities agree on a single source of
truth.

Python 3.12+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Defaults
    "DEFAULT_LOCALE",
    "DEFAULT_PLACEHOLDER",
    # Key syntax
    "KEY_SEPARATOR",
    "SUFFIX_SEPARATOR",
    "LOCALE_SEPARATOR",
    # Template syntax
    "PLACEHOLDER_OPEN",
    "PLACEHOLDER_CLOSE",
    "COUNT_KEY",
]

# ============================================================================
# DEFAULTS
# ============================================================================

# Language of the source translation. Always present in the search list.
DEFAULT_LOCALE: str = "en"

# Returned when no locale in the search list yields a value for a key.
DEFAULT_PLACEHOLDER: str = "Unknown"

# ============================================================================
# KEY SYNTAX
# ============================================================================

# "<segment>.<name>"
KEY_SEPARATOR: str = "."

# "<name>_<context>_<pluralCategory>"
SUFFIX_SEPARATOR: str = "_"

# "language-REGION"
LOCALE_SEPARATOR: str = "-"

# ============================================================================
# TEMPLATE SYNTAX
# ============================================================================

PLACEHOLDER_OPEN: str = "{{"
PLACEHOLDER_CLOSE: str = "}}"

# Reserved placeholder key, always substituted with the request count.
COUNT_KEY: str = "count"

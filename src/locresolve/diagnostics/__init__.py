"""Diagnostic system for localization errors.

Provides structured error diagnostics with codes and hints.

Python 3.12+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import InterpolationError, LocalizationError, ResourceLoadError

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "InterpolationError",
    "LocalizationError",
    "ResourceLoadError",
]

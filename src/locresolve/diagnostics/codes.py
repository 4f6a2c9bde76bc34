"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for the resolution pipeline.
Python 3.12+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        2000-2999: Interpolation errors (template scanning)
        4000-4999: Loading errors (resource documents)
    """

    # Interpolation errors (2000-2999)
    PLACEHOLDER_UNTERMINATED = 2001
    PLACEHOLDER_UNKNOWN_KEY = 2002
    ARGUMENTS_MISMATCH = 2003

    # Loading errors (4000-4999)
    RESOURCE_NOT_FOUND = 4001
    RESOURCE_DECODE_FAILED = 4002
    RESOURCE_NOT_MAPPING = 4003
    RESOURCE_READ_FAILED = 4004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale: Locale tag involved, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PLACEHOLDER_UNKNOWN_KEY]: Unknown interpolation key 'name'
              = locale: en
              = help: Pass a value for every placeholder in the template

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.locale is not None:
            lines.append(f"  = locale: {self.locale}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)

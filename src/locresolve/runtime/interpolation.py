"""Template interpolation for resolved strings.

Substitutes ``{{ key }}`` placeholders with caller-supplied values. The
reserved key ``count`` always receives the request count. Scanning is a
single left-to-right pass; substituted values are never rescanned.

Failure policy:
    An unterminated placeholder, an unknown key, or a key with no value
    at its index aborts interpolation. Arrays of unequal length are fine
    as long as every referenced key has a value.
    The error is logged and returned, and the caller receives the
    original template unchanged (never a partially substituted string).

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from locresolve.constants import COUNT_KEY, PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN
from locresolve.diagnostics import Diagnostic, DiagnosticCode, InterpolationError

__all__ = ["interpolate"]

logger = logging.getLogger(__name__)

_OPEN_LEN = len(PLACEHOLDER_OPEN)
_CLOSE_LEN = len(PLACEHOLDER_CLOSE)


def _fail(
    template: str, code: DiagnosticCode, message: str, hint: str, key: str = ""
) -> tuple[str, tuple[InterpolationError, ...]]:
    diagnostic = Diagnostic(code=code, message=message, hint=hint)
    error = InterpolationError(diagnostic, template=template, key=key)
    logger.error("Failed to get value. %s", message)
    return (template, (error,))


def interpolate(
    template: str,
    keys: Sequence[str] = (),
    values: Sequence[str] = (),
    should_use_count: bool = False,
    count: int = 0,
) -> tuple[str, tuple[InterpolationError, ...]]:
    """Substitute ``{{ key }}`` placeholders in a template.

    When there are no interpolation keys and counting is off, the template
    is returned without being scanned, so literal ``{{`` text in such
    templates is never reported as malformed.

    Args:
        template: Resolved string, possibly containing placeholders
        keys: Interpolation keys, parallel to ``values``
        values: Interpolation values, parallel to ``keys``; extra values
            are ignored
        should_use_count: Whether the request carries a count
        count: Value substituted for ``{{ count }}``

    Returns:
        Tuple of (result, errors). On any error the result is the
        original template and errors holds exactly one InterpolationError.

    Example:
        >>> interpolate("{{ player }} joined {{team}}", ["player", "team"], ["Ana", "red"])
        ('Ana joined red', ())
        >>> interpolate("{{count}} items", should_use_count=True, count=3)
        ('3 items', ())
        >>> result, errors = interpolate("Hello {{name", ["x"], ["y"])
        >>> result
        'Hello {{name'
    """
    if not keys and not should_use_count:
        return (template, ())

    # First occurrence wins for duplicate keys.
    key_indexes: dict[str, int] = {}
    for index, key in enumerate(keys):
        key_indexes.setdefault(key, index)

    parts: list[str] = []
    length = len(template)
    i = 0
    while i < length:
        # An opening pair in the final two characters cannot hold a key
        # and is copied through as literal text.
        if template.startswith(PLACEHOLDER_OPEN, i) and i < length - _OPEN_LEN:
            start = i + _OPEN_LEN
            end = template.find(PLACEHOLDER_CLOSE, start)
            if end == -1:
                return _fail(
                    template,
                    DiagnosticCode.PLACEHOLDER_UNTERMINATED,
                    "Invalid interpolation code.",
                    f"Close every '{PLACEHOLDER_OPEN}' with '{PLACEHOLDER_CLOSE}'",
                )

            key = template[start:end].strip()
            if key == COUNT_KEY:
                parts.append(str(count))
            else:
                index = key_indexes.get(key)
                if index is None:
                    return _fail(
                        template,
                        DiagnosticCode.PLACEHOLDER_UNKNOWN_KEY,
                        f'Unknown interpolation key "{key}".',
                        "Pass a value for every placeholder in the template",
                        key=key,
                    )
                if index >= len(values):
                    return _fail(
                        template,
                        DiagnosticCode.ARGUMENTS_MISMATCH,
                        f'No interpolation value for key "{key}".',
                        "Pass exactly one value per interpolation key",
                        key=key,
                    )
                parts.append(values[index])
            i = end + _CLOSE_LEN
        else:
            parts.append(template[i])
            i += 1

    return ("".join(parts), ())

"""Message formatting for JSON comparison differences.

Each ``DifferenceType`` has one fixed ``str.format`` template.  Values are
substituted through ``format_value``:

- ``None``           -> ``null``
- ``str``            -> the string itself, unquoted
- ``bool``           -> ``True`` / ``False``
- ``int``/``float``  -> plain decimal rendering (``.`` separator, no grouping)
- ``Decimal``        -> plain positional notation keeping the scale
                        (``42.0`` stays ``42.0``, ``1E+2`` becomes ``100``)
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from json_semantic_compare.report.types import DifferenceType

if TYPE_CHECKING:
    from json_semantic_compare.engine.config import ComparisonMode
    from json_semantic_compare.report.difference import Difference

__all__ = [
    "DEFAULT_FAILURE_MESSAGE",
    "TEMPLATES",
    "combine_messages",
    "create_contextual_message",
    "format_difference",
    "format_value",
    "truncate_if_needed",
]

DEFAULT_FAILURE_MESSAGE = "JSON comparison failed"

TEMPLATES: dict[DifferenceType, str] = {
    DifferenceType.VALUE_MISMATCH: (
        "JSON value mismatch at path '{path}': expected '{expected}' but was '{actual}'"
    ),
    DifferenceType.TYPE_MISMATCH: (
        "JSON type mismatch at path '{path}': expected {expected} but was {actual}"
    ),
    DifferenceType.MISSING_PROPERTY: (
        "JSON missing property at path '{path}': "
        "expected property '{expected}' not found"
    ),
    DifferenceType.EXTRA_PROPERTY: (
        "JSON extra property at path '{path}': unexpected property '{actual}' found"
    ),
    DifferenceType.ARRAY_LENGTH_MISMATCH: (
        "JSON array length mismatch at path '{path}': "
        "expected {expected} elements but was {actual}"
    ),
    DifferenceType.ARRAY_ELEMENT_MISMATCH: (
        "JSON array element mismatch at path '{path}': "
        "expected '{expected}' but was '{actual}'"
    ),
}

_MODE_CONTEXT: dict[str, str] = {
    "semantic_equality": "during semantic equality comparison",
    "subtree_matching": "during subtree matching comparison",
}


def format_value(value: Any) -> str:
    """Render a display payload for template substitution."""
    if value is None:
        return "null"
    if isinstance(value, str):
        return value
    if isinstance(value, Decimal):
        return format(value, "f")
    # str() of bool, int and float is already culture-invariant
    return str(value)


def format_difference(difference: Difference) -> str:
    """Render the human-readable message for a difference.

    Type mismatches substitute the human type names; missing and extra
    property differences substitute the property name; every other kind
    substitutes its expected/actual display values.
    """
    template = TEMPLATES[difference.kind]

    if difference.kind == DifferenceType.TYPE_MISMATCH:
        expected = difference.expected_type
        actual = difference.actual_type
    else:
        expected = format_value(difference.expected_value)
        actual = format_value(difference.actual_value)

    return template.format(path=difference.path, expected=expected, actual=actual)


def combine_messages(custom_message: str | None, difference_message: str | None) -> str:
    """Join a caller-supplied message with a rendered difference message.

    Returns ``"{custom}. {detail}"`` when both are non-empty, whichever one
    is present otherwise, and ``DEFAULT_FAILURE_MESSAGE`` when neither is.
    """
    if not custom_message:
        return difference_message or DEFAULT_FAILURE_MESSAGE
    if not difference_message:
        return custom_message
    return f"{custom_message}. {difference_message}"


def create_contextual_message(difference: Difference, mode: ComparisonMode) -> str:
    """Render ``difference`` and name the comparison mode that produced it.

    Example::

        "JSON value mismatch at path '/name': expected 'John' but was 'Jane'"
        " (during semantic equality comparison)"
    """
    context = _MODE_CONTEXT.get(str(mode), "during JSON comparison")
    return f"{format_difference(difference)} ({context})"


def truncate_if_needed(message: str, max_length: int = 1000) -> str:
    """Cut ``message`` to ``max_length`` characters, ending in ``"..."``."""
    if not message or len(message) <= max_length:
        return message
    return message[: max_length - 3] + "..."

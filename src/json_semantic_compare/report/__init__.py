"""report subpackage: difference taxonomy, Difference values and message formatting.

Example::

    from json_semantic_compare.report import Difference

    diff = Difference.value_mismatch("/name", "John", "Jane")
    diff.description
    # "JSON value mismatch at path '/name': expected 'John' but was 'Jane'"
"""

from __future__ import annotations

from json_semantic_compare.report.difference import Difference
from json_semantic_compare.report.messages import (
    DEFAULT_FAILURE_MESSAGE,
    TEMPLATES,
    combine_messages,
    create_contextual_message,
    format_difference,
    format_value,
    truncate_if_needed,
)
from json_semantic_compare.report.types import DifferenceType

__all__ = [
    "DEFAULT_FAILURE_MESSAGE",
    "TEMPLATES",
    "Difference",
    "DifferenceType",
    "combine_messages",
    "create_contextual_message",
    "format_difference",
    "format_value",
    "truncate_if_needed",
]

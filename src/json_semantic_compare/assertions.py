"""Assertion helpers that raise ``AssertionError`` on JSON comparison failures.

Every helper accepts either JSON text (``str``, ``bytes`` or ``bytearray``)
or an already-parsed value (dict, list, number, bool, None).  Text is parsed
with ``parse_float=Decimal`` so numbers keep their exact decimal value.  A
bare JSON string value must therefore be passed as text (``'"hello"'``) or
it will be parsed as a document.

``None`` stands for an absent document: two ``None`` documents are equal,
and ``None`` against anything else fails.

Example::

    from json_semantic_compare.assertions import assert_semantically_same_json

    assert_semantically_same_json('{"a": 1, "b": 2}', '{"b": 2, "a": 1.0}')  # passes
    assert_semantically_same_json('{"age": 30}', '{"age": 31}')
    # AssertionError: JSON value mismatch at path '/age': expected '31' but was '30'
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

from json_semantic_compare.comparator import JsonComparator
from json_semantic_compare.engine.config import ComparisonConfig, ComparisonMode
from json_semantic_compare.report.messages import combine_messages, truncate_if_needed
from json_semantic_compare.result import ComparisonResult

__all__ = [
    "assert_json_subtree_of",
    "assert_not_json_subtree_of",
    "assert_not_semantically_same_json",
    "assert_semantically_same_json",
    "parse_json",
]


def parse_json(document: Any, side: str = "document") -> Any:
    """Parse JSON text, passing already-parsed values through unchanged.

    Args:
        document: JSON text or a parsed JSON value.
        side:     Name used in the error message ("actual", "expected").

    Returns:
        The parsed JSON value.

    Raises:
        AssertionError: If ``document`` is text that is not valid JSON.
    """
    if not isinstance(document, (str, bytes, bytearray)):
        return document
    try:
        return json.loads(document, parse_float=Decimal)
    except json.JSONDecodeError as exc:
        raise AssertionError(f"Invalid JSON in {side}: {exc}") from exc


def _compare(
    actual: Any,
    expected: Any,
    mode: ComparisonMode,
    config: ComparisonConfig | None,
) -> ComparisonResult:
    comparator = JsonComparator(config=config)
    return comparator.compare(
        parse_json(actual, "actual"), parse_json(expected, "expected"), mode=mode
    )


def _fail(message: str, config: ComparisonConfig | None) -> None:
    limit = (config or ComparisonConfig()).max_message_length
    raise AssertionError(truncate_if_needed(message, limit))


# ---------------------------------------------------------------------------
# Semantic equality
# ---------------------------------------------------------------------------


def assert_semantically_same_json(
    actual: Any,
    expected: Any,
    custom_message: str | None = None,
    config: ComparisonConfig | None = None,
) -> None:
    """Assert both documents hold the same properties with equal values.

    Raises:
        AssertionError: With ``"{custom_message}. {difference}"`` (or just
            the difference) when the documents differ.
    """
    result = _compare(actual, expected, ComparisonMode.SEMANTIC_EQUALITY, config)
    if not result.is_equal:
        _fail(result.get_error_message(custom_message), config)


def assert_not_semantically_same_json(
    actual: Any,
    expected: Any,
    custom_message: str | None = None,
    config: ComparisonConfig | None = None,
) -> None:
    """Assert the documents differ somewhere."""
    result = _compare(actual, expected, ComparisonMode.SEMANTIC_EQUALITY, config)
    if result.is_equal:
        _fail(
            combine_messages(
                custom_message, "JSON documents should not be semantically the same"
            ),
            config,
        )


# ---------------------------------------------------------------------------
# Subtree matching
# ---------------------------------------------------------------------------


def assert_json_subtree_of(
    actual: Any,
    expected: Any,
    custom_message: str | None = None,
    config: ComparisonConfig | None = None,
) -> None:
    """Assert every property of ``actual`` exists in ``expected`` with an equal value.

    Arrays must still match exactly in length and order.
    """
    result = _compare(actual, expected, ComparisonMode.SUBTREE_MATCHING, config)
    if not result.is_equal:
        _fail(result.get_error_message(custom_message), config)


def assert_not_json_subtree_of(
    actual: Any,
    expected: Any,
    custom_message: str | None = None,
    config: ComparisonConfig | None = None,
) -> None:
    """Assert ``actual`` is not a subtree of ``expected``."""
    result = _compare(actual, expected, ComparisonMode.SUBTREE_MATCHING, config)
    if result.is_equal:
        _fail(
            combine_messages(
                custom_message, "JSON document should not be a subtree of expected"
            ),
            config,
        )

"""Public API functions for json-semantic-compare.

Each call creates a fresh JsonComparator to guarantee zero global state
mutation between calls.
"""

from __future__ import annotations

from typing import Any

from json_semantic_compare.comparator import JsonComparator
from json_semantic_compare.engine.config import ComparisonConfig, ComparisonMode
from json_semantic_compare.result import ComparisonResult
from json_semantic_compare.tree.pointer import ROOT

__all__ = [
    "compare",
    "compare_semantic_equality",
    "compare_subtree",
    "is_semantically_equal",
    "is_subtree",
]


def compare(
    actual: Any,
    expected: Any,
    mode: ComparisonMode = ComparisonMode.SEMANTIC_EQUALITY,
    base_path: str = ROOT,
    config: ComparisonConfig | None = None,
) -> ComparisonResult:
    """Compare two parsed JSON values and report the first difference.

    Args:
        actual:    The actual JSON value (dict, list, str, int, float,
            Decimal, bool, None).
        expected:  The expected JSON value.
        mode:      ``SEMANTIC_EQUALITY`` (both sides hold the same properties)
            or ``SUBTREE_MATCHING`` (every actual property exists in
            expected).  Arrays are compared exactly in both modes.
        base_path: JSON Pointer prepended to every reported path.
        config:    Engine parameters.  Defaults to ``ComparisonConfig()``.

    Returns:
        A ``ComparisonResult``; ``first_difference`` is set on failure.
    """
    comparator = JsonComparator(config=config)
    return comparator.compare(actual, expected, mode=mode, base_path=base_path)


def compare_semantic_equality(
    actual: Any,
    expected: Any,
    base_path: str = ROOT,
    config: ComparisonConfig | None = None,
) -> ComparisonResult:
    """``compare`` in ``SEMANTIC_EQUALITY`` mode."""
    return compare(
        actual,
        expected,
        mode=ComparisonMode.SEMANTIC_EQUALITY,
        base_path=base_path,
        config=config,
    )


def compare_subtree(
    actual: Any,
    expected: Any,
    base_path: str = ROOT,
    config: ComparisonConfig | None = None,
) -> ComparisonResult:
    """``compare`` in ``SUBTREE_MATCHING`` mode: is ``actual`` part of ``expected``?"""
    return compare(
        actual,
        expected,
        mode=ComparisonMode.SUBTREE_MATCHING,
        base_path=base_path,
        config=config,
    )


def is_semantically_equal(
    actual: Any,
    expected: Any,
    config: ComparisonConfig | None = None,
) -> bool:
    """Return True if the two JSON values are semantically the same."""
    return compare_semantic_equality(actual, expected, config=config).is_equal


def is_subtree(
    actual: Any,
    expected: Any,
    config: ComparisonConfig | None = None,
) -> bool:
    """Return True if every property of ``actual`` matches inside ``expected``."""
    return compare_subtree(actual, expected, config=config).is_equal

"""ComparisonEngine: fail-fast tree walk over two parsed JSON documents.

Architecture:
- The walk is a depth-first traversal driven by an explicit work stack, so
  deep documents never touch Python's recursion limit.  Children are pushed
  in reverse so they are popped (and fully explored) in key/index order:
  the first difference reported is the same one a recursive walk would
  reach first.
- Each popped pair goes through the same checks:
  1. depth guard (synthetic VALUE_MISMATCH past ``config.max_depth``)
  2. null handling (null vs anything else is a VALUE_MISMATCH)
  3. kind check (TYPE_MISMATCH, except ``true`` vs ``false``)
  4. dispatch: objects -> property checks, arrays -> length check,
     leaves -> ``compare_leaves``.
- OBJECT pairs run every missing/extra property check before any child is
  pushed, so a structural difference always wins over a deeper value
  difference under another key.
- The mode only changes the object property checks; array and leaf handling
  is shared.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from json_semantic_compare.engine.config import ComparisonConfig, ComparisonMode
from json_semantic_compare.engine.values import compare_leaves, display_value
from json_semantic_compare.report.difference import Difference
from json_semantic_compare.tree.kinds import JsonKind, kind_of, type_name
from json_semantic_compare.tree.pointer import ROOT, append_segment

if TYPE_CHECKING:
    from json_semantic_compare.protocols import InstantParser

__all__ = ["TOO_DEEP", "ComparisonEngine"]

logger = logging.getLogger(__name__)

TOO_DEEP = "structure too deep"

# (actual, expected, path, depth)
_Frame = tuple[Any, Any, str, int]


class ComparisonEngine:
    """Fail-fast structural comparison of two JSON trees.

    Returns the first ``Difference`` in the defined check order, or None
    when the trees match under the requested mode.  The engine holds no
    per-call state; one instance may serve any number of comparisons.

    Example::

        from json_semantic_compare.engine import ComparisonEngine, ComparisonMode

        engine = ComparisonEngine()
        diff = engine.compare(
            {"name": "John", "age": 30},
            {"name": "John", "age": 31},
            ComparisonMode.SEMANTIC_EQUALITY,
        )
        diff.path          # "/age"
        diff.description   # "JSON value mismatch at path '/age': expected '31' but was '30'"
    """

    def __init__(
        self,
        instants: InstantParser | None = None,
        config: ComparisonConfig | None = None,
    ) -> None:
        """Initialise the engine.

        Args:
            instants: Parser deciding which strings are date/times.  None
                compares every string exactly.
            config:   Engine parameters.  Defaults to ``ComparisonConfig()``.
        """
        self._instants = instants
        self._config = config if config is not None else ComparisonConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(
        self,
        actual: Any,
        expected: Any,
        mode: ComparisonMode,
        base_path: str = ROOT,
    ) -> Difference | None:
        """Return the first difference between ``actual`` and ``expected``.

        Args:
            actual:    Root of the actual tree (None for an absent document).
            expected:  Root of the expected tree.
            mode:      Object property policy.
            base_path: JSON Pointer prepended to every reported path.

        Returns:
            The first ``Difference`` found, or None if the trees match.

        Raises:
            TypeError: If either tree holds a value that is not JSON.
        """
        stack: list[_Frame] = [(actual, expected, base_path, 0)]

        while stack:
            actual_node, expected_node, path, depth = stack.pop()
            difference = self._compare_pair(
                actual_node, expected_node, path, depth, mode, stack
            )
            if difference is not None:
                return difference

        return None

    # ------------------------------------------------------------------
    # Per-pair checks
    # ------------------------------------------------------------------

    def _compare_pair(
        self,
        actual: Any,
        expected: Any,
        path: str,
        depth: int,
        mode: ComparisonMode,
        stack: list[_Frame],
    ) -> Difference | None:
        """Check one node pair, pushing its children onto ``stack``."""
        if depth > self._config.max_depth:
            logger.warning(
                "JSON nesting at %r exceeds max_depth=%d; reporting a mismatch",
                path,
                self._config.max_depth,
            )
            return Difference.value_mismatch(path, TOO_DEEP, TOO_DEEP)

        actual_kind = kind_of(actual)
        expected_kind = kind_of(expected)

        # Null vs value is an empty-vs-filled slot, never a type mismatch
        if actual_kind == JsonKind.NULL or expected_kind == JsonKind.NULL:
            if actual_kind == expected_kind:
                return None
            return Difference.value_mismatch(
                path, display_value(expected), display_value(actual)
            )

        if actual_kind != expected_kind and not (
            actual_kind.is_boolean and expected_kind.is_boolean
        ):
            return Difference.type_mismatch(
                path, type_name(expected_kind), type_name(actual_kind)
            )

        if actual_kind == JsonKind.OBJECT:
            return self._compare_objects(actual, expected, path, depth, mode, stack)

        if actual_kind == JsonKind.ARRAY:
            return self._compare_arrays(actual, expected, path, depth, stack)

        return compare_leaves(actual, expected, actual_kind, path, self._instants)

    def _compare_objects(
        self,
        actual: Mapping[str, Any],
        expected: Mapping[str, Any],
        path: str,
        depth: int,
        mode: ComparisonMode,
        stack: list[_Frame],
    ) -> Difference | None:
        """Run the mode's property checks, then queue matching properties."""
        if mode == ComparisonMode.SEMANTIC_EQUALITY:
            for key in expected:
                if key not in actual:
                    return Difference.missing_property(
                        append_segment(path, key), key
                    )
            for key in actual:
                if key not in expected:
                    return Difference.extra_property(append_segment(path, key), key)
        else:
            # Subtree: the actual side may not know anything expected lacks
            for key in actual:
                if key not in expected:
                    return Difference.missing_property(
                        append_segment(path, key), key
                    )

        children = [
            (actual[key], expected[key], append_segment(path, key), depth + 1)
            for key in actual
        ]
        stack.extend(reversed(children))
        return None

    def _compare_arrays(
        self,
        actual: Sequence[Any],
        expected: Sequence[Any],
        path: str,
        depth: int,
        stack: list[_Frame],
    ) -> Difference | None:
        """Check lengths, then queue element pairs in index order."""
        if len(actual) != len(expected):
            return Difference.array_length_mismatch(path, len(expected), len(actual))

        children = [
            (actual_item, expected_item, append_segment(path, index), depth + 1)
            for index, (actual_item, expected_item) in enumerate(
                zip(actual, expected, strict=True)
            )
        ]
        stack.extend(reversed(children))
        return None

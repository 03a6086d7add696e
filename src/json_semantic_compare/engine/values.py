"""Leaf comparison: booleans, strings (with date/time awareness) and numbers.

Numbers are compared in fixed-point decimal so that ``42``, ``42.0`` and
``Decimal("42.00")`` are equal while ``1.23456789`` and ``1.23456788`` are
not.  The fixed-point form has 29 significant digits and a magnitude bound of
``2**96 - 1``; a value outside it (or a non-finite value) is compared as a
binary float instead, together with its counterpart.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from decimal import ROUND_HALF_EVEN, Context, Decimal
from typing import TYPE_CHECKING, Any

from json_semantic_compare.report.difference import Difference
from json_semantic_compare.tree.kinds import JsonKind

if TYPE_CHECKING:
    from json_semantic_compare.protocols import InstantParser

__all__ = ["compare_leaves", "display_value", "numbers_equal", "to_fixed_point"]

_FIXED_POINT_CONTEXT = Context(prec=29, rounding=ROUND_HALF_EVEN)
_FIXED_POINT_MAX = Decimal(2**96 - 1)


def to_fixed_point(value: int | float | Decimal) -> Decimal | None:
    """Convert a JSON number to its fixed-point form.

    Floats convert through their shortest ``repr`` so ``0.1`` becomes
    ``Decimal("0.1")`` rather than its binary expansion.

    Returns:
        The number rounded to 29 significant digits, or None when it is
        non-finite or its magnitude exceeds the fixed-point range.
    """
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        number = Decimal(repr(value))
    else:
        number = Decimal(value)

    if not number.is_finite() or number.copy_abs() > _FIXED_POINT_MAX:
        return None
    return _FIXED_POINT_CONTEXT.plus(number)


def _to_float(value: int | float | Decimal) -> float:
    try:
        return float(value)
    except OverflowError:
        # ints beyond the float range
        return math.inf if value > 0 else -math.inf


def numbers_equal(
    actual: int | float | Decimal,
    expected: int | float | Decimal,
) -> bool:
    """Return True if two JSON numbers denote the same value."""
    actual_fixed = to_fixed_point(actual)
    expected_fixed = to_fixed_point(expected)
    if actual_fixed is None or expected_fixed is None:
        return _to_float(actual) == _to_float(expected)
    return actual_fixed == expected_fixed


def display_value(value: Any) -> Any:
    """Return the payload used to show ``value`` in a difference.

    Scalars are shown as themselves; objects and arrays as compact JSON text.
    """
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(
            value, separators=(",", ":"), ensure_ascii=False, default=str
        )
    return value


def compare_leaves(
    actual: Any,
    expected: Any,
    kind: JsonKind,
    path: str,
    instants: InstantParser | None,
) -> Difference | None:
    """Compare two leaf values whose kinds already agree.

    ``true`` and ``false`` arrive here as a pair of boolean kinds; ``kind``
    is the actual side's kind.

    Args:
        actual:   Leaf value from the actual tree.
        expected: Leaf value from the expected tree.
        kind:     The actual side's ``JsonKind``.
        path:     JSON Pointer of the two leaves.
        instants: Parser deciding which strings are date/times, or None to
            compare strings exactly.

    Returns:
        A VALUE_MISMATCH ``Difference``, or None when the leaves are equal.
    """
    if kind.is_boolean:
        if actual is not expected:
            return Difference.value_mismatch(path, expected, actual)
        return None

    if kind == JsonKind.STRING:
        if instants is not None:
            actual_instant = instants.parse(actual)
            expected_instant = (
                instants.parse(expected) if actual_instant is not None else None
            )
            if actual_instant is not None and expected_instant is not None:
                if actual_instant != expected_instant:
                    return Difference.value_mismatch(path, expected, actual)
                return None
        if actual != expected:
            return Difference.value_mismatch(path, expected, actual)
        return None

    if kind == JsonKind.NUMBER:
        if not numbers_equal(actual, expected):
            return Difference.value_mismatch(path, expected, actual)
        return None

    # NULL: both sides are null once kinds agree
    return None

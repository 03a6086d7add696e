"""Difference: immutable description of the first divergence between two trees.

The human-readable ``description`` is rendered eagerly in ``__post_init__``,
so it is available without re-running the formatter.  Use the classmethod
constructors (one per ``DifferenceType``) rather than the raw initializer;
they fill in the payload fields each kind is formatted from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_semantic_compare.report.messages import format_difference
from json_semantic_compare.report.types import DifferenceType

__all__ = ["Difference"]


@dataclass(frozen=True, slots=True)
class Difference:
    """The first difference found by a comparison.

    Attributes:
        path:           JSON Pointer (RFC 6901) of the divergent node.
        kind:           Which ``DifferenceType`` was detected.
        expected_value: Display payload for the expected side.  Holds the
            property name for MISSING_PROPERTY and the element count for
            ARRAY_LENGTH_MISMATCH.
        actual_value:   Display payload for the actual side.  Holds the
            property name for EXTRA_PROPERTY.
        expected_type:  Human type name of the expected side (TYPE_MISMATCH only).
        actual_type:    Human type name of the actual side (TYPE_MISMATCH only).
        description:    Rendered message; computed at construction.
    """

    path: str
    kind: DifferenceType
    expected_value: Any = None
    actual_value: Any = None
    expected_type: str | None = None
    actual_type: str | None = None
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "description", format_difference(self))

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def value_mismatch(cls, path: str, expected: Any, actual: Any) -> Difference:
        return cls(
            path=path,
            kind=DifferenceType.VALUE_MISMATCH,
            expected_value=expected,
            actual_value=actual,
        )

    @classmethod
    def type_mismatch(
        cls, path: str, expected_type: str, actual_type: str
    ) -> Difference:
        return cls(
            path=path,
            kind=DifferenceType.TYPE_MISMATCH,
            expected_type=expected_type,
            actual_type=actual_type,
        )

    @classmethod
    def missing_property(cls, path: str, property_name: str) -> Difference:
        return cls(
            path=path,
            kind=DifferenceType.MISSING_PROPERTY,
            expected_value=property_name,
        )

    @classmethod
    def extra_property(cls, path: str, property_name: str) -> Difference:
        return cls(
            path=path,
            kind=DifferenceType.EXTRA_PROPERTY,
            actual_value=property_name,
        )

    @classmethod
    def array_length_mismatch(
        cls, path: str, expected_length: int, actual_length: int
    ) -> Difference:
        return cls(
            path=path,
            kind=DifferenceType.ARRAY_LENGTH_MISMATCH,
            expected_value=expected_length,
            actual_value=actual_length,
        )

    @classmethod
    def array_element_mismatch(
        cls, path: str, expected: Any, actual: Any
    ) -> Difference:
        return cls(
            path=path,
            kind=DifferenceType.ARRAY_ELEMENT_MISMATCH,
            expected_value=expected,
            actual_value=actual,
        )

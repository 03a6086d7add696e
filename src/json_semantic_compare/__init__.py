"""JSON semantic compare - fail-fast structural comparison of JSON documents."""

from __future__ import annotations

from json_semantic_compare.api import (
    compare,
    compare_semantic_equality,
    compare_subtree,
    is_semantically_equal,
    is_subtree,
)
from json_semantic_compare.comparator import JsonComparator
from json_semantic_compare.engine.config import ComparisonConfig, ComparisonMode
from json_semantic_compare.report.difference import Difference
from json_semantic_compare.report.messages import TEMPLATES
from json_semantic_compare.report.types import DifferenceType
from json_semantic_compare.result import ComparisonResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "TEMPLATES",
    "ComparisonConfig",
    "ComparisonMode",
    "ComparisonResult",
    "Difference",
    "DifferenceType",
    "JsonComparator",
    "compare",
    "compare_semantic_equality",
    "compare_subtree",
    "is_semantically_equal",
    "is_subtree",
]

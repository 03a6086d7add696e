"""engine subpackage: public API for the structural comparison engine.

Provides the fail-fast tree walk, its configuration, and the comparison
mode selector.  Import from this module (not from sub-modules directly) to
stay on the stable public interface.

Example::

    from json_semantic_compare.engine import ComparisonEngine, ComparisonMode

    engine = ComparisonEngine()
    engine.compare({"a": 1}, {"a": 1, "b": 2}, ComparisonMode.SUBTREE_MATCHING)
    # None (actual is a subtree of expected)
"""

from __future__ import annotations

from json_semantic_compare.engine.config import (
    DEFAULT_MAX_DEPTH,
    ComparisonConfig,
    ComparisonMode,
)
from json_semantic_compare.engine.walker import TOO_DEEP, ComparisonEngine

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "TOO_DEEP",
    "ComparisonConfig",
    "ComparisonEngine",
    "ComparisonMode",
]

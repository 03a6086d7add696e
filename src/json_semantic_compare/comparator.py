"""JsonComparator: orchestrator that wires ComparisonEngine + InstantCache.

This is the wiring layer between the raw engine and the public API.  It
turns the engine's ``Difference | None`` into a ``ComparisonResult`` and
logs failed comparisons.

Architecture:
- Date/time recognition goes through an ``InstantCache`` wrapped around the
  configured ``InstantParser`` (``IsoInstantParser`` by default), so each
  distinct string is parsed once per comparator.
- With ``config.compare_datetimes=False`` the engine receives no parser and
  compares strings exactly.
- Two separate ``JsonComparator`` instances never share cache state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from json_semantic_compare.cache import InstantCache
from json_semantic_compare.engine.config import ComparisonConfig, ComparisonMode
from json_semantic_compare.engine.walker import ComparisonEngine
from json_semantic_compare.instants import IsoInstantParser
from json_semantic_compare.report.messages import create_contextual_message
from json_semantic_compare.result import ComparisonResult
from json_semantic_compare.tree.pointer import ROOT

if TYPE_CHECKING:
    from json_semantic_compare.protocols import InstantParser

__all__ = ["JsonComparator"]

logger = logging.getLogger(__name__)


class JsonComparator:
    """Orchestrator for structural JSON comparison.

    Example::

        from json_semantic_compare.comparator import JsonComparator

        cmp = JsonComparator()
        result = cmp.compare([1, 2], [1, 2, 3])
        result.is_equal                      # False
        result.first_difference.description
        # "JSON array length mismatch at path '': expected 3 elements but was 2"
    """

    def __init__(
        self,
        config: ComparisonConfig | None = None,
        instant_parser: InstantParser | None = None,
        max_cache_size: int = 512,
    ) -> None:
        """Initialise the comparator.

        Args:
            config: Engine parameters.  Defaults to ``ComparisonConfig()``.
            instant_parser: An InstantParser-conformant object.  Defaults to
                ``IsoInstantParser()`` when None.
            max_cache_size: Maximum number of strings whose date/time parse
                result is held in the per-instance LRU cache.  This is an
                infrastructure parameter, so it is not part of
                ``ComparisonConfig``.
        """
        self._config: ComparisonConfig = (
            config if config is not None else ComparisonConfig()
        )
        self._instants: InstantCache | None = None
        if self._config.compare_datetimes:
            raw_parser: Any = (
                instant_parser if instant_parser is not None else IsoInstantParser()
            )
            self._instants = InstantCache(raw_parser, max_size=max_cache_size)
        self._engine = ComparisonEngine(instants=self._instants, config=self._config)

    @property
    def config(self) -> ComparisonConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(
        self,
        actual: Any,
        expected: Any,
        mode: ComparisonMode = ComparisonMode.SEMANTIC_EQUALITY,
        base_path: str = ROOT,
    ) -> ComparisonResult:
        """Compare two parsed JSON values and return a ComparisonResult.

        Args:
            actual:    The actual JSON value (dict, list, str, int, float,
                Decimal, bool, None).
            expected:  The expected JSON value.
            mode:      Object property policy.  Defaults to SEMANTIC_EQUALITY.
            base_path: JSON Pointer prepended to reported paths.

        Returns:
            ``ComparisonResult.success()`` or a failure carrying the first
            difference.
        """
        difference = self._engine.compare(actual, expected, mode, base_path)
        if difference is None:
            return ComparisonResult.success()

        logger.debug("%s", create_contextual_message(difference, mode))
        return ComparisonResult.failure(difference)

"""InstantCache: LRU-backed caching proxy for any InstantParser.

Wraps any InstantParser-conformant object and memoizes its answers,
including negative ones (``None`` for strings that are not date/times).
Documents often repeat the same string in many places (status values,
timestamps in arrays of records), so each distinct string reaches the
wrapped parser at most once while it stays in the cache.

Each ``InstantCache`` instance maintains its own ``LRUCache``; two instances
never share state.

Example::

    from json_semantic_compare.cache import InstantCache
    from json_semantic_compare.instants import IsoInstantParser

    cache = InstantCache(IsoInstantParser(), max_size=512)
    cache.parse("2023-01-01T00:00:00Z")   # parsed by IsoInstantParser
    cache.parse("2023-01-01T00:00:00Z")   # served from memory
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

if TYPE_CHECKING:
    from json_semantic_compare.protocols import InstantParser

__all__ = ["InstantCache"]


class InstantCache:
    """LRU-backed caching proxy around any InstantParser.

    Satisfies the ``InstantParser`` Protocol structurally.  LRU eviction is
    silent: the least-recently-used entry is dropped when ``max_size`` is
    exceeded.

    Args:
        parser: Any object satisfying the ``InstantParser`` Protocol.
        max_size: Maximum number of strings whose parse result is held in
            memory.  Defaults to 512.
    """

    def __init__(self, parser: InstantParser, max_size: int = 512) -> None:
        self._parser: Any = parser
        self._cache: LRUCache[str, datetime | None] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # InstantParser Protocol surface
    # ------------------------------------------------------------------

    def parse(self, text: str) -> datetime | None:
        """Return the wrapped parser's answer for ``text``, computing it once.

        ``None`` results are cached as well, so a string that is not a
        date/time is rejected by the wrapped parser only once.
        """
        if text in self._cache:
            return self._cache[text]

        parsed: datetime | None = self._parser.parse(text)
        self._cache[text] = parsed
        return parsed

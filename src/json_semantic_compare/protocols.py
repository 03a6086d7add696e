"""InstantParser Protocol for the date/time string comparison extension point.

String leaves are compared by resolved instant when *both* sides parse as a
date/time.  Which strings count as date/times is decided by an
``InstantParser``; users can plug in their own without inheriting from any
base class.

Example::

    from datetime import datetime, timezone
    from json_semantic_compare.protocols import InstantParser

    class EpochParser:
        def parse(self, text: str) -> datetime | None:
            if not text.isdigit():
                return None
            return datetime.fromtimestamp(int(text), tz=timezone.utc)

    assert isinstance(EpochParser(), InstantParser)  # True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import datetime


@runtime_checkable
class InstantParser(Protocol):
    """Structural protocol for date/time string parsers.

    The ``parse`` method must:
    - Return a timezone-aware ``datetime`` when ``text`` is a date/time.
    - Return ``None`` (never raise) for any other string.
    """

    def parse(self, text: str) -> datetime | None: ...

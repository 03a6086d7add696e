"""IsoInstantParser: ISO-8601 date/time recognition for string comparison.

Parsing is done by ``dateutil.parser.isoparse``.  Only strings in the
extended ISO-8601 shape (dashed date, optional time) are handed to it;
``isoparse`` also reads bare years and basic-format dates such as ``2023``
or ``20230101``, which must keep comparing as ordinary strings.

Accepted shapes::

    2023-01-01
    2023-01-01T10:30
    2023-01-01T10:30:00
    2023-01-01T10:30:00.123456
    2023-01-01T10:30:00,5
    2023-01-01 10:30:00Z
    2023-01-01T10:30:00+02:00
    2023-01-01T10:30:00+0200

Values without an offset (including date-only values) are read as UTC.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

from dateutil.parser import isoparse

__all__ = ["IsoInstantParser"]

_ISO_EXTENDED = re.compile(
    r"\d{4}-\d{2}-\d{2}"
    r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:[.,]\d+)?)?(?:Z|[+-]\d{2}(?::?\d{2})?)?)?"
)


class IsoInstantParser:
    """Parses ISO-8601 date/time strings into aware ``datetime`` instants.

    Satisfies the ``InstantParser`` Protocol structurally.

    Example::

        parser = IsoInstantParser()
        parser.parse("2023-01-01T00:00:00Z") == parser.parse("2023-01-01T02:00:00+02:00")
        # True
        parser.parse("hello")   # None
    """

    def parse(self, text: str) -> datetime | None:
        """Return the instant ``text`` denotes, or None if it is not a date/time."""
        if not _ISO_EXTENDED.fullmatch(text):
            return None
        try:
            parsed = isoparse(text)
        except ValueError:
            # Well-shaped but out of range, e.g. month 13
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

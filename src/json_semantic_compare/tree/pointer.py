"""JSON Pointer (RFC 6901) path building for difference reporting.

Paths are only ever *built* here, never evaluated:
- The root path is "" (empty string), not "/".
- Each level appends "/{segment}".
- Within a segment "~" becomes "~0" and "/" becomes "~1".  The "~" pass
  must run first, otherwise the "~" introduced by "~1" would be escaped
  a second time.
- Array indices become their decimal string form.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["ROOT", "append_segment", "build_pointer", "escape_segment"]

ROOT = ""


def escape_segment(segment: str) -> str:
    """Escape a single reference token for inclusion in a JSON Pointer."""
    return segment.replace("~", "~0").replace("/", "~1")


def append_segment(path: str, segment: str | int) -> str:
    """Return ``path`` extended by one object key or array index.

    Args:
        path:    JSON Pointer of the parent node ("" for the root).
        segment: Object key (escaped) or array index (rendered in decimal).

    Returns:
        The child's JSON Pointer.
    """
    if isinstance(segment, int):
        return f"{path}/{segment}"
    return f"{path}/{escape_segment(segment)}"


def build_pointer(segments: Iterable[str | int], base: str = ROOT) -> str:
    """Build a JSON Pointer from raw (unescaped) segments.

    Example::

        build_pointer(["users", 0, "a/b~c"])   # "/users/0/a~1b~0c"
    """
    path = base
    for segment in segments:
        path = append_segment(path, segment)
    return path

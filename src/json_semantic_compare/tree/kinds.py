"""JsonKind StrEnum and value classification for parsed JSON trees.

The comparison engine works directly on the value shape produced by
``json.loads``: ``dict`` for objects, ``list`` for arrays, and ``str``,
``int``, ``float``, ``Decimal``, ``bool`` or ``None`` for leaves.  Any
``Mapping`` is accepted as an object and any ``tuple`` as an array.

``true`` and ``false`` are separate kinds (mirroring the JSON grammar) but
share the human type name ``boolean``.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from enum import StrEnum, auto
from typing import Any

__all__ = ["JsonKind", "kind_of", "type_name"]


class JsonKind(StrEnum):
    """The seven value kinds of a JSON document.

    StrEnum values are the lowercased member names:
    - OBJECT -> "object"
    - ARRAY  -> "array"
    - STRING -> "string"
    - NUMBER -> "number"
    - TRUE   -> "true"
    - FALSE  -> "false"
    - NULL   -> "null"
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    TRUE = auto()
    FALSE = auto()
    NULL = auto()

    @property
    def is_boolean(self) -> bool:
        return self is JsonKind.TRUE or self is JsonKind.FALSE


_TYPE_NAMES: dict[JsonKind, str] = {
    JsonKind.OBJECT: "object",
    JsonKind.ARRAY: "array",
    JsonKind.STRING: "string",
    JsonKind.NUMBER: "number",
    JsonKind.TRUE: "boolean",
    JsonKind.FALSE: "boolean",
    JsonKind.NULL: "null",
}


def kind_of(value: Any) -> JsonKind:
    """Classify a parsed JSON value.

    Args:
        value: A JSON value (Mapping, list, tuple, str, int, float, Decimal,
            bool or None).

    Returns:
        The ``JsonKind`` of ``value``.

    Raises:
        TypeError: If ``value`` is not a JSON value.
    """
    # bool MUST be checked before int: bool subclasses int
    if value is True:
        return JsonKind.TRUE
    if value is False:
        return JsonKind.FALSE
    if value is None:
        return JsonKind.NULL
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (int, float, Decimal)):
        return JsonKind.NUMBER
    if isinstance(value, Mapping):
        return JsonKind.OBJECT
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def type_name(kind: JsonKind) -> str:
    """Return the human type name used in type-mismatch messages."""
    return _TYPE_NAMES[kind]

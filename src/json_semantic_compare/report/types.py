"""DifferenceType StrEnum: the closed taxonomy of JSON comparison failures."""

from __future__ import annotations

from enum import StrEnum, auto

__all__ = ["DifferenceType"]


class DifferenceType(StrEnum):
    """Kinds of difference a comparison can report.

    - VALUE_MISMATCH:         Same slot, different scalar value (or null vs value).
    - TYPE_MISMATCH:          Same slot, different JSON types.
    - MISSING_PROPERTY:       A property the other side requires is absent.
    - EXTRA_PROPERTY:         The actual side carries an unexpected property.
    - ARRAY_LENGTH_MISMATCH:  Arrays differ in element count.
    - ARRAY_ELEMENT_MISMATCH: Arrays differ at an index.  The engine itself
      reports element differences as VALUE_MISMATCH with an index path; this
      kind is kept for callers that build finer-grained array reports.
    """

    VALUE_MISMATCH = auto()
    TYPE_MISMATCH = auto()
    MISSING_PROPERTY = auto()
    EXTRA_PROPERTY = auto()
    ARRAY_LENGTH_MISMATCH = auto()
    ARRAY_ELEMENT_MISMATCH = auto()

"""ComparisonMode and ComparisonConfig for the comparison engine.

ComparisonMode selects the object-property policy of a comparison.
ComparisonConfig is a frozen (immutable) dataclass holding the engine
parameters that do not change between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["DEFAULT_MAX_DEPTH", "ComparisonConfig", "ComparisonMode"]

DEFAULT_MAX_DEPTH = 1000


class ComparisonMode(StrEnum):
    """How object properties are checked during a comparison.

    - SEMANTIC_EQUALITY: Both objects must hold exactly the same keys with
      equal values; key order is irrelevant.
    - SUBTREE_MATCHING:  Every key of the actual object must exist in the
      expected object with an equal value; the expected object may hold
      more keys.

    Arrays are compared exactly (length and order) in both modes.
    """

    SEMANTIC_EQUALITY = auto()
    SUBTREE_MATCHING = auto()


@dataclass(frozen=True, slots=True)
class ComparisonConfig:
    """Immutable configuration for the comparison engine.

    Attributes:
        max_depth: Deepest nesting level that is descended into.  Nodes below
            it are reported as a VALUE_MISMATCH ("structure too deep") instead
            of being compared.
        compare_datetimes: When True, two strings that both parse as
            date/times compare by the instant they denote, so
            ``"2023-01-01T00:00:00Z"`` equals ``"2023-01-01T00:00:00+00:00"``.
            When False, strings always compare exactly.
        max_message_length: Length at which assertion failure messages are
            truncated.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    compare_datetimes: bool = True
    max_message_length: int = 1000

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)
        if self.max_message_length < 4:
            msg = f"max_message_length must be >= 4, got {self.max_message_length}"
            raise ValueError(msg)

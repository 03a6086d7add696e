"""ComparisonResult dataclass for structural comparison output.

This module provides the result type returned by compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_semantic_compare.report.difference import Difference
from json_semantic_compare.report.messages import (
    DEFAULT_FAILURE_MESSAGE,
    combine_messages,
)

__all__ = ["ComparisonResult"]


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Outcome of a compare() call.

    ``is_equal`` is True exactly when ``first_difference`` is None, except
    for results built with ``failure_message``: those fail without a
    structural difference.

    Attributes:
        is_equal: Whether the trees matched under the requested mode.
        first_difference: The first divergence found, if any.
        error_message: The difference's description, or a caller-supplied
            failure text.  None on success.
    """

    is_equal: bool
    first_difference: Difference | None = None
    error_message: str | None = None

    @classmethod
    def success(cls) -> ComparisonResult:
        return cls(is_equal=True)

    @classmethod
    def failure(cls, difference: Difference) -> ComparisonResult:
        return cls(
            is_equal=False,
            first_difference=difference,
            error_message=difference.description,
        )

    @classmethod
    def failure_message(cls, error_message: str) -> ComparisonResult:
        """A failed result carrying only a text, with no structural difference."""
        return cls(is_equal=False, error_message=error_message)

    def get_error_message(self, custom_message: str | None = None) -> str:
        """Return the failure text, optionally prefixed by ``custom_message``.

        Returns:
            ``""`` on success.  Otherwise ``"{custom_message}. {detail}"``
            (or just the detail when no custom message is given), where the
            detail falls back to ``"JSON comparison failed"``.
        """
        if self.is_equal:
            return ""
        detail = self.error_message or DEFAULT_FAILURE_MESSAGE
        return combine_messages(custom_message, detail)

"""Tests for the ComparisonResult dataclass.

Covers:
- success() / failure(difference) / failure_message(text) constructors
- is_equal vs first_difference invariant
- get_error_message with and without a custom message
- Immutability
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_semantic_compare import ComparisonResult, Difference

_NAME_MISMATCH = "JSON value mismatch at path '/name': expected 'John' but was 'Jane'"


@pytest.fixture
def name_difference() -> Difference:
    return Difference.value_mismatch("/name", "John", "Jane")


class TestConstructors:
    def test_success(self) -> None:
        result = ComparisonResult.success()
        assert result.is_equal is True
        assert result.first_difference is None
        assert result.error_message is None

    def test_failure_with_difference(self, name_difference: Difference) -> None:
        result = ComparisonResult.failure(name_difference)
        assert result.is_equal is False
        assert result.first_difference is name_difference
        assert result.error_message == _NAME_MISMATCH

    def test_failure_with_message_only(self) -> None:
        result = ComparisonResult.failure_message("Custom error message")
        assert result.is_equal is False
        assert result.first_difference is None
        assert result.error_message == "Custom error message"


class TestGetErrorMessage:
    def test_success_is_empty(self) -> None:
        result = ComparisonResult.success()
        assert result.get_error_message() == ""
        assert result.get_error_message("Custom message") == ""

    def test_failure_without_custom(self, name_difference: Difference) -> None:
        result = ComparisonResult.failure(name_difference)
        assert result.get_error_message() == _NAME_MISMATCH

    def test_failure_with_custom(self, name_difference: Difference) -> None:
        result = ComparisonResult.failure(name_difference)
        assert result.get_error_message(
            "JSON strings should be semantically the same"
        ) == ("JSON strings should be semantically the same. " + _NAME_MISMATCH)

    def test_message_only_failure_with_custom(self) -> None:
        result = ComparisonResult.failure_message("Custom error")
        assert result.get_error_message("User message") == "User message. Custom error"

    def test_failure_without_any_text(self) -> None:
        result = ComparisonResult(is_equal=False)
        assert result.get_error_message() == "JSON comparison failed"
        assert result.get_error_message("User message") == (
            "User message. JSON comparison failed"
        )


class TestImmutability:
    def test_cannot_assign(self) -> None:
        result = ComparisonResult.success()
        with pytest.raises(FrozenInstanceError):
            result.is_equal = False  # type: ignore[misc]

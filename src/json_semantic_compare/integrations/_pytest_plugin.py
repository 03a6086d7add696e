"""pytest plugin for json-semantic-compare.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_semantic_compare.assertions import (
    assert_json_subtree_of,
    assert_semantically_same_json,
)


@pytest.fixture(scope="session")
def assert_json_equal() -> Any:
    """Fixture that returns a callable semantic-equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (each call creates a fresh JsonComparator).

    Usage in tests::

        def test_payload(assert_json_equal):
            assert_json_equal(response.text, '{"id": 1, "tags": ["a"]}')

        def test_payload_mismatch(assert_json_equal):
            with pytest.raises(AssertionError, match=r"JSON value mismatch"):
                assert_json_equal('{"id": 1}', '{"id": 2}')

    Returns:
        ``assert_semantically_same_json(actual, expected, custom_message=None,
        config=None)``.
    """
    return assert_semantically_same_json


@pytest.fixture(scope="session")
def assert_json_subtree() -> Any:
    """Fixture that returns a callable subtree-matching asserter.

    Usage in tests::

        def test_partial(assert_json_subtree):
            assert_json_subtree('{"id": 1}', '{"id": 1, "name": "x"}')

    Returns:
        ``assert_json_subtree_of(actual, expected, custom_message=None,
        config=None)``.
    """
    return assert_json_subtree_of

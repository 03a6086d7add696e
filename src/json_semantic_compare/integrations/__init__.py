"""Integrations subpackage for json-semantic-compare.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), exposing the
  ``assert_json_equal`` and ``assert_json_subtree`` fixtures
"""

from __future__ import annotations

__all__: list[str] = []

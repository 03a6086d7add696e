"""Tree subpackage: JSON value classification and pointer-path primitives.

Re-exports the public API for the tree module:
- JsonKind: StrEnum of the seven JSON value kinds
- kind_of / type_name: classify a parsed value and name its type
- escape_segment / append_segment / build_pointer: JSON Pointer path building
"""

from json_semantic_compare.tree.kinds import JsonKind, kind_of, type_name
from json_semantic_compare.tree.pointer import (
    ROOT,
    append_segment,
    build_pointer,
    escape_segment,
)

__all__ = [
    "ROOT",
    "JsonKind",
    "append_segment",
    "build_pointer",
    "escape_segment",
    "kind_of",
    "type_name",
]

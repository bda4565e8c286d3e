from __future__ import annotations

"""
Document Tree Data Models.

Provides the recursive type definitions used by the renderer and the
normaliser that turns freshly parsed documents (plain dicts, lists and
scalars) into that shape. Leaf vs directory is decided here, once, so
the renderer never has to re-inspect raw parser output.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Union

from schematree.domain.errors import DocumentShapeError

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

LEAF_SCALAR = "scalar"
LEAF_ARRAY = "array"


@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (file) in the document tree.

    Attributes:
        kind: Origin of the leaf ('scalar' or 'array').
    """
    kind: str = LEAF_SCALAR


Tree = Dict[str, Union["Tree", FileNode]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(data: Any) -> Tree:
    """
    Normalise a parsed document into the Tree model.

    Mappings become nested dicts (keys coerced to str, order preserved),
    lists and tuples become array leaves, everything else a scalar leaf.

    Args:
        data: Top-level value handed over by a format parser.

    Returns:
        Tree: The normalised document.

    Raises:
        DocumentShapeError: If the top-level value is not a mapping.
    """
    if not isinstance(data, Mapping):
        raise DocumentShapeError(
            f"Top-level value must be a mapping, received {type(data).__name__}."
        )
    return _convert_mapping(data)


def is_directory(node: Union[Tree, FileNode]) -> bool:
    """Return True if the node has children to render."""
    return isinstance(node, dict) and len(node) > 0


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _convert_mapping(mapping: Mapping[Any, Any]) -> Tree:
    tree: Tree = {}
    for key, value in mapping.items():
        tree[str(key)] = _convert_value(value)
    return tree


def _convert_value(value: Any) -> Union[Tree, FileNode]:
    if isinstance(value, Mapping):
        return _convert_mapping(value)
    if isinstance(value, (list, tuple)):
        return FileNode(LEAF_ARRAY)
    return FileNode(LEAF_SCALAR)

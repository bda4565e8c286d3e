from __future__ import annotations

"""
Render Configuration Domain.

Declares the immutable option record consumed by the tree renderer,
its default glyph set and the alias table used to accept camelCase
option names from the command line and programmatic callers.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_BRANCH_CHAR = "│"
DEFAULT_CORNER_CHAR = "└"
DEFAULT_TEE_CHAR = "├"
DEFAULT_HORIZONTAL_CHAR = "─"
DEFAULT_INDENT_SIZE = 2
DEFAULT_MAX_DEPTH_INDICATOR = "..."

# Rendered when the document has no entries and no root label was given
EMPTY_DOCUMENT_MARKER = "."

# camelCase spellings accepted in addition to the field names
OPTION_ALIASES: Dict[str, str] = {
    "rootPrefix": "root_prefix",
    "branchChar": "branch_char",
    "cornerChar": "corner_char",
    "teeChar": "tee_char",
    "horizontalChar": "horizontal_char",
    "indentSize": "indent_size",
    "maxDepth": "max_depth",
    "maxDepthIndicator": "max_depth_indicator",
}


# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RenderConfig:
    """
    Immutable option set for a single rendering call.

    Attributes:
        root_prefix: Label printed once above the tree body.
        branch_char: Vertical continuation glyph.
        corner_char: Connector for the last sibling.
        tee_char: Connector for non-last siblings.
        horizontal_char: Glyph repeated after the connector.
        indent_size: Width of one nesting level.
        max_depth: Deepest level whose children are expanded (None: unlimited).
        max_depth_indicator: Line text substituted for truncated children.
    """
    root_prefix: str = ""
    branch_char: str = DEFAULT_BRANCH_CHAR
    corner_char: str = DEFAULT_CORNER_CHAR
    tee_char: str = DEFAULT_TEE_CHAR
    horizontal_char: str = DEFAULT_HORIZONTAL_CHAR
    indent_size: int = DEFAULT_INDENT_SIZE
    max_depth: Optional[int] = None
    max_depth_indicator: str = DEFAULT_MAX_DEPTH_INDICATOR


def get_default_options() -> Dict[str, Any]:
    """
    Generate the default option dictionary.

    Returns:
        Dict[str, Any]: Field name to default value.
    """
    return asdict(RenderConfig())


def canonical_option_name(name: str) -> str:
    """Resolve a camelCase alias to its RenderConfig field name."""
    return OPTION_ALIASES.get(name, name)

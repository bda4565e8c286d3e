from __future__ import annotations

"""
Tree Renderer.

Converts normalised document trees into directory-listing style text.
Handles connector glyphs, indentation width and depth truncation while
preserving the key order delivered by the parser.
"""

from typing import Any, List, Optional

from schematree.core.validator import validate_options
from schematree.domain.config import EMPTY_DOCUMENT_MARKER, RenderConfig
from schematree.domain.tree_models import Tree, build_tree, is_directory

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(document: Tree, config: Optional[RenderConfig] = None) -> str:
    """
    Render a document as a multi-line directory tree.

    An empty document collapses to the root label, or '.' when no label
    was configured. No trailing newline is appended.

    Args:
        document: Normalised top-level mapping.
        config: Rendering options. Defaults apply when omitted.

    Returns:
        str: The rendered diagram.
    """
    cfg = config or RenderConfig()
    if not document:
        return cfg.root_prefix or EMPTY_DOCUMENT_MARKER
    return "\n".join(render_tree_lines(document, cfg))


def render_tree_lines(document: Tree, config: Optional[RenderConfig] = None) -> List[str]:
    """
    Produce the output lines for a non-empty document.

    The root label, when present, stands alone on the first line and is
    not connected to the tree glyphs.
    """
    cfg = config or RenderConfig()
    lines: List[str] = []
    if cfg.root_prefix:
        lines.append(cfg.root_prefix)
    lines.extend(render_tree_structure(document, cfg))
    return lines


def render_tree_structure(
        tree_structure: Tree,
        config: RenderConfig,
        prefix: str = "",
        depth: int = 0,
) -> List[str]:
    """
    Recursively transform a Tree level into a list of strings.

    Children of a directory at `depth` are replaced by a single indicator
    line once `depth` reaches `config.max_depth`.

    Args:
        tree_structure: Current mapping to process.
        config: Rendering options.
        prefix: Continuation text accumulated from the parent levels.
        depth: Nesting level of the entries in `tree_structure`.

    Returns:
        List[str]: Lines for this level and everything below it.
    """
    lines: List[str] = []
    padding = config.horizontal_char * (config.indent_size - 1)
    total = len(tree_structure)

    for i, (entry, node) in enumerate(tree_structure.items()):
        is_last = (i == total - 1)
        connector = config.corner_char if is_last else config.tee_char

        lines.append(f"{prefix}{connector}{padding} {entry}")

        # Files, arrays and empty directories have nothing below them
        if not is_directory(node):
            continue

        child_prefix = prefix + _continuation(config, is_last)

        if config.max_depth is not None and depth >= config.max_depth:
            lines.append(f"{child_prefix}{config.max_depth_indicator}")
            continue

        lines.extend(render_tree_structure(node, config, prefix=child_prefix, depth=depth + 1))

    return lines


def schema_to_tree(document: Any, **options: Any) -> str:
    """
    Normalise and render a raw parsed document in one call.

    Options may use field names or their camelCase aliases
    (e.g. ``maxDepth=2``). Invalid values fall back to defaults.
    """
    cfg, _ = validate_options(options)
    return render_tree(build_tree(document), cfg)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _continuation(config: RenderConfig, is_last: bool) -> str:
    """Prefix extension for the children of an entry."""
    if is_last:
        return " " * config.indent_size
    return config.branch_char + " " * (config.indent_size - 1)

from __future__ import annotations

"""
Tree Generation Service.

Orchestrates the file-level workflow: existence check, reading, format
resolution, parsing, root label derivation and rendering. Interfaces
(CLI, library callers) go through this service instead of wiring the
loaders and the renderer themselves.
"""

import logging
import os
from dataclasses import replace
from typing import Any, Mapping, Optional

from schematree.core.analysis.tree_renderer import render_tree
from schematree.core.parsing.loader import detect_format, load_document
from schematree.core.validator import validate_options
from schematree.domain.config import RenderConfig
from schematree.domain.errors import InputNotFoundError
from schematree.infra.fs import derive_root_label, read_text_file, write_text_file

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def file_to_tree(
        path: str,
        options: Optional[Mapping[str, Any]] = None,
        fmt: Optional[str] = None,
) -> str:
    """
    Read a document file and render it as a directory tree.

    When no root label is configured, the file name without its
    extension is used.

    Args:
        path: Input document path.
        options: Rendering options (field names or camelCase aliases).
        fmt: Explicit format name. Detected from the extension when omitted.

    Returns:
        str: The rendered tree, without trailing newline.

    Raises:
        InputNotFoundError: If `path` does not exist.
        SchemaTreeError: For unsupported formats and malformed content.
    """
    if not os.path.exists(path):
        raise InputNotFoundError(path)

    config, warnings = validate_options(options)
    for w in warnings:
        logger.warning(f"Option constraint: {w}")

    resolved_fmt = fmt or detect_format(path)
    text = read_text_file(path)
    document = load_document(text, resolved_fmt, source=path)

    return render_tree(document, _with_root_label(config, path))


def write_tree_output(tree_text: str, output_path: str) -> None:
    """
    Persist a rendered tree followed by a single newline.

    Args:
        tree_text: Rendered diagram.
        output_path: Destination file.
    """
    write_text_file(output_path, tree_text + "\n")
    logger.info(f"Tree written to {output_path}")


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _with_root_label(config: RenderConfig, path: str) -> RenderConfig:
    if config.root_prefix:
        return config
    return replace(config, root_prefix=derive_root_label(path))

from __future__ import annotations

"""
schematree: render JSON, JSONC, YAML and XML documents as directory trees.
"""

from schematree.core.analysis.tree_renderer import render_tree, render_tree_lines, schema_to_tree
from schematree.core.parsing.loader import detect_format, load_document
from schematree.core.services.tree_service import file_to_tree, write_tree_output
from schematree.domain.config import RenderConfig
from schematree.domain.errors import (
    DocumentParseError,
    DocumentShapeError,
    InputNotFoundError,
    SchemaTreeError,
    UnsupportedFormatError,
)
from schematree.domain.tree_models import FileNode, Tree, build_tree

__version__ = "1.0.0"

__all__ = [
    "DocumentParseError",
    "DocumentShapeError",
    "FileNode",
    "InputNotFoundError",
    "RenderConfig",
    "SchemaTreeError",
    "Tree",
    "UnsupportedFormatError",
    "build_tree",
    "detect_format",
    "file_to_tree",
    "load_document",
    "render_tree",
    "render_tree_lines",
    "schema_to_tree",
    "write_tree_output",
]

from __future__ import annotations

"""
Document Loader Registry.

Maps format names and file extensions to their parsers and hands the
parsed data to the tree normaliser. This is the single hand-off point
between raw input text and the Tree model.
"""

import logging
import os
from typing import Any, Callable, Dict, List, Optional

from schematree.core.parsing import formats
from schematree.domain.errors import UnsupportedFormatError
from schematree.domain.tree_models import Tree, build_tree

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# REGISTRY
# -----------------------------------------------------------------------------
_PARSERS: Dict[str, Callable[[str], Any]] = {
    "json": formats.parse_json,
    "jsonc": formats.parse_jsonc,
    "yaml": formats.parse_yaml,
    "xml": formats.parse_xml,
}

_EXTENSION_MAP: Dict[str, str] = {
    ".json": "json",
    ".jsonc": "jsonc",
    ".json5": "jsonc",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".xml": "xml",
}


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def supported_formats() -> List[str]:
    """Return the registered format names."""
    return list(_PARSERS)


def detect_format(path: str) -> str:
    """
    Resolve the document format from a file extension.

    Args:
        path: Input file path.

    Returns:
        str: Registered format name.

    Raises:
        UnsupportedFormatError: If the extension is not recognised.
    """
    ext = os.path.splitext(path)[1].lower()
    fmt = _EXTENSION_MAP.get(ext)
    if fmt is None:
        known = ", ".join(sorted(_EXTENSION_MAP))
        raise UnsupportedFormatError(
            f"Unsupported file extension '{ext or '(none)'}'. Expected one of: {known}."
        )
    return fmt


def load_document(text: str, fmt: str, source: Optional[str] = None) -> Tree:
    """
    Parse raw text in the given format and normalise it into a Tree.

    Args:
        text: Raw document content.
        fmt: Registered format name.
        source: Optional origin (file path) used in diagnostics.

    Returns:
        Tree: The normalised document.

    Raises:
        UnsupportedFormatError: If the format name is not registered.
        DocumentParseError: If the content is malformed.
        DocumentShapeError: If the top-level value is not a mapping.
    """
    parser = _PARSERS.get(fmt.lower())
    if parser is None:
        raise UnsupportedFormatError(
            f"Unknown format '{fmt}'. Expected one of: {', '.join(_PARSERS)}."
        )

    logger.debug(f"Parsing {source or 'document'} as {fmt}.")
    data = parser(text)
    return build_tree(data)

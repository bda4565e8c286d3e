from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
the option dictionary understood by the validation layer. Every render
option is reachable through a kebab-case and a camelCase spelling.
"""

import argparse
import logging
from typing import Any, Dict, Optional

from schematree.core.parsing.loader import supported_formats

logger = logging.getLogger(__name__)

_EPILOG = """\
Examples:
  schematree structure.json
  schematree structure.jsonc
  schematree structure.yaml --max-depth 2
  schematree structure.xml --indent-size 4 -o tree.txt
"""

_STRING_OPTIONS = [
    "root_prefix", "branch_char", "corner_char", "tee_char",
    "horizontal_char", "max_depth_indicator",
]
_NUMERIC_OPTIONS = ["indent_size", "max_depth"]

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the schematree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="schematree",
        description="Convert a JSON, JSONC, YAML or XML file structure to an ASCII directory tree.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )

    # --- Input / Output ---
    p.add_argument(
        "input_file",
        nargs="?",
        default=None,
        metavar="file",
        help="Path to the JSON, JSONC, YAML or XML file to convert.",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Output file path (default: stdout).",
    )
    p.add_argument(
        "--format",
        dest="input_format",
        choices=supported_formats(),
        default=None,
        help="Force the input format instead of detecting it from the extension.",
    )

    # --- Rendering ---
    p.add_argument(
        "--root-prefix", "--rootPrefix",
        dest="root_prefix",
        default=None,
        help="Label printed above the tree (default: file name without extension).",
    )
    p.add_argument(
        "--branch-char", "--branchChar",
        dest="branch_char",
        default=None,
        help="Vertical branch glyph (default: '│').",
    )
    p.add_argument(
        "--corner-char", "--cornerChar",
        dest="corner_char",
        default=None,
        help="Connector for the last entry of a level (default: '└').",
    )
    p.add_argument(
        "--tee-char", "--teeChar",
        dest="tee_char",
        default=None,
        help="Connector for the other entries (default: '├').",
    )
    p.add_argument(
        "--horizontal-char", "--horizontalChar",
        dest="horizontal_char",
        default=None,
        help="Horizontal line glyph (default: '─').",
    )
    p.add_argument(
        "--indent-size", "--indentSize",
        dest="indent_size",
        default=None,
        help="Width of one nesting level (default: 2).",
    )
    p.add_argument(
        "--max-depth", "--maxDepth",
        dest="max_depth",
        default=None,
        help="Deepest level to expand; deeper content is replaced by the indicator.",
    )
    p.add_argument(
        "--max-depth-indicator", "--maxDepthIndicator",
        dest="max_depth_indicator",
        default=None,
        help="Text shown in place of truncated content (default: '...').",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a render option dictionary.

    Only flags that were actually supplied are included. Numeric flags
    that do not parse as integers are dropped.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Render option overrides.
    """
    overrides: Dict[str, Any] = {}

    for name in _STRING_OPTIONS:
        value = getattr(args, name, None)
        if value is not None:
            overrides[name] = value

    for name in _NUMERIC_OPTIONS:
        raw = getattr(args, name, None)
        if raw is None:
            continue
        value = _parse_int(raw)
        if value is None:
            logger.debug(f"Ignoring non-numeric value for {name}: {raw!r}")
            continue
        overrides[name] = value

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _parse_int(value: str) -> Optional[int]:
    """Parse a decimal integer, returning None on failure."""
    try:
        return int(value.strip())
    except ValueError:
        return None

from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies connector selection, indentation math, root label handling,
depth truncation with its indicator, and the treatment of leaves
(arrays, scalars, empty mappings).
"""

from typing import Any, Dict

import pytest

from schematree.core.analysis.tree_renderer import (
    render_tree,
    render_tree_lines,
    render_tree_structure,
    schema_to_tree,
)
from schematree.domain.config import RenderConfig
from schematree.domain.tree_models import FileNode, build_tree


def _count_nodes(tree: Dict[str, Any]) -> int:
    """Count every key at every level."""
    total = 0
    for value in tree.values():
        total += 1
        if isinstance(value, dict):
            total += _count_nodes(value)
    return total


# -----------------------------------------------------------------------------
# Empty documents
# -----------------------------------------------------------------------------

def test_empty_document_renders_dot():
    assert render_tree({}) == "."


def test_empty_document_renders_root_label():
    assert render_tree({}, RenderConfig(root_prefix="empty")) == "empty"


def test_empty_document_ignores_max_depth():
    assert render_tree({}, RenderConfig(max_depth=0)) == "."


# -----------------------------------------------------------------------------
# Basic layout
# -----------------------------------------------------------------------------

def test_default_layout(small_document):
    """Default glyphs with indent_size=2."""
    expected = "\n".join([
        "├─ src",
        "│ ├─ a.ts",
        "│ └─ b.ts",
        "└─ tests",
    ])
    assert render_tree(small_document) == expected


def test_indent_size_three_gives_classic_connectors(small_document):
    expected = "\n".join([
        "├── src",
        "│  ├── a.ts",
        "│  └── b.ts",
        "└── tests",
    ])
    assert render_tree(small_document, RenderConfig(indent_size=3)) == expected


def test_indent_size_four_pads_connectors(small_document):
    output = render_tree(small_document, RenderConfig(indent_size=4))
    assert output.splitlines() == [
        "├─── src",
        "│   ├─── a.ts",
        "│   └─── b.ts",
        "└─── tests",
    ]


def test_indent_size_one_has_no_horizontal_padding(small_document):
    output = render_tree(small_document, RenderConfig(indent_size=1))
    assert output.splitlines() == ["├ src", "│├ a.ts", "│└ b.ts", "└ tests"]


def test_no_trailing_newline(small_document):
    assert not render_tree(small_document).endswith("\n")


def test_root_label_is_standalone_first_line(small_document):
    lines = render_tree(small_document, RenderConfig(root_prefix="project")).splitlines()
    assert lines[0] == "project"
    assert lines[1] == "├─ src"
    assert len(lines) == 5


def test_last_entry_of_a_level_uses_corner_prefix():
    """The children of a last entry are indented with spaces only."""
    doc = {"only": {"child": {"grandchild": {}}}}
    assert render_tree(doc).splitlines() == [
        "└─ only",
        "  └─ child",
        "    └─ grandchild",
    ]


def test_key_order_is_preserved():
    doc = {"zeta": {}, "alpha": {}, "mid": {"b": {}, "a": {}}}
    assert render_tree(doc).splitlines() == [
        "├─ zeta",
        "├─ alpha",
        "└─ mid",
        "  ├─ b",
        "  └─ a",
    ]


def test_corner_only_on_last_sibling(deep_document):
    cfg = RenderConfig(tee_char="T", corner_char="L", branch_char="|", horizontal_char="-")
    lines = render_tree(deep_document, cfg).splitlines()
    top_level = [line for line in lines if not line.startswith((" ", "|"))]
    assert top_level == ["T- src", "L- tests"]


def test_ascii_glyphs(small_document):
    cfg = RenderConfig(branch_char="|", corner_char="`", tee_char="+", horizontal_char="-")
    assert render_tree(small_document, cfg).splitlines() == [
        "+- src",
        "| +- a.ts",
        "| `- b.ts",
        "`- tests",
    ]


def test_multi_character_glyphs_are_used_verbatim(small_document):
    """Prefix width follows indent_size, not glyph length."""
    cfg = RenderConfig(branch_char="||", tee_char="+=", corner_char="\\_")
    assert render_tree(small_document, cfg).splitlines() == [
        "+=─ src",
        "|| +=─ a.ts",
        "|| \\_─ b.ts",
        "\\_─ tests",
    ]


# -----------------------------------------------------------------------------
# Leaves
# -----------------------------------------------------------------------------

def test_arrays_are_leaves():
    doc = {"src": {"tags": [1, 2, 3], "nested": [{"a": {}}]}}
    assert render_tree(doc).splitlines() == [
        "└─ src",
        "  ├─ tags",
        "  └─ nested",
    ]


def test_scalars_and_file_nodes_are_leaves():
    doc = {"name": "demo", "count": 3, "flag": None, "node": FileNode()}
    assert render_tree(doc).splitlines() == [
        "├─ name",
        "├─ count",
        "├─ flag",
        "└─ node",
    ]


def test_arrays_never_expand_or_truncate():
    doc = {"a": [1, 2], "b": {}}
    assert render_tree(doc, RenderConfig(max_depth=0)) == "├─ a\n└─ b"


# -----------------------------------------------------------------------------
# Depth truncation
# -----------------------------------------------------------------------------

def test_unlimited_depth_shows_everything(deep_document):
    output = render_tree(deep_document)
    assert "email.ts" in output
    assert "Button.test.tsx" in output
    assert "..." not in output


def test_max_depth_zero_keeps_root_children(deep_document):
    output = render_tree(deep_document, RenderConfig(max_depth=0))
    assert output.splitlines() == [
        "├─ src",
        "│ ...",
        "└─ tests",
        "  ...",
    ]


def test_max_depth_one(deep_document):
    output = render_tree(deep_document, RenderConfig(max_depth=1))
    assert output.splitlines() == [
        "├─ src",
        "│ ├─ components",
        "│ │ ...",
        "│ └─ utils",
        "│   ...",
        "└─ tests",
        "  └─ unit",
        "    ...",
    ]


def test_max_depth_two(deep_document):
    output = render_tree(deep_document, RenderConfig(max_depth=2))
    assert output.splitlines() == [
        "├─ src",
        "│ ├─ components",
        "│ │ ├─ Button.tsx",
        "│ │ └─ Input.tsx",
        "│ │   ...",
        "│ └─ utils",
        "│   └─ helpers",
        "│     ...",
        "└─ tests",
        "  └─ unit",
        "    └─ components",
        "      ...",
    ]


def test_max_depth_three_stops_before_level_four(deep_document):
    output = render_tree(deep_document, RenderConfig(max_depth=3))
    assert "format.ts" in output
    assert "validate.ts" in output
    assert "props.ts" in output
    assert "email.ts" not in output
    assert "..." in output


def test_empty_directory_produces_no_indicator():
    doc = {"full": {"child": {}}, "empty": {}}
    assert render_tree(doc, RenderConfig(max_depth=0)).splitlines() == [
        "├─ full",
        "│ ...",
        "└─ empty",
    ]


@pytest.mark.parametrize("indicator", [">>>", "[more]", "*", "... (more content below) ..."])
def test_custom_indicator(deep_document, indicator):
    output = render_tree(deep_document, RenderConfig(max_depth=2, max_depth_indicator=indicator))
    assert indicator in output
    if "..." not in indicator:
        assert "..." not in output


def test_empty_indicator_still_emits_line(deep_document):
    output = render_tree(deep_document, RenderConfig(max_depth=0, max_depth_indicator=""))
    assert output.split("\n") == [
        "├─ src",
        "│ ",
        "└─ tests",
        "  ",
    ]


def test_truncation_with_root_label_and_custom_glyphs(deep_document):
    cfg = RenderConfig(
        root_prefix="project",
        branch_char="|",
        corner_char="`",
        tee_char="+",
        horizontal_char="-",
        max_depth=0,
        max_depth_indicator=">>>",
    )
    assert render_tree(deep_document, cfg).splitlines() == [
        "project",
        "+- src",
        "| >>>",
        "`- tests",
        "  >>>",
    ]


# -----------------------------------------------------------------------------
# Line accounting
# -----------------------------------------------------------------------------

def test_line_count_matches_node_count(deep_document):
    lines = render_tree_lines(deep_document)
    assert len(lines) == _count_nodes(deep_document)


def test_structure_is_pure(small_document):
    """Repeated calls return equal, independent lists."""
    cfg = RenderConfig()
    first = render_tree_structure(small_document, cfg)
    second = render_tree_structure(small_document, cfg)
    assert first == second
    assert first is not second


def test_normalised_tree_renders_like_raw_mapping(deep_document):
    assert render_tree(build_tree(deep_document)) == render_tree(deep_document)


# -----------------------------------------------------------------------------
# Convenience wrapper
# -----------------------------------------------------------------------------

def test_schema_to_tree_accepts_camel_case_options(deep_document):
    output = schema_to_tree(deep_document, maxDepth=0, maxDepthIndicator=">>>", rootPrefix="root")
    assert output.splitlines()[0] == "root"
    assert ">>>" in output
    assert "components" not in output


def test_schema_to_tree_falls_back_on_invalid_options(small_document):
    assert schema_to_tree(small_document, indentSize="wide") == render_tree(small_document)

from __future__ import annotations

"""
Format-Specific Document Parsers.

Each parser turns raw text into plain Python data (dicts, lists and
scalars) with mapping order preserved. Parsing itself is delegated to
off-the-shelf libraries; failures surface as DocumentParseError with the
library message attached.
"""

import json
import logging
import re
from typing import Any, Dict
from xml.etree import ElementTree

import json5
import yaml

from schematree.domain.errors import DocumentParseError

logger = logging.getLogger(__name__)

# Synthetic wrapper allowing documents with several top-level elements
_XML_CONTAINER = "schematree-root"

# Declaration that is only legal at the very start of a document
_XML_DECLARATION_RX = re.compile(r"<\?xml\b.*?\?>", re.DOTALL | re.IGNORECASE)

# DOCTYPE with optional internal subset; moved in front of the wrapper
_XML_DOCTYPE_RX = re.compile(r"<!DOCTYPE\b[^\[>]*(?:\[.*?\])?\s*>", re.DOTALL | re.IGNORECASE)

_YAML_STR_TAG = "tag:yaml.org,2002:str"
_YAML_MERGE_TAG = "tag:yaml.org,2002:merge"


class _SourceKeyLoader(yaml.SafeLoader):
    """SafeLoader that constructs scalar mapping keys as plain strings."""

    def construct_mapping(self, node, deep=False):
        for key_node, _ in node.value:
            if isinstance(key_node, yaml.ScalarNode) and key_node.tag != _YAML_MERGE_TAG:
                key_node.tag = _YAML_STR_TAG
        return super().construct_mapping(node, deep=deep)

# -----------------------------------------------------------------------------
# PARSERS
# -----------------------------------------------------------------------------

def parse_json(text: str) -> Any:
    """Parse strict JSON."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentParseError("json", f"{e.msg} (line {e.lineno}, column {e.colno})") from e


def parse_jsonc(text: str) -> Any:
    """Parse JSON with comments and trailing commas."""
    try:
        return json5.loads(text)
    except ValueError as e:
        raise DocumentParseError("jsonc", str(e)) from e


def parse_yaml(text: str) -> Any:
    """
    Parse a single YAML document.

    Mapping keys keep their source text, so 'on', 'yes' or 'null' stay
    distinct names instead of collapsing into booleans or None. An empty
    stream is treated as an empty mapping.
    """
    try:
        data = yaml.load(text, Loader=_SourceKeyLoader)
    except yaml.YAMLError as e:
        raise DocumentParseError("yaml", str(e)) from e
    return {} if data is None else data


def parse_xml(text: str) -> Dict[str, Any]:
    """
    Parse XML into nested dicts.

    The children of every top-level element are merged into a single
    mapping; later keys overwrite earlier ones. Elements without child
    elements become empty strings (leaves), tags repeated among siblings
    become lists, and attributes are dropped.
    """
    body = _XML_DECLARATION_RX.sub("", text)

    # Keep the internal subset so declared entities still resolve
    doctype = ""
    match = _XML_DOCTYPE_RX.search(body)
    if match:
        doctype = match.group(0)
        body = body[:match.start()] + body[match.end():]

    try:
        container = ElementTree.fromstring(
            f"{doctype}<{_XML_CONTAINER}>{body}</{_XML_CONTAINER}>"
        )
    except ElementTree.ParseError as e:
        raise DocumentParseError("xml", str(e)) from e

    merged: Dict[str, Any] = {}
    roots = list(container)
    if len(roots) > 1:
        logger.debug(f"Merging children of {len(roots)} XML root elements.")

    for root in roots:
        children = _element_children(root)
        if isinstance(children, dict):
            merged.update(children)
    return merged


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _element_children(element: ElementTree.Element) -> Any:
    """Convert an element's child elements to a dict, or '' when it has none."""
    if len(element) == 0:
        return ""

    out: Dict[str, Any] = {}
    for child in element:
        tag = _local_name(child.tag)
        value = _element_children(child)
        if tag in out:
            previous = out[tag]
            out[tag] = previous + [value] if isinstance(previous, list) else [previous, value]
        else:
            out[tag] = value
    return out


def _local_name(tag: str) -> str:
    """Drop the '{namespace}' qualifier ElementTree adds to tag names."""
    return tag.rsplit("}", 1)[-1]

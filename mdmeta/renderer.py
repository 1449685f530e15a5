# mdmeta/renderer.py
from typing import List, Optional
from xml.etree import ElementTree as etree
import logging

import yaml
from markdown.util import AtomicString

BROKEN_MAPPING = "<broken mapping node>"


def value_to_string(node: Optional[yaml.nodes.Node]) -> str:
    """
    Render a YAML node as table cell text.

    Scalars keep their source text, sequences render as ``[a b]`` and
    mappings as ``map[k:v]``. Mapping pairs come out in reverse declaration
    order.
    """
    if node is None:
        return ""

    if isinstance(node, yaml.SequenceNode):
        return "[" + " ".join(value_to_string(item) for item in node.value) + "]"

    if isinstance(node, yaml.MappingNode):
        content = [child for pair in node.value for child in pair]
        if len(content) % 2 != 0:
            return BROKEN_MAPPING
        pairs = {}
        for i in range(len(content), 1, -2):
            pairs[value_to_string(content[i - 2])] = value_to_string(content[i - 1])
        return "map[" + " ".join(f"{k}:{v}" for k, v in pairs.items()) + "]"

    if isinstance(node, yaml.ScalarNode):
        return node.value

    kind = getattr(node, "id", type(node).__name__)
    return f"<do not support yaml node kind '{kind}'>"


class MetaTableRenderer:
    """Builds the two-row metadata table from a front matter node tree"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def render_table(self, items: Optional[yaml.nodes.Node]) -> Optional[etree.Element]:
        """
        Build a table with the keys as header row and the values as body row.

        Returns None unless the root node is a mapping.
        """
        if items is None:
            return None
        # Composer output has no document wrapper; accept one anyway
        if getattr(items, "id", None) == "document" and len(items.value) == 1:
            items = items.value[0]
        if not isinstance(items, yaml.MappingNode):
            self.logger.debug(f"Skipping metadata table for {items.tag} root")
            return None

        table = etree.Element("table")
        thead = etree.SubElement(table, "thead")
        self._render_row(thead, "th", [key for key, _ in items.value])
        tbody = etree.SubElement(table, "tbody")
        self._render_row(tbody, "td", [value for _, value in items.value])
        return table

    def _render_row(
        self,
        parent: etree.Element,
        tag: str,
        nodes: List[yaml.nodes.Node]
    ) -> etree.Element:
        row = etree.SubElement(parent, "tr")
        for node in nodes:
            cell = etree.SubElement(row, tag)
            cell.text = AtomicString(value_to_string(node))
        return row

from markdown.treeprocessors import Treeprocessor
from markdown.util import AtomicString
from xml.etree import ElementTree as etree
import logging

from ..context import MetaContext
from ..renderer import MetaTableRenderer


class MetaTableTreeprocessor(Treeprocessor):
    """Render front matter as a table above the document, or mark its error"""

    def __init__(self, md):
        super().__init__(md)
        self.logger = logging.getLogger(__name__)
        self.renderer = MetaTableRenderer()

    def run(self, root):
        context: MetaContext = getattr(self.md, "meta_context", None)
        if context is None or context.data is None:
            return None
        data = context.data

        if data.error is not None:
            if data.anchor is not None:
                marker = etree.SubElement(data.anchor, "code")
                marker.text = AtomicString(str(data.error))
            return None

        table = self.renderer.render_table(data.items)
        if table is None:
            return None
        root.insert(0, table)
        self.logger.debug(f"Inserted metadata table with {len(table[0][0])} columns")
        return None

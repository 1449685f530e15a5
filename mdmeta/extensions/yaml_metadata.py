from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from markdown.blockprocessors import BlockProcessor
from markdown.core import Markdown
from markdown import util
from xml.etree import ElementTree as etree
import logging
from typing import List, Optional

from ..context import MetaContext, get
from ..types import MetadataDict
from ..scanner import BlockAccumulator, BoundaryScanner
from .meta_table import MetaTableTreeprocessor

# Stands in for a front matter block that failed to parse
PLACEHOLDER = f"{util.STX}mdmeta-front-matter{util.ETX}"


class FrontMatterPreprocessor(Preprocessor):
    """Extract the YAML front matter block starting on the first line"""

    def __init__(self, md: Markdown):
        super().__init__(md)
        self.logger = logging.getLogger(__name__)

    def run(self, lines: List[str]) -> List[str]:
        """Store front matter in the session and drop it from the document"""
        context = MetaContext()
        self.md.meta_context = context

        # Runs ahead of whitespace normalization; only line endings are folded
        lines = "\n".join(lines).replace("\r\n", "\n").replace("\r", "\n").split("\n")

        scanner = BoundaryScanner()
        if not scanner.open(0, lines[0]):
            return lines
        self.logger.debug("Front matter block opened")

        accumulator = BlockAccumulator()
        index = 1
        while index < len(lines):
            line = lines[index]
            index += 1
            if scanner.feed(line):
                break
            accumulator.append(line + "\n")
        scanner.finish()

        data = accumulator.close(context)
        if data.error is None:
            self.logger.debug(f"Front matter parsed: {len(data.mapping)} keys")
        return lines[index:]


class FrontMatterAnchorPreprocessor(Preprocessor):
    """Put a placeholder where a front matter block failed to parse"""

    def run(self, lines: List[str]) -> List[str]:
        context: MetaContext = self.md.meta_context
        if context.data is None or context.data.error is None:
            return lines
        # Keep the raw block visible; the block processor builds its element
        return [PLACEHOLDER, ""] + lines


class FrontMatterBlockProcessor(BlockProcessor):
    """Render a front matter block that failed to parse as preformatted text"""

    def test(self, parent: etree.Element, block: str) -> bool:
        return block == PLACEHOLDER

    def run(self, parent: etree.Element, blocks: List[str]) -> None:
        blocks.pop(0)
        context: MetaContext = self.parser.md.meta_context
        anchor = etree.SubElement(parent, "pre", {"class": "front-matter"})
        # STX and ETX mark placeholders; normalize_whitespace strips them elsewhere
        raw = context.data.raw.replace(util.STX, "").replace(util.ETX, "")
        anchor.text = util.AtomicString(raw)
        context.data.anchor = anchor


class YAMLMetadataExtension(Extension):
    """Extension for processing YAML front matter"""

    def __init__(self, **kwargs):
        self.config = {
            'table': [False, 'Render front matter as a table above the document'],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md: Markdown) -> None:
        md.registerExtension(self)
        self.md = md
        self.reset()

        md.preprocessors.register(
            FrontMatterPreprocessor(md),
            'yaml_metadata',
            priority=35
        )
        md.preprocessors.register(
            FrontMatterAnchorPreprocessor(md),
            'yaml_metadata_anchor',
            priority=29
        )
        md.parser.blockprocessors.register(
            FrontMatterBlockProcessor(md.parser),
            'yaml_metadata',
            priority=105
        )
        if self.getConfig('table'):
            md.treeprocessors.register(
                MetaTableTreeprocessor(md),
                'meta_table',
                priority=25
            )

    def reset(self) -> None:
        """Start a new parse session"""
        self.md.meta_context = MetaContext()

    def get_metadata(self) -> Optional[MetadataDict]:
        """Get the front matter mapping of the last conversion"""
        return get(self.md)


def makeExtension(**kwargs):
    """Create YAML front matter extension."""
    return YAMLMetadataExtension(**kwargs)

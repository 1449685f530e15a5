# mdmeta/scanner.py
"""
Front matter boundary detection and block accumulation.

A front matter block opens with a delimiter line on line 0 of the document
and closes with the next non-blank delimiter line. A block still open when
the input runs out is closed at end-of-input.
"""

import logging
from typing import List, Optional, Tuple

import yaml

from .context import MetaContext
from .types import FrontMatterError, MetaData, MetadataDict, MetaItems, ScanState

logger = logging.getLogger(__name__)

DELIMITER = "-"
NULL_TAG = "tag:yaml.org,2002:null"


def is_delimiter(line: str) -> bool:
    """Check whether a line consists solely of delimiter characters."""
    stripped = line.strip()
    return bool(stripped) and stripped == DELIMITER * len(stripped)


def _check_recursion(node: MetaItems) -> None:
    """Reject node trees in which an alias refers back to its own anchor."""
    done = set()
    path = set()

    def visit(current: MetaItems) -> None:
        if id(current) in path:
            raise FrontMatterError(
                "anchor value contains itself",
                line=current.start_mark.line + 1
            )
        if id(current) in done or isinstance(current, yaml.ScalarNode):
            return
        path.add(id(current))
        for child in current.value:
            if isinstance(current, yaml.MappingNode):
                for part in child:
                    visit(part)
            else:
                visit(child)
        path.discard(id(current))
        done.add(id(current))

    visit(node)


def load_front_matter(raw: str) -> Tuple[MetadataDict, Optional[MetaItems]]:
    """
    Deserialize front matter text.

    The text is composed once; the node tree keeps key order and scalar
    text, and the mapping is constructed from that same tree.

    Args:
        raw: Block text between the delimiters

    Returns:
        Tuple of (mapping, node tree). An empty block, or one holding only
        a null, gives ({}, None).

    Raises:
        yaml.YAMLError: If the text is not valid YAML
        FrontMatterError: If the root is not a mapping or contains itself
        ValueError: If a scalar cannot be constructed, such as 2020-02-30
    """
    loader = yaml.SafeLoader(raw)
    try:
        node = loader.get_single_node()
        if node is None:
            return {}, None
        if isinstance(node, yaml.ScalarNode) and node.tag == NULL_TAG:
            return {}, None
        if not isinstance(node, yaml.MappingNode):
            raise FrontMatterError(
                f"cannot decode {node.tag} into a mapping",
                line=node.start_mark.line + 1
            )
        _check_recursion(node)
        return loader.construct_document(node), node
    finally:
        loader.dispose()


class BoundaryScanner:
    """Recognizes the opening and closing delimiters of a front matter block"""

    def __init__(self) -> None:
        self.state = ScanState.IDLE
        self._attempted = False

    def open(self, line_number: int, line: str) -> bool:
        """Open a block if the line is a delimiter on line 0."""
        if self.state is not ScanState.IDLE:
            raise RuntimeError(f"cannot open a block in state {self.state.value}")
        if self._attempted:
            return False
        self._attempted = True
        if line_number != 0 or not is_delimiter(line):
            return False
        self.state = ScanState.OPEN
        return True

    def feed(self, line: str) -> bool:
        """
        Consume a line of an open block.

        Returns:
            True if the line closed the block, False if it is block content
        """
        if self.state is not ScanState.OPEN:
            raise RuntimeError(f"cannot continue a block in state {self.state.value}")
        # blank lines never pass is_delimiter, so they stay block content
        if is_delimiter(line):
            self.state = ScanState.CLOSED
            return True
        return False

    def finish(self) -> None:
        """Close the block at end-of-input."""
        if self.state is ScanState.OPEN:
            logger.debug("Front matter block closed at end of input")
            self.state = ScanState.CLOSED


class BlockAccumulator:
    """Collects the raw lines of one front matter block"""

    def __init__(self) -> None:
        self.segments: List[str] = []

    def append(self, segment: str) -> None:
        self.segments.append(segment)

    def text(self) -> str:
        return "".join(self.segments)

    def close(self, context: MetaContext) -> MetaData:
        """
        Deserialize the collected text and store the result in the session.

        Deserialization errors are stored, never raised. A block with an
        error is shown again later through the slot's raw text.
        """
        raw = self.text()
        mapping: Optional[MetadataDict] = None
        items: Optional[MetaItems] = None
        error: Optional[Exception] = None
        try:
            mapping, items = load_front_matter(raw)
        except (yaml.YAMLError, FrontMatterError, ValueError, TypeError) as e:
            logger.warning(f"Invalid YAML front matter: {e}")
            error = e
        self.segments = []
        return context.put(mapping, items, error, raw=raw)

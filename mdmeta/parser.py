from dataclasses import dataclass
from typing import Optional
import logging

import markdown

from .config import MetaConfig
from .context import try_get, get_items
from .extensions.yaml_metadata import YAMLMetadataExtension
from .types import MetadataDict, MetaItems


@dataclass
class ParsedDocument:
    """Rendered Markdown with its front matter"""
    html: str
    metadata: Optional[MetadataDict] = None
    items: Optional[MetaItems] = None
    error: Optional[Exception] = None


class MarkdownParser:
    """Parser for Markdown content with YAML front matter"""

    def __init__(self, config: Optional[MetaConfig] = None) -> None:
        self.logger = logging.getLogger(__name__)
        self.config = config or MetaConfig()

        # Create the YAML metadata extension instance
        self.yaml_ext = YAMLMetadataExtension(table=self.config.table)

        self.md = markdown.Markdown(
            extensions=[*self.config.extensions, self.yaml_ext],
            output_format=self.config.output_format
        )

    def parse_content(self, content: str) -> ParsedDocument:
        """Parse Markdown content and collect its front matter"""
        try:
            self.md.reset()
            html = self.md.convert(content)
        except Exception as e:
            self.logger.error(f"Error parsing markdown content: {e}")
            raise

        metadata, error = try_get(self.md)
        return ParsedDocument(
            html=html,
            metadata=metadata,
            items=get_items(self.md),
            error=error
        )

"""
YAML front matter for Python-Markdown.

The extension stores the front matter of each conversion on the Markdown
instance; read it back with the accessors::

    md = markdown.Markdown(extensions=[YAMLMetadataExtension(table=True)])
    html = md.convert(source)
    metadata, error = try_get(md)
"""

from .context import MetaContext, get, get_items, try_get, try_get_items
from .extensions.yaml_metadata import YAMLMetadataExtension, makeExtension
from .parser import MarkdownParser, ParsedDocument
from .types import FrontMatterError, MetaData

__all__ = [
    "FrontMatterError",
    "MarkdownParser",
    "MetaContext",
    "MetaData",
    "ParsedDocument",
    "YAMLMetadataExtension",
    "get",
    "get_items",
    "makeExtension",
    "try_get",
    "try_get_items",
]

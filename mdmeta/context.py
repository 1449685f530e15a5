# mdmeta/context.py
"""Per-session storage of parsed front matter and its accessors."""

from typing import Optional, Tuple, Union

from markdown.core import Markdown

from .types import MetaData, MetadataDict, MetaItems

Source = Union[Markdown, "MetaContext"]


class MetaContext:
    """
    Result slot of one parse session.

    ``data`` stays None until a front matter block is closed; a document
    without front matter never fills it.
    """

    def __init__(self) -> None:
        self.data: Optional[MetaData] = None

    def put(
        self,
        mapping: Optional[MetadataDict],
        items: Optional[MetaItems],
        error: Optional[Exception],
        raw: str = "",
        anchor=None
    ) -> MetaData:
        """Store the result of the session's front matter block."""
        self.data = MetaData(
            mapping=None if error is not None else mapping,
            items=None if error is not None else items,
            error=error,
            raw=raw,
            anchor=anchor
        )
        return self.data


def _data(source: Source) -> Optional[MetaData]:
    if isinstance(source, MetaContext):
        context = source
    else:
        context = getattr(source, "meta_context", None)
    if context is None:
        return None
    return context.data


def get(source: Source) -> Optional[MetadataDict]:
    """Return the front matter mapping, or None if absent or invalid."""
    data = _data(source)
    if data is None:
        return None
    return data.mapping


def try_get(source: Source) -> Tuple[Optional[MetadataDict], Optional[Exception]]:
    """
    Return the front matter mapping and the parse error.

    (None, None) means the document has no front matter; (None, error)
    means a block was found but could not be parsed.
    """
    data = _data(source)
    if data is None:
        return None, None
    if data.error is not None:
        return None, data.error
    return data.mapping, None


def get_items(source: Source) -> Optional[MetaItems]:
    """Return the front matter node tree, which preserves key order."""
    data = _data(source)
    if data is None:
        return None
    return data.items


def try_get_items(source: Source) -> Tuple[Optional[MetaItems], Optional[Exception]]:
    """Like try_get, for the order-preserving node tree."""
    data = _data(source)
    if data is None:
        return None, None
    if data.error is not None:
        return None, data.error
    return data.items, None

# mdmeta/types.py
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Optional
from xml.etree import ElementTree as etree

import yaml

# Type aliases
MetadataDict = Dict[str, Any]
MetaItems = yaml.nodes.Node


class ScanState(Enum):
    """States of the front matter boundary scanner"""
    IDLE = "idle"
    OPEN = "open"
    CLOSED = "closed"


@dataclass
class MetaData:
    """Parsed front matter of one parse session"""
    mapping: Optional[MetadataDict] = None
    items: Optional[MetaItems] = None
    error: Optional[Exception] = None
    raw: str = ""
    anchor: Optional[etree.Element] = None


# Error types
class FrontMatterError(Exception):
    """Front matter text that YAML accepts but that is not a mapping"""
    def __init__(self, message: str, line: Optional[int] = None):
        self.message = message
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)

from dataclasses import dataclass, field
from typing import List


@dataclass
class MetaConfig:
    """Markdown parser configuration."""
    table: bool = False  # render front matter as a table
    extensions: List[str] = field(default_factory=lambda: [
        'fenced_code',
        'tables',
        'attr_list'
    ])
    output_format: str = "html"

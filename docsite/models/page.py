from datetime import datetime
from pathlib import Path
from typing import NamedTuple, Optional

from pydantic import BaseModel


class PageSource(NamedTuple):
    rel_path: str  # POSIX path relative to the content root
    path: Path
    raw: str


class PageRecord(BaseModel):
    """Unified internal model representing one documentation page."""

    title: str
    href: str
    url: str
    content: str  # body text (Markdoc, without frontmatter)
    last_modified: Optional[datetime] = None

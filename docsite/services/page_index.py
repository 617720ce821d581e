"""Navigation-ordered index of every documentation page.

:class:`PageIndex` is the single source of truth for the derived documents
(``sitemap.xml``, ``llms.txt`` and ``llms-full.txt``).  It walks the content
tree on every call to :meth:`PageIndex.pages`, turns each ``page.md`` into a
:class:`~docsite.models.page.PageRecord`, and orders the records by the
navigation manifest it was constructed with.

Ordering
--------
The manifest is flattened into one sequence of hrefs (groups in declared
order, links within a group in declared order).  Pages listed there come
first, in that sequence; pages missing from the manifest follow, sorted by
``href``.  The manifest never adds or hides pages.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from docsite.config import NAVIGATION, PAGE_FILENAME, get_settings
from docsite.models.navigation import NavGroup
from docsite.models.page import PageRecord, PageSource
from docsite.services.frontmatter import parse_frontmatter
from docsite.services.routes import derive_href, derive_url
from docsite.services.scanner import read_page_source, scan_pages

logger = logging.getLogger(__name__)


def _navigation_positions(navigation: Sequence[NavGroup]) -> Dict[str, int]:
    """Map each manifest href to its position in the flattened manifest."""
    positions: Dict[str, int] = {}
    flat = [link.href for group in navigation for link in group.links]
    for index, href in enumerate(flat):
        # A repeated href keeps its first position
        positions.setdefault(href, index)
    return positions


def order_pages(records: Sequence[PageRecord], navigation: Sequence[NavGroup]) -> List[PageRecord]:
    """Return *records* in navigation order, unlisted pages last by href."""
    positions = _navigation_positions(navigation)

    def sort_key(record: PageRecord) -> Tuple[int, int, str]:
        position = positions.get(record.href)
        if position is None:
            return (1, 0, record.href)
        return (0, position, "")

    return sorted(records, key=sort_key)


def _modified_at(path: Path) -> Optional[datetime]:
    try:
        return datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
    except OSError as exc:
        logger.warning("Cannot stat %s – %s", path, exc)
        return None


def build_page_record(source: PageSource, site_url: str) -> PageRecord:
    """Assemble a :class:`PageRecord` from one page source."""
    title, content = parse_frontmatter(source.raw)
    href = derive_href(source.rel_path)
    return PageRecord(
        title=title,
        href=href,
        url=derive_url(href, site_url),
        content=content,
        last_modified=_modified_at(source.path),
    )


class PageIndex:
    """Ordered page records for one content tree and navigation manifest."""

    def __init__(
        self,
        content_dir: Path,
        site_url: str,
        navigation: Sequence[NavGroup],
        filename: str = PAGE_FILENAME,
    ):
        self.content_dir = Path(content_dir)
        self.site_url = site_url.rstrip("/")
        self.navigation = list(navigation)
        self.filename = filename

    def pages(self) -> List[PageRecord]:
        """Scan the content tree and return the ordered page records.

        Raises:
            FilesystemError: if the content tree or a page cannot be read.
        """
        records = [
            build_page_record(read_page_source(self.content_dir, rel_path), self.site_url)
            for rel_path in scan_pages(self.content_dir, self.filename)
        ]
        return order_pages(records, self.navigation)


def get_page_index() -> PageIndex:
    """Return a :class:`PageIndex` for the configured site."""
    settings = get_settings()
    return PageIndex(settings.content_dir, settings.site_url, NAVIGATION)

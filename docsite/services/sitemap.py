"""Sitemap generation from the page index."""

from datetime import datetime, timezone
from typing import List, Optional, Sequence
from xml.etree import ElementTree

from docsite.models.page import PageRecord
from docsite.models.sitemap import SitemapEntry

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

# Pages at most this many path segments deep get the "shallow" priority
SHALLOW_DEPTH = 2

_ROOT_PRIORITY = 1.0
_SHALLOW_PRIORITY = 0.8
_DEEP_PRIORITY = 0.6


def priority(href: str) -> float:
    """Return the sitemap priority for *href*.

    ``/`` scores 1.0, ``/docs`` and ``/docs/x`` score 0.8, anything deeper
    scores 0.6.
    """
    if href == "/":
        return _ROOT_PRIORITY
    depth = len([segment for segment in href.split("/") if segment])
    return _SHALLOW_PRIORITY if depth <= SHALLOW_DEPTH else _DEEP_PRIORITY


def build_sitemap_entries(
    pages: Sequence[PageRecord], now: Optional[datetime] = None
) -> List[SitemapEntry]:
    """Return one :class:`SitemapEntry` per page, highest priority first.

    Pages without a known modification time are stamped with *now*
    (default: the current UTC time).  Equal priorities keep page order.
    """
    stamp = now or datetime.now(timezone.utc)
    entries = [
        SitemapEntry(
            url=page.url,
            last_modified=page.last_modified or stamp,
            priority=priority(page.href),
        )
        for page in pages
    ]
    return sorted(entries, key=lambda entry: -entry.priority)


def render_sitemap_xml(entries: Sequence[SitemapEntry]) -> str:
    """Serialize *entries* as a sitemaps.org ``urlset`` document."""
    urlset = ElementTree.Element("urlset", xmlns=SITEMAP_NS)
    for entry in entries:
        url = ElementTree.SubElement(urlset, "url")
        ElementTree.SubElement(url, "loc").text = entry.url
        ElementTree.SubElement(url, "lastmod").text = entry.last_modified.isoformat(
            timespec="seconds"
        )
        ElementTree.SubElement(url, "priority").text = f"{entry.priority:.1f}"

    body = ElementTree.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'

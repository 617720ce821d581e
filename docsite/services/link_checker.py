"""Internal link validation for the documentation sources.

Every ``.md`` file under the content root is scanned for two link forms:

* ``href="/some/path"``: Markdoc tag attributes.
* ``[text](/some/path)``: standard Markdown links.

Only site-absolute paths (starting with ``/``) are checked; external URLs
and anchor-only links are ignored, and ``#fragment`` suffixes are dropped.
A link is valid when, after stripping one trailing slash, it equals the
href of a page-defining file.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, NamedTuple, Set

from docsite.config import PAGE_FILENAME
from docsite.services.routes import derive_href
from docsite.services.scanner import iter_files, read_page_source

logger = logging.getLogger(__name__)

_HREF_ATTR_RE = re.compile(r'href="(/[^"#]*)(?:#[^"]*)?"')
_MARKDOWN_LINK_RE = re.compile(r"\]\((/[^)#\s]*)(?:#[^)]*)?\)")

_SOURCE_SUFFIX = ".md"


class LinkReference(NamedTuple):
    source_file: str  # relative to the content root
    target: str


class BrokenLink(NamedTuple):
    source_file: str
    target: str


def discover_routes(content_dir: Path, filenames: Iterable[str] = (PAGE_FILENAME,)) -> Set[str]:
    """Return the set of site paths defined by page files under *content_dir*."""
    root = Path(content_dir)
    wanted = set(filenames)
    return {
        derive_href(path.relative_to(root).as_posix())
        for path in iter_files(root)
        if path.name in wanted
    }


def extract_links(text: str) -> List[str]:
    """Return every site-absolute link target in *text*, without fragments."""
    links = [match.group(1) for match in _HREF_ATTR_RE.finditer(text)]
    links.extend(match.group(1) for match in _MARKDOWN_LINK_RE.finditer(text))
    return links


def normalize_link(link: str) -> str:
    """Strip one trailing slash, leaving ``/`` itself alone."""
    if link == "/":
        return link
    return re.sub(r"/$", "", link)


def collect_link_references(content_dir: Path) -> List[LinkReference]:
    root = Path(content_dir)
    sources = sorted(
        path.relative_to(root).as_posix()
        for path in iter_files(root)
        if path.suffix == _SOURCE_SUFFIX
    )
    references: List[LinkReference] = []
    for rel_path in sources:
        source = read_page_source(root, rel_path)
        references.extend(LinkReference(rel_path, link) for link in extract_links(source.raw))
    return references


def find_broken_links(content_dir: Path) -> List[BrokenLink]:
    """Return every internal link under *content_dir* that matches no route.

    Raises:
        FilesystemError: if the content tree or a source file cannot be read.
    """
    routes = discover_routes(content_dir)
    references = collect_link_references(content_dir)
    logger.debug("Link checker: %d route(s), %d link(s)", len(routes), len(references))
    return [
        BrokenLink(ref.source_file, ref.target)
        for ref in references
        if normalize_link(ref.target) not in routes
    ]

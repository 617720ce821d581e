"""Content-tree discovery: finds page source files and reads them."""

import logging
import os
from pathlib import Path
from typing import Iterator, List

from docsite.config import PAGE_FILENAME
from docsite.models.page import PageSource

logger = logging.getLogger(__name__)


class FilesystemError(RuntimeError):
    """The content root or one of its files cannot be read."""


def _raise_walk_error(exc: OSError) -> None:
    raise FilesystemError(f"Cannot read content directory {exc.filename}: {exc.strerror}") from exc


def iter_files(content_dir: Path) -> Iterator[Path]:
    """Yield every file below *content_dir*, visiting each directory once.

    Symlinked directories are not followed.

    Raises:
        FilesystemError: if *content_dir* is missing, is not a directory, or
            a directory below it cannot be listed.
    """
    root = Path(content_dir)
    if not root.is_dir():
        raise FilesystemError(f"Content directory {root} does not exist or is not a directory.")
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        for name in filenames:
            yield Path(dirpath, name)


def scan_pages(content_dir: Path, filename: str = PAGE_FILENAME) -> List[str]:
    """Return the relative POSIX paths of every *filename* under *content_dir*.

    The result is sorted so repeated scans of an unchanged tree are
    identical.  An empty list always means "no pages", never "cannot read":
    unreadable trees raise :class:`FilesystemError`.
    """
    root = Path(content_dir)
    found = sorted(
        path.relative_to(root).as_posix() for path in iter_files(root) if path.name == filename
    )
    logger.debug("Scanner: found %d page(s) under %s", len(found), root)
    return found


def read_page_source(content_dir: Path, rel_path: str) -> PageSource:
    """Read one page file as UTF-8 text."""
    path = Path(content_dir) / rel_path
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FilesystemError(f"Cannot read page source {path}: {exc}") from exc
    return PageSource(rel_path=rel_path, path=path, raw=raw)

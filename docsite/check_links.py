"""Command-line entry point: fail when a documentation page links to a missing page."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from docsite.config import get_settings
from docsite.services.link_checker import find_broken_links
from docsite.services.scanner import FilesystemError


def _stderr(line: str) -> None:
    print(line, file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="docsite-check-links",
        description="Check that every internal link in the Markdoc sources resolves to a page.",
    )
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=None,
        help="Content root to scan (default: DOCSITE_CONTENT_DIR or ./content).",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    content_dir = args.content_dir or get_settings().content_dir
    try:
        broken = find_broken_links(content_dir)
    except FilesystemError as exc:
        _stderr(f"Error: {exc}")
        return 2

    for link in broken:
        _stderr(f'Broken link: "{link.target}" in {content_dir.name}/{link.source_file}')

    if broken:
        _stderr(f"\n{len(broken)} broken internal link(s) found.")
        return 1

    print("All internal links OK.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

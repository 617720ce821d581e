"""Mapping of page file positions to site paths and absolute URLs."""

from pathlib import PurePath


def derive_href(rel_path: str) -> str:
    """Return the site path for the page file at *rel_path*.

    ``page.md`` maps to ``/``; ``docs/installation/page.md`` maps to
    ``/docs/installation``.  Both ``/`` and ``\\`` separators are accepted.
    """
    parent = PurePath(rel_path.replace("\\", "/")).parent.as_posix().strip("/")
    if parent in ("", "."):
        return "/"
    return f"/{parent}"


def derive_url(href: str, site_url: str) -> str:
    return f"{site_url.rstrip('/')}{href}"

"""Tests for docsite.services.page_index."""

from pathlib import Path

import pytest

from docsite.models.navigation import NavGroup, NavLink
from docsite.models.page import PageRecord
from docsite.services.page_index import PageIndex, order_pages
from docsite.services.scanner import FilesystemError

SITE_URL = "https://nestledjs.com"

NAVIGATION = [
    NavGroup(
        title="Documentation",
        links=[
            NavLink(title="Getting started", href="/"),
            NavLink(title="Installation", href="/docs/installation"),
            NavLink(title="Commands", href="/docs/commands"),
        ],
    ),
]


def _record(href: str) -> PageRecord:
    return PageRecord(title=href, href=href, url=f"{SITE_URL}{href}", content="")


def _write(root: Path, rel_path: str, text: str) -> None:
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


# ---------------------------------------------------------------------------
# order_pages
# ---------------------------------------------------------------------------

class TestOrderPages:
    def test_navigation_order_then_unlisted(self):
        records = [_record(h) for h in ("/docs/commands", "/", "/docs/zzz", "/docs/installation")]
        ordered = order_pages(records, NAVIGATION)
        assert [r.href for r in ordered] == [
            "/",
            "/docs/installation",
            "/docs/commands",
            "/docs/zzz",
        ]

    def test_unlisted_pages_sorted_by_href(self):
        records = [_record(h) for h in ("/docs/c", "/docs/a", "/docs/b")]
        ordered = order_pages(records, NAVIGATION)
        assert [r.href for r in ordered] == ["/docs/a", "/docs/b", "/docs/c"]

    def test_groups_flattened_in_declared_order(self):
        navigation = [
            NavGroup(title="Second", links=[NavLink(title="B", href="/b")]),
            NavGroup(
                title="First",
                links=[NavLink(title="C", href="/c"), NavLink(title="A", href="/a")],
            ),
        ]
        records = [_record(h) for h in ("/a", "/b", "/c")]
        assert [r.href for r in order_pages(records, navigation)] == ["/b", "/c", "/a"]

    def test_repeated_manifest_href_keeps_first_position(self):
        navigation = [
            NavGroup(
                title="Docs",
                links=[
                    NavLink(title="A", href="/a"),
                    NavLink(title="B", href="/b"),
                    NavLink(title="A again", href="/a"),
                ],
            ),
        ]
        records = [_record(h) for h in ("/b", "/a")]
        assert [r.href for r in order_pages(records, navigation)] == ["/a", "/b"]

    def test_manifest_entries_without_pages_are_ignored(self):
        records = [_record("/docs/commands")]
        assert [r.href for r in order_pages(records, NAVIGATION)] == ["/docs/commands"]

    def test_empty_navigation(self):
        records = [_record(h) for h in ("/b", "/", "/a")]
        assert [r.href for r in order_pages(records, [])] == ["/", "/a", "/b"]

    def test_empty_records(self):
        assert order_pages([], NAVIGATION) == []


# ---------------------------------------------------------------------------
# PageIndex
# ---------------------------------------------------------------------------

class TestPageIndex:
    @pytest.fixture
    def content_dir(self, tmp_path):
        _write(tmp_path, "page.md", "---\ntitle: Getting started\n---\nWelcome.")
        _write(tmp_path, "docs/commands/page.md", "---\ntitle: Commands\n---\nRun things.")
        _write(tmp_path, "docs/installation/page.md", "---\ntitle: Installation\n---\nInstall.")
        _write(tmp_path, "docs/zzz/page.md", "No frontmatter here.")
        return tmp_path

    def test_builds_ordered_records(self, content_dir):
        pages = PageIndex(content_dir, SITE_URL, NAVIGATION).pages()
        assert [p.href for p in pages] == [
            "/",
            "/docs/installation",
            "/docs/commands",
            "/docs/zzz",
        ]

    def test_record_fields(self, content_dir):
        pages = PageIndex(content_dir, SITE_URL, NAVIGATION).pages()
        install = pages[1]
        assert install.title == "Installation"
        assert install.url == "https://nestledjs.com/docs/installation"
        assert install.content == "Install."
        assert install.last_modified is not None

    def test_root_url(self, content_dir):
        pages = PageIndex(content_dir, SITE_URL + "/", NAVIGATION).pages()
        assert pages[0].url == "https://nestledjs.com/"

    def test_page_without_frontmatter(self, content_dir):
        pages = PageIndex(content_dir, SITE_URL, NAVIGATION).pages()
        assert pages[-1].title == ""
        assert pages[-1].content == "No frontmatter here."

    def test_hrefs_are_unique(self, content_dir):
        pages = PageIndex(content_dir, SITE_URL, NAVIGATION).pages()
        hrefs = [p.href for p in pages]
        assert len(hrefs) == len(set(hrefs))

    def test_repeat_calls_are_identical(self, content_dir):
        index = PageIndex(content_dir, SITE_URL, NAVIGATION)
        assert index.pages() == index.pages()

    def test_empty_tree(self, tmp_path):
        assert PageIndex(tmp_path, SITE_URL, NAVIGATION).pages() == []

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(FilesystemError):
            PageIndex(tmp_path / "missing", SITE_URL, NAVIGATION).pages()

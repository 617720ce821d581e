"""Checks on the shipped documentation content tree."""

from pathlib import Path

from docsite.config import NAVIGATION, Settings, get_settings
from docsite.services.link_checker import find_broken_links
from docsite.services.page_index import PageIndex

CONTENT_DIR = Path(__file__).resolve().parent.parent / "content"


def _pages():
    return PageIndex(CONTENT_DIR, Settings().site_url, NAVIGATION).pages()


class TestShippedContent:
    def test_no_broken_internal_links(self):
        assert find_broken_links(CONTENT_DIR) == []

    def test_every_navigation_entry_has_a_page(self):
        hrefs = {p.href for p in _pages()}
        for group in NAVIGATION:
            for link in group.links:
                assert link.href in hrefs

    def test_every_page_has_a_title(self):
        for page in _pages():
            assert page.title, page.href


class TestSettings:
    def test_content_dir_defaults_to_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.delenv("DOCSITE_CONTENT_DIR", raising=False)
        monkeypatch.chdir(tmp_path)
        assert get_settings().content_dir.resolve() == (tmp_path / "content").resolve()

    def test_content_dir_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DOCSITE_CONTENT_DIR", str(tmp_path / "docs"))
        assert get_settings().content_dir == tmp_path / "docs"

    def test_site_url_trailing_slash_stripped(self, monkeypatch):
        monkeypatch.setenv("DOCSITE_SITE_URL", "https://docs.example.com/")
        assert get_settings().site_url == "https://docs.example.com"

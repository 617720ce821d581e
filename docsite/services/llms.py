"""Plain-text documentation feeds for language-model consumers.

``llms.txt`` is a short link digest of every page; ``llms-full.txt`` holds
every page body with Markdoc tags removed.  Both are built from the ordered
page index and accept an empty page list.
"""

from typing import List, Sequence

from docsite.config import Settings
from docsite.models.page import PageRecord
from docsite.services.markdoc import strip_markdoc_tags

LLMS_FULL_PATH = "/llms-full.txt"


def _display_title(page: PageRecord) -> str:
    return page.title or page.href


def build_llms_txt(pages: Sequence[PageRecord], settings: Settings) -> str:
    """Return the ``llms.txt`` link digest."""
    lines: List[str] = [
        f"# {settings.site_name}",
        "",
        f"> {settings.site_description}",
        "",
        "## Docs",
        "",
    ]
    lines.extend(f"- [{_display_title(page)}]({page.url})" for page in pages)
    if pages:
        lines.append("")
    lines.extend(
        [
            "## Optional",
            "",
            f"- [llms-full.txt]({settings.site_url.rstrip('/')}{LLMS_FULL_PATH}): "
            "Full documentation in a single file",
        ]
    )
    return "\n".join(lines) + "\n"


def build_llms_full_txt(pages: Sequence[PageRecord], settings: Settings) -> str:
    """Return every page as one document, in page-index order."""
    sections: List[str] = [
        f"# {settings.site_name} Full Documentation\n",
        f"> {settings.site_description}\n",
    ]
    for page in pages:
        body = strip_markdoc_tags(page.content)
        sections.append(
            f"---\n\n## {_display_title(page)}\n\nSource: {page.url}\n\n{body}"
        )
    return "\n\n".join(sections)

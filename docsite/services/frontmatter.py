import re
from typing import Tuple

# Leading "---" line, metadata, closing "---" line, then the body
_FRONTMATTER_RE = re.compile(
    r"\A---[ \t]*\n(.*?)^---[ \t]*(?:\n|\Z)(.*)\Z",
    re.DOTALL | re.MULTILINE,
)

_TITLE_RE = re.compile(r"^title:[ \t]*(.*)$", re.MULTILINE)


def parse_frontmatter(raw: str) -> Tuple[str, str]:
    """Split *raw* page text into ``(title, content)``.

    Only the ``title:`` key is read from the metadata block; other keys are
    ignored.  Text without a well-formed leading block is returned whole as
    content with an empty title.
    """
    text = raw.replace("\r\n", "\n")
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return "", text

    meta, content = match.group(1), match.group(2)
    title_match = _TITLE_RE.search(meta)
    title = title_match.group(1).strip() if title_match else ""
    return title, content

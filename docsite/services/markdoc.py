"""Removal of Markdoc tag annotations for plain-text output."""

import re

# {% callout title="Note" /%}
_SELF_CLOSING_RE = re.compile(r"\{%\s*[\w-]+(?:\s[^%]*?)?\s*/%\}")

# {% callout type="warning" %} and {% /callout %}
_BLOCK_TAG_RE = re.compile(r"\{%\s*/?\s*[\w-]+(?:\s[^%]*)?\s*%\}")

# {% .lead %} or {% #intro .lead %}
_ATTRIBUTE_RE = re.compile(r"\{%\s*[.#][^%]*%\}")

_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")


def _remove_tags(content: str) -> str:
    content = _SELF_CLOSING_RE.sub("", content)
    content = _BLOCK_TAG_RE.sub("", content)
    return _ATTRIBUTE_RE.sub("", content)


def strip_markdoc_tags(content: str) -> str:
    """Remove Markdoc ``{% ... %}`` annotations from *content*.

    The text between an opening and closing tag is kept.  Removal repeats
    until nothing changes, so a tag spliced together by an earlier removal
    goes too.  Runs of blank lines collapse to one and the result is
    trimmed.  Applying the function to its own output returns it unchanged.

    Delimiters inside fenced code samples are stripped as well.
    """
    previous = None
    while previous != content:
        previous = content
        content = _remove_tags(content)

    content = _EXCESS_NEWLINES_RE.sub("\n\n", content)
    return content.strip()

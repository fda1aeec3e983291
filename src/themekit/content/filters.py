# topmark:header:start
#
#   project      : ThemeKit
#   file         : filters.py
#   file_relpath : src/themekit/content/filters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Builtin content filters."""

from __future__ import annotations

import re
from typing import Final

from themekit.content.pipeline import ContentPipeline

# A "&" that does not already start a named or numeric entity.
_BARE_AMPERSAND_RE: Final[re.Pattern[str]] = re.compile(r"&(?!#?[A-Za-z0-9]+;)")

_BLANK_LINES_RE: Final[re.Pattern[str]] = re.compile(r"\n[ \t]*\n")

_BLOCK_TAGS: Final[str] = (
    "address|article|aside|blockquote|div|dl|figure|footer|form|h[1-6]|header"
    "|hr|li|ol|p|pre|section|table|ul"
)
_BLOCK_START_RE: Final[re.Pattern[str]] = re.compile(rf"^</?(?:{_BLOCK_TAGS})\b", re.IGNORECASE)


def convert_chars(text: str) -> str:
    """Encode bare ampersands as ``&#038;``, leaving existing entities alone."""
    return _BARE_AMPERSAND_RE.sub("&#038;", text)


def autop(text: str) -> str:
    """Wrap blank-line separated blocks of text in paragraphs.

    Single newlines inside a paragraph become ``<br />``. Blocks that start with
    a block-level tag are left unwrapped.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    if not text.strip():
        return ""
    out: list[str] = []
    for block in _BLANK_LINES_RE.split(text.strip()):
        block = block.strip()
        if not block:
            continue
        if _BLOCK_START_RE.match(block):
            out.append(block)
        else:
            out.append("<p>" + "<br />\n".join(line.strip() for line in block.split("\n")) + "</p>")
    return "\n".join(out) + "\n"


def default_content_pipeline() -> ContentPipeline:
    """Return a pipeline with `convert_chars` followed by `autop`."""
    pipeline = ContentPipeline()
    pipeline.add_filter(convert_chars)
    pipeline.add_filter(autop)
    return pipeline

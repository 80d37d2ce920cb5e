"""Front matter and leading-heading detection for note content.

Only the start of a note matters for naming, so neither helper parses YAML or
Markdown; they recognize delimiter lines and heading markers and slice text.
"""

from __future__ import annotations

from autofilename.constants.parsing import (
    BYTE_ORDER_MARK,
    FRONTMATTER_CLOSE_PATTERN,
    FRONTMATTER_OPEN_PATTERN,
    HEADING_PATTERN,
    LINE_BREAK_CHARS,
)


def strip_front_matter(content: str) -> str:
    """Drop a leading ``---`` delimited block and the whitespace after it.

    Content without a closing delimiter line is returned unchanged.
    """
    text = content.lstrip(BYTE_ORDER_MARK)
    opening = FRONTMATTER_OPEN_PATTERN.match(text)
    if opening is None:
        return content

    closing = FRONTMATTER_CLOSE_PATTERN.search(text, opening.end())
    if closing is None:
        return content
    return text[closing.end() :].lstrip()


def extract_leading_heading(content: str) -> str | None:
    """Return the text of a leading ``#``..``######`` heading, or ``None``."""
    marker = HEADING_PATTERN.match(content)
    if marker is None:
        return None
    line_end = _find_line_break(content, marker.end())
    return content[marker.end() : line_end]


def _find_line_break(text: str, start: int) -> int:
    for index in range(start, len(text)):
        if text[index] in LINE_BREAK_CHARS:
            return index
    return len(text)

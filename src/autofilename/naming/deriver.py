"""Derive a filesystem-safe stem from note content."""

from __future__ import annotations

from autofilename.config.model import AutoFilenameConfig
from autofilename.constants.naming import ELLIPSIS_MARKER, FALLBACK_STEM, ILLEGAL_FILENAME_CHARS
from autofilename.constants.parsing import BYTE_ORDER_MARK, LINE_BREAK_CHARS
from autofilename.parsers import extract_leading_heading, strip_front_matter
from autofilename.utils import collapse_whitespace, is_reserved_name, strip_emoji, strip_leading_dots


def derive_stem(content: str, config: AutoFilenameConfig) -> str:
    """Return the stem a note with ``content`` should carry.

    The result never contains an illegal filename character, never starts
    with ``.`` and is ``Untitled`` when nothing usable remains. The function
    is pure: identical inputs always give identical output.
    """
    text = content.lstrip(BYTE_ORDER_MARK)

    if config.skip_front_matter:
        text = strip_front_matter(text)

    if config.use_leading_heading:
        heading = extract_leading_heading(text)
        if heading is not None:
            text = heading

    stem = _scan(text, config)

    if not config.preserve_emoji:
        stem = strip_emoji(stem)

    stem = strip_leading_dots(collapse_whitespace(stem))

    if not stem or is_reserved_name(stem):
        return FALLBACK_STEM
    return stem


def _scan(text: str, config: AutoFilenameConfig) -> str:
    """Copy legal characters up to the length limit or the first line break."""
    buffer: list[str] = []
    for index, char in enumerate(text):
        if index >= config.max_stem_length:
            return _close_truncated(buffer)

        if char in LINE_BREAK_CHARS:
            if config.stop_at_first_line:
                return _close_truncated(buffer)
            buffer.append(" ")
            continue

        if char not in ILLEGAL_FILENAME_CHARS:
            buffer.append(char)
    return "".join(buffer)


def _close_truncated(buffer: list[str]) -> str:
    return "".join(buffer).rstrip() + ELLIPSIS_MARKER

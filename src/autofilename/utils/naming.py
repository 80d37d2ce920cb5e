"""String clean-up helpers for derived stems."""

from __future__ import annotations

from autofilename.constants.naming import (
    EMOJI_PATTERN,
    LEADING_DOTS_PATTERN,
    RESERVED_DEVICE_NAMES,
    WHITESPACE_RUN_PATTERN,
)


def strip_emoji(text: str) -> str:
    """Remove emoji and pictographic code points."""
    return EMOJI_PATTERN.sub("", text)


def collapse_whitespace(text: str) -> str:
    """Trim and collapse every whitespace run to a single space."""
    return WHITESPACE_RUN_PATTERN.sub(" ", text.strip())


def strip_leading_dots(text: str) -> str:
    """Remove leading dots, including dots separated by whitespace."""
    return LEADING_DOTS_PATTERN.sub("", text)


def is_reserved_name(stem: str) -> bool:
    """Return True for Windows device names regardless of case."""
    return stem.upper() in RESERVED_DEVICE_NAMES

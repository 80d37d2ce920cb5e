"""Constants for front matter and heading detection."""

from __future__ import annotations

import re
from re import Pattern

BYTE_ORDER_MARK: str = "\ufeff"

# Opening delimiter must be the very first line.
FRONTMATTER_OPEN_PATTERN: Pattern[str] = re.compile(r"\A---[ \t]*\r?(?:\n|\Z)")
FRONTMATTER_CLOSE_PATTERN: Pattern[str] = re.compile(r"^---[ \t]*\r?$", re.MULTILINE)

HEADING_PATTERN: Pattern[str] = re.compile(r"\A#{1,6} ")
LINE_BREAK_CHARS: frozenset[str] = frozenset({"\n", "\r"})

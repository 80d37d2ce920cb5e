"""Constants for stem derivation and collision handling."""

from __future__ import annotations

import re
from re import Pattern

ILLEGAL_FILENAME_CHARS: frozenset[str] = frozenset('\\/:*?"<>|#^[]')

RESERVED_DEVICE_NAMES: frozenset[str] = frozenset(
    {"CON", "PRN", "AUX", "NUL"}
    | {f"COM{digit}" for digit in range(10)}
    | {f"LPT{digit}" for digit in range(10)}
)

FALLBACK_STEM: str = "Untitled"
ELLIPSIS_MARKER: str = "..."

EMOJI_PATTERN: Pattern[str] = re.compile(
    "["
    "\u2300-\u23ff"  # misc technical (watch, hourglass, media keys)
    "\u2600-\u27bf"  # misc symbols, dingbats
    "\u2b00-\u2bff"  # misc symbols and arrows (stars, squares)
    "\ue000-\uf8ff"  # private use area
    "\ufe0f"  # variation selector 16
    "\u200d"  # zero width joiner
    "\u20e3"  # combining enclosing keycap
    "\U0001f000-\U0001faff"
    "]"
)
WHITESPACE_RUN_PATTERN: Pattern[str] = re.compile(r"\s+")
LEADING_DOTS_PATTERN: Pattern[str] = re.compile(r"\A[.\s]+")

DUPLICATE_SUFFIX_TEMPLATE: str = "{stem} ({counter})"
FIRST_DUPLICATE_COUNTER: int = 2
MAX_DISAMBIGUATION_ATTEMPTS: int = 5000

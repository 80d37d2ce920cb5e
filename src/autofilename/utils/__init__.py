"""Shared utility helpers."""

from __future__ import annotations

from .naming import collapse_whitespace, is_reserved_name, strip_emoji, strip_leading_dots

__all__ = ["collapse_whitespace", "is_reserved_name", "strip_emoji", "strip_leading_dots"]

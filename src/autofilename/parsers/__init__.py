"""Lightweight Markdown prefix parsing."""

from __future__ import annotations

from .markdown import extract_leading_heading, strip_front_matter

__all__ = ["extract_leading_heading", "strip_front_matter"]

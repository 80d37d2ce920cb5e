"""CLI branding strings."""

from __future__ import annotations

CLI_DESCRIPTION: str = (
    "Name Markdown notes after their own content.\n\n"
    "Notes inside the watched folders are renamed from their leading heading or\n"
    "first characters, skipping YAML front matter and avoiding name collisions."
)

"""Root exception type."""

from __future__ import annotations


class AutoFilenameError(Exception):
    """Base class for all autofilename errors."""

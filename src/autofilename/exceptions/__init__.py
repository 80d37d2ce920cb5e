"""Shared exception hierarchy for autofilename."""

from __future__ import annotations

from .base import AutoFilenameError
from .config import ConfigError
from .storage import NameCollisionExhausted, StorageFailure

__all__ = [
    "AutoFilenameError",
    "ConfigError",
    "NameCollisionExhausted",
    "StorageFailure",
]

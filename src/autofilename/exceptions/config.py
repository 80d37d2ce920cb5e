"""Configuration-related exceptions."""

from __future__ import annotations

from autofilename.exceptions.base import AutoFilenameError


class ConfigError(AutoFilenameError, ValueError):
    """Raised when a configuration file or a configuration edit is invalid."""

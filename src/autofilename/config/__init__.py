"""Configuration loading, validation, editing and persistence.

This package facade re-exports the public names so callers can use
``from autofilename.config import ...``.
"""

from __future__ import annotations

from autofilename.config.editor import apply_setting, parse_setting_value
from autofilename.config.loader import build_config, load_config, save_config
from autofilename.config.model import AutoFilenameConfig
from autofilename.config.validator import _suggest_key, validate_config_file

__all__ = [
    "AutoFilenameConfig",
    "_suggest_key",
    "apply_setting",
    "build_config",
    "load_config",
    "parse_setting_value",
    "save_config",
    "validate_config_file",
]

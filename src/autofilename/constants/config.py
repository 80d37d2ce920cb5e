"""Configuration defaults, bounds and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "autofilename.yaml"
ROOT_CONTAINER: str = "/"

DEFAULT_MAX_STEM_LENGTH: int = 50
MIN_STEM_LENGTH: int = 10
MAX_STEM_LENGTH: int = 100

DEFAULT_DEBOUNCE_INTERVAL_MS: int = 500
DEFAULT_EXTENSION: str = ".md"

CONFIG_TEMP_PREFIX: str = ".autofilename-"
CONFIG_TEMP_SUFFIX: str = ".yaml.tmp"

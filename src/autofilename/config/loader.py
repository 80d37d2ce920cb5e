"""Config loading, normalization and persistence."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from autofilename.config.model import AutoFilenameConfig
from autofilename.constants.config import (
    CONFIG_FILENAME,
    CONFIG_TEMP_PREFIX,
    CONFIG_TEMP_SUFFIX,
    DEFAULT_DEBOUNCE_INTERVAL_MS,
    DEFAULT_EXTENSION,
    DEFAULT_MAX_STEM_LENGTH,
    MAX_STEM_LENGTH,
    MIN_STEM_LENGTH,
    ROOT_CONTAINER,
)
from autofilename.constants.validation import ALLOWED_CONFIG_KEYS
from autofilename.exceptions import ConfigError
from autofilename.io import write_text_atomic

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> AutoFilenameConfig:
    """Load and validate settings from ``autofilename.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No config file at %s, using defaults", path)
        return AutoFilenameConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    return build_config(raw)


def build_config(raw: dict[str, Any]) -> AutoFilenameConfig:
    """Build a config from a raw mapping, raising ``ConfigError`` on the first problem."""
    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    max_stem_length = raw.get("max_stem_length", DEFAULT_MAX_STEM_LENGTH)
    if isinstance(max_stem_length, bool) or not isinstance(max_stem_length, int):
        raise ConfigError("max_stem_length must be an integer")
    if not MIN_STEM_LENGTH <= max_stem_length <= MAX_STEM_LENGTH:
        raise ConfigError(
            f"max_stem_length must be between {MIN_STEM_LENGTH} and {MAX_STEM_LENGTH}, got {max_stem_length}"
        )

    debounce_interval_ms = raw.get("debounce_interval_ms", DEFAULT_DEBOUNCE_INTERVAL_MS)
    if isinstance(debounce_interval_ms, bool) or not isinstance(debounce_interval_ms, int):
        raise ConfigError("debounce_interval_ms must be an integer")
    if debounce_interval_ms < 0:
        raise ConfigError(f"debounce_interval_ms must be zero or positive, got {debounce_interval_ms}")

    extension = raw.get("extension", DEFAULT_EXTENSION)
    if not isinstance(extension, str) or not extension.startswith(".") or len(extension) < 2:
        raise ConfigError("extension must be a string such as '.md'")

    return AutoFilenameConfig(
        watched_containers=normalize_containers(
            _ensure_string_list(raw.get("watched_containers", []), "watched_containers")
        ),
        include_subcontainers=_ensure_bool(raw, "include_subcontainers", False),
        max_stem_length=max_stem_length,
        debounce_interval_ms=debounce_interval_ms,
        use_leading_heading=_ensure_bool(raw, "use_leading_heading", True),
        stop_at_first_line=_ensure_bool(raw, "stop_at_first_line", False),
        skip_front_matter=_ensure_bool(raw, "skip_front_matter", True),
        preserve_emoji=_ensure_bool(raw, "preserve_emoji", True),
        extension=extension,
    )


def save_config(config: AutoFilenameConfig, path: Path) -> None:
    """Persist the config as YAML, replacing ``path`` atomically."""
    text = yaml.safe_dump(config.to_dict(), sort_keys=False, allow_unicode=True)
    write_text_atomic(path=path, text=text, temp_prefix=CONFIG_TEMP_PREFIX, temp_suffix=CONFIG_TEMP_SUFFIX)
    logger.debug("Saved config to %s", path)


def normalize_containers(containers: list[str]) -> tuple[str, ...]:
    """Strip, drop empties, collapse root spellings to ``/`` and deduplicate in order."""
    normalized: list[str] = []
    for raw in containers:
        value = raw.strip()
        if not value:
            continue
        trimmed = value.strip("/")
        normalized.append(trimmed or ROOT_CONTAINER)
    return tuple(dict.fromkeys(normalized))


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _ensure_bool(raw: dict[str, Any], key_name: str, default: bool) -> bool:
    value = raw.get(key_name, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{key_name} must be a boolean")
    return value

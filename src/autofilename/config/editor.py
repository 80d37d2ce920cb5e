"""Validated edit boundary for persisted settings.

An edit either yields a complete new :class:`AutoFilenameConfig` or raises
:class:`ConfigError`; the caller keeps its prior config in the latter case,
so an out-of-range value never reaches the rename path.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import yaml

from autofilename.config.loader import build_config
from autofilename.config.model import AutoFilenameConfig
from autofilename.config.validator import _suggest_key
from autofilename.constants.validation import ALLOWED_CONFIG_KEYS, LIST_OF_STRINGS_KEYS, STRING_KEYS
from autofilename.exceptions import ConfigError

logger = logging.getLogger(__name__)


def apply_setting(config: AutoFilenameConfig, key: str, value: Any) -> AutoFilenameConfig:
    """Return a copy of ``config`` with ``key`` set to ``value``."""
    if key not in ALLOWED_CONFIG_KEYS:
        hint = _suggest_key(key, ALLOWED_CONFIG_KEYS)
        raise ConfigError(f"Unknown setting `{key}`" + (f" ({hint})" if hint else ""))

    raw = config.to_dict()
    raw[key] = value
    updated = build_config(raw)
    logger.debug("Setting %s updated to %r", key, getattr(updated, key))
    return updated


def parse_setting_value(key: str, values: Sequence[str]) -> Any:
    """Convert command-line strings into the value type a setting expects.

    List settings take every value (newline-separated entries are split, as
    in a multi-line text box); scalar settings take exactly one value, which
    is parsed as a YAML scalar so ``true``/``50`` become ``bool``/``int``.
    """
    if key in LIST_OF_STRINGS_KEYS:
        return [entry for value in values for entry in value.splitlines()]
    if len(values) != 1:
        raise ConfigError(f"Setting `{key}` takes exactly one value, got {len(values)}")
    if key in STRING_KEYS:
        return values[0]
    try:
        return yaml.safe_load(values[0])
    except yaml.YAMLError as exc:
        raise ConfigError(f"Cannot parse value for `{key}`: {exc}") from exc

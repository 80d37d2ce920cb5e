"""Collect-all validation of ``autofilename.yaml``.

``load_config`` stops at the first bad value; this module instead reports
every problem in the file at once, each tagged with a stable CFG code, so
``autofilename validate-config`` can list them together.
"""

from __future__ import annotations

import difflib
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from autofilename.constants.config import CONFIG_FILENAME, MAX_STEM_LENGTH, MIN_STEM_LENGTH
from autofilename.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    BOOLEAN_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    LIST_OF_STRINGS_KEYS,
    STRING_KEYS,
)
from autofilename.exceptions.validation import ValidationError

FieldCheck = Callable[[str, str, Any], ValidationError | None]


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Return every problem found in the config file; never raises.

    A missing default file is fine (defaults apply). A missing file passed
    explicitly is reported as CFG001 when ``config_explicit`` is set.
    """
    path = config_path.resolve() if config_path else root.resolve() / CONFIG_FILENAME
    source = str(path)

    if not path.exists():
        if not config_explicit:
            return []
        return [ValidationError(CFG001, source, "", "config file not found")]

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        return [ValidationError(CFG002, source, "", f"invalid YAML: {exc}")]

    if raw is None:
        return []
    if not isinstance(raw, dict):
        return [
            ValidationError(CFG003, source, "", f"config must be a YAML mapping, got {type(raw).__name__}"),
        ]

    errors: list[ValidationError] = []
    for key in sorted(raw, key=str):
        check = _FIELD_CHECKS.get(key)
        if check is None:
            name = str(key)
            errors.append(
                ValidationError(CFG004, source, name, "unknown key", hint=_suggest_key(name, ALLOWED_CONFIG_KEYS))
            )
            continue
        problem = check(source, key, raw[key])
        if problem is not None:
            errors.append(problem)
    return errors


def _check_boolean(source: str, key: str, value: Any) -> ValidationError | None:
    if isinstance(value, bool):
        return None
    return ValidationError(CFG005, source, key, f"expected a boolean, got {value!r}")


def _check_string_list(source: str, key: str, value: Any) -> ValidationError | None:
    if value is None:
        return None
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return None
    return ValidationError(CFG005, source, key, "expected a list of folder paths")


def _check_extension(source: str, key: str, value: Any) -> ValidationError | None:
    if isinstance(value, str) and value.startswith(".") and len(value) > 1:
        return None
    return ValidationError(CFG005, source, key, f"expected an extension such as '.md', got {value!r}")


def _check_stem_length(source: str, key: str, value: Any) -> ValidationError | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return ValidationError(CFG005, source, key, f"expected an integer, got {value!r}")
    if not MIN_STEM_LENGTH <= value <= MAX_STEM_LENGTH:
        return ValidationError(
            CFG006,
            source,
            key,
            f"{value} is outside the allowed range",
            hint=f"use a value from {MIN_STEM_LENGTH} to {MAX_STEM_LENGTH}",
        )
    return None


def _check_debounce(source: str, key: str, value: Any) -> ValidationError | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return ValidationError(CFG005, source, key, f"expected a number of milliseconds, got {value!r}")
    if value < 0:
        return ValidationError(CFG006, source, key, f"{value} is negative", hint="use 0 to rename immediately")
    return None


_FIELD_CHECKS: dict[str, FieldCheck] = {
    **{key: _check_boolean for key in BOOLEAN_KEYS},
    **{key: _check_string_list for key in LIST_OF_STRINGS_KEYS},
    **{key: _check_extension for key in STRING_KEYS},
    "max_stem_length": _check_stem_length,
    "debounce_interval_ms": _check_debounce,
}


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""

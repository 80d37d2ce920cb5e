"""Config validation codes and allowed-key registries."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit path)
CFG002: str = "CFG002"  # invalid YAML
CFG003: str = "CFG003"  # config root is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # wrong type
CFG006: str = "CFG006"  # value out of range

BOOLEAN_KEYS: frozenset[str] = frozenset(
    {
        "include_subcontainers",
        "use_leading_heading",
        "stop_at_first_line",
        "skip_front_matter",
        "preserve_emoji",
    }
)
INTEGER_KEYS: frozenset[str] = frozenset({"max_stem_length", "debounce_interval_ms"})
LIST_OF_STRINGS_KEYS: frozenset[str] = frozenset({"watched_containers"})
STRING_KEYS: frozenset[str] = frozenset({"extension"})

ALLOWED_CONFIG_KEYS: frozenset[str] = BOOLEAN_KEYS | INTEGER_KEYS | LIST_OF_STRINGS_KEYS | STRING_KEYS

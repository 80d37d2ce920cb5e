"""Config data model for autofilename."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from autofilename.constants.config import (
    DEFAULT_DEBOUNCE_INTERVAL_MS,
    DEFAULT_EXTENSION,
    DEFAULT_MAX_STEM_LENGTH,
)


@dataclass(frozen=True)
class AutoFilenameConfig:
    """Resolved rename settings, immutable for the duration of an operation."""

    watched_containers: tuple[str, ...] = ()
    include_subcontainers: bool = False
    max_stem_length: int = DEFAULT_MAX_STEM_LENGTH
    debounce_interval_ms: int = DEFAULT_DEBOUNCE_INTERVAL_MS
    use_leading_heading: bool = True
    stop_at_first_line: bool = False
    skip_front_matter: bool = True
    preserve_emoji: bool = True
    extension: str = DEFAULT_EXTENSION

    @property
    def debounce_seconds(self) -> float:
        """Debounce interval converted for ``asyncio.sleep``."""
        return self.debounce_interval_ms / 1000

    def to_dict(self) -> dict[str, Any]:
        """Return the YAML-serializable mapping persisted to disk."""
        return {
            "watched_containers": list(self.watched_containers),
            "include_subcontainers": self.include_subcontainers,
            "max_stem_length": self.max_stem_length,
            "debounce_interval_ms": self.debounce_interval_ms,
            "use_leading_heading": self.use_leading_heading,
            "stop_at_first_line": self.stop_at_first_line,
            "skip_front_matter": self.skip_front_matter,
            "preserve_emoji": self.preserve_emoji,
            "extension": self.extension,
        }

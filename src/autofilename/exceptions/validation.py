"""Config problems reported by the collect-all validator."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """One problem found in a config file.

    Not an exception: the validator gathers every problem in a file before
    anything is reported, so callers receive a list of these.
    """

    code: str
    path: str
    field: str
    message: str
    hint: str = ""

    def __str__(self) -> str:
        location = f"{self.path} ({self.field})" if self.field else self.path
        line = f"[{self.code}] {location}: {self.message}"
        return f"{line}; {self.hint}" if self.hint else line


def format_errors(errors: Iterable[ValidationError]) -> str:
    """Render problems one per line, grouped by file and ordered by field then code."""
    ordered = sorted(errors, key=lambda error: (error.path, error.field, error.code))
    return "\n".join(str(error) for error in ordered)

"""Document, outcome and bookkeeping records shared across the package."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePosixPath

from autofilename.constants.config import ROOT_CONTAINER


@dataclass(frozen=True)
class Document:
    """A note addressed by its POSIX path relative to the notes root."""

    path: str

    @property
    def container(self) -> str:
        """Folder holding the document; ``/`` for the root folder."""
        parent = PurePosixPath(self.path).parent.as_posix()
        return ROOT_CONTAINER if parent in {".", "/", ""} else parent

    @property
    def stem(self) -> str:
        return PurePosixPath(self.path).stem

    @property
    def extension(self) -> str:
        return PurePosixPath(self.path).suffix


class RenameStatus(str, Enum):
    """Result classes reported by ``RenameCoordinator.maybe_rename``."""

    RENAMED = "renamed"
    UNCHANGED = "unchanged"
    SCHEDULED = "scheduled"
    INELIGIBLE = "ineligible"


@dataclass(frozen=True)
class RenameOutcome:
    """What happened to one document."""

    status: RenameStatus
    path: str
    new_path: str | None = None

    @classmethod
    def renamed(cls, path: str, new_path: str) -> RenameOutcome:
        return cls(RenameStatus.RENAMED, path, new_path)

    @classmethod
    def unchanged(cls, path: str) -> RenameOutcome:
        return cls(RenameStatus.UNCHANGED, path)


@dataclass
class PendingOperation:
    """Debounce bookkeeping for one document path."""

    path: str
    document: Document
    due_time: float
    generation: int
    task: asyncio.Task[None] | None = None


@dataclass
class BatchSummary:
    """Counts reported after a rename-all run."""

    attempted: int = 0
    renamed: int = 0
    unchanged: int = 0
    failures: dict[str, str] = field(default_factory=dict)

    @property
    def failed(self) -> int:
        return len(self.failures)

    def message(self) -> str:
        """Render the user-facing summary line."""
        return f"Renamed {self.renamed}/{self.attempted} files."

    def to_dict(self) -> dict[str, object]:
        return {
            "attempted": self.attempted,
            "renamed": self.renamed,
            "unchanged": self.unchanged,
            "failed": self.failed,
            "failures": dict(sorted(self.failures.items())),
        }

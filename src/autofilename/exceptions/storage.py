"""Storage-related exceptions."""

from __future__ import annotations

from autofilename.exceptions.base import AutoFilenameError


class StorageFailure(AutoFilenameError):
    """Raised when the document store cannot read, probe or rename a document."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class NameCollisionExhausted(StorageFailure):
    """Raised when no free ``"{stem} (n)"`` name is found within the attempt cap."""

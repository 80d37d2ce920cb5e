"""Document storage collaborators."""

from __future__ import annotations

from .base import DocumentCallback, DocumentStore, NotificationSource, Unsubscribe
from .local import LocalFolderStore
from .watcher import FolderWatcher

__all__ = [
    "DocumentCallback",
    "DocumentStore",
    "FolderWatcher",
    "LocalFolderStore",
    "NotificationSource",
    "Unsubscribe",
]

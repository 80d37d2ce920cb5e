"""Interfaces the rename core consumes from its host."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from autofilename.model import Document

DocumentCallback = Callable[[Document], None]
Unsubscribe = Callable[[], None]


class DocumentStore(ABC):
    """Read, probe, list and rename documents owned by the host."""

    @abstractmethod
    async def read_content(self, document: Document) -> str:
        """Return the current text of ``document``; may be slightly stale."""

    @abstractmethod
    async def path_exists(self, path: str) -> bool:
        """Return True when some document or folder occupies ``path``."""

    @abstractmethod
    async def rename_to(self, document: Document, new_path: str) -> None:
        """Move ``document`` to ``new_path``, raising ``StorageFailure`` on error."""

    @abstractmethod
    def list_documents(self, container: str, *, recursive: bool = False) -> list[Document]:
        """Return documents in ``container`` (and below it when ``recursive``)."""


class NotificationSource(ABC):
    """Subscription point for document change and open notifications."""

    @abstractmethod
    def on_document_changed(self, callback: DocumentCallback) -> Unsubscribe:
        """Call ``callback`` whenever a document is created or edited."""

    @abstractmethod
    def on_document_opened(self, callback: DocumentCallback) -> Unsubscribe:
        """Call ``callback`` whenever a document is opened."""

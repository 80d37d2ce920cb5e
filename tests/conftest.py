"""Shared pytest fixtures and in-memory collaborators for rename tests."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

import pytest

from autofilename.config import AutoFilenameConfig
from autofilename.exceptions import StorageFailure
from autofilename.model import Document
from autofilename.storage import DocumentCallback, DocumentStore, NotificationSource, Unsubscribe


class MemoryStore(DocumentStore):
    """Document store over a dict of path -> content.

    Every async method yields to the loop once, so concurrent renames
    interleave the way they do against real storage.
    """

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})
        self.renames: list[tuple[str, str]] = []
        self.reads: list[str] = []
        self.fail_reads: set[str] = set()
        self.fail_renames: set[str] = set()

    async def read_content(self, document: Document) -> str:
        await asyncio.sleep(0)
        self.reads.append(document.path)
        if document.path in self.fail_reads or document.path not in self.files:
            raise StorageFailure(f"Cannot read {document.path}", path=document.path)
        return self.files[document.path]

    async def path_exists(self, path: str) -> bool:
        await asyncio.sleep(0)
        return path in self.files

    async def rename_to(self, document: Document, new_path: str) -> None:
        await asyncio.sleep(0)
        if document.path in self.fail_renames:
            raise StorageFailure(f"Cannot rename {document.path}", path=document.path)
        if new_path in self.files:
            raise StorageFailure(f"Refusing to overwrite existing {new_path}", path=document.path)
        self.files[new_path] = self.files.pop(document.path)
        self.renames.append((document.path, new_path))

    def list_documents(self, container: str, *, recursive: bool = False) -> list[Document]:
        documents = []
        for path in sorted(self.files):
            parent = Document(path).container
            if parent == container or (recursive and (container == "/" or parent.startswith(f"{container}/"))):
                documents.append(Document(path))
        return documents


class ManualNotifier(NotificationSource):
    """Notification source driven by the test itself."""

    def __init__(self) -> None:
        self.changed: list[DocumentCallback] = []
        self.opened: list[DocumentCallback] = []

    def on_document_changed(self, callback: DocumentCallback) -> Unsubscribe:
        return self._subscribe(self.changed, callback)

    def on_document_opened(self, callback: DocumentCallback) -> Unsubscribe:
        return self._subscribe(self.opened, callback)

    def emit_changed(self, document: Document) -> None:
        for callback in list(self.changed):
            callback(document)

    def _subscribe(self, registry: list[DocumentCallback], callback: DocumentCallback) -> Callable[[], None]:
        registry.append(callback)
        return lambda: registry.remove(callback)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def notifier() -> ManualNotifier:
    return ManualNotifier()


@pytest.fixture
def config() -> AutoFilenameConfig:
    """Root folder watched, renames applied immediately."""
    return AutoFilenameConfig(watched_containers=("/",), debounce_interval_ms=0)

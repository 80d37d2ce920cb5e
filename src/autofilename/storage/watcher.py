"""Filesystem notifications for a :class:`LocalFolderStore` via watchdog."""

from __future__ import annotations

import asyncio
import logging
import os
import threading
from contextlib import suppress
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

from autofilename.storage.base import DocumentCallback, NotificationSource, Unsubscribe
from autofilename.storage.local import LocalFolderStore

logger = logging.getLogger(__name__)


class FolderWatcher(NotificationSource):
    """Report created, modified and opened notes to subscribers on ``loop``.

    watchdog delivers events on its observer thread; callbacks are always
    invoked on the event loop through ``call_soon_threadsafe``.
    """

    def __init__(self, store: LocalFolderStore, loop: asyncio.AbstractEventLoop) -> None:
        self._store = store
        self._loop = loop
        self._lock = threading.Lock()
        self._changed: list[DocumentCallback] = []
        self._opened: list[DocumentCallback] = []
        self._observer: BaseObserver | None = None

    def on_document_changed(self, callback: DocumentCallback) -> Unsubscribe:
        return self._subscribe(self._changed, callback)

    def on_document_opened(self, callback: DocumentCallback) -> Unsubscribe:
        return self._subscribe(self._opened, callback)

    @property
    def running(self) -> bool:
        return self._observer is not None

    def start(self) -> None:
        """Start observing the store root recursively."""
        if self._observer is not None:
            return
        observer = Observer()
        observer.schedule(_NoteEventHandler(self), str(self._store.root), recursive=True)
        observer.start()
        self._observer = observer
        logger.info("Watching %s for %s changes", self._store.root, self._store.extension)

    def stop(self) -> None:
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join()
        self._observer = None
        logger.info("Stopped watching %s", self._store.root)

    def dispatch(self, kind: str, src_path: str | bytes) -> None:
        """Forward a raw filesystem event for ``src_path`` to subscribers."""
        document = self._store.document_for(Path(os.fsdecode(src_path)))
        if document is None:
            return

        with self._lock:
            callbacks = list(self._changed if kind == "changed" else self._opened)
        logger.debug("Document %s: %s", kind, document.path)
        for callback in callbacks:
            self._loop.call_soon_threadsafe(callback, document)

    def _subscribe(self, registry: list[DocumentCallback], callback: DocumentCallback) -> Unsubscribe:
        with self._lock:
            registry.append(callback)

        def unsubscribe() -> None:
            with self._lock, suppress(ValueError):
                registry.remove(callback)

        return unsubscribe


class _NoteEventHandler(FileSystemEventHandler):
    """Translate watchdog file events into watcher dispatches."""

    def __init__(self, watcher: FolderWatcher) -> None:
        super().__init__()
        self._watcher = watcher

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._watcher.dispatch("changed", event.src_path)

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._watcher.dispatch("changed", event.src_path)

    def on_opened(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._watcher.dispatch("opened", event.src_path)

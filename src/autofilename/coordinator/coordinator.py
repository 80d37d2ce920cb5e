"""Decide when to rename a note, pick a free name and commit it.

``RenameCoordinator`` is the stateful half of autofilename. It owns the
per-path debounce timers for automatic renames and the set of destination
paths claimed by renames that have not committed yet. Every rename, batch
or automatic, claims through that set, so two overlapping renames never
pick the same free name. Both live on the instance, so independent
coordinators never share timers or reservations.
"""

from __future__ import annotations

import asyncio
import logging

from autofilename.config.model import AutoFilenameConfig
from autofilename.coordinator.debounce import Debouncer
from autofilename.coordinator.eligibility import is_in_watched_container
from autofilename.coordinator.reservations import ReservedPathSet
from autofilename.exceptions import AutoFilenameError, StorageFailure
from autofilename.model import BatchSummary, Document, RenameOutcome, RenameStatus
from autofilename.naming import derive_stem, resolve_destination
from autofilename.storage.base import DocumentStore, NotificationSource, Unsubscribe

logger = logging.getLogger(__name__)


class RenameCoordinator:
    """Apply content-derived names to notes in the watched folders."""

    def __init__(self, store: DocumentStore, config: AutoFilenameConfig) -> None:
        self._store = store
        self._config = config
        self._debouncer = Debouncer(self._rename_in_background)
        self._background: set[asyncio.Task[None]] = set()
        self._in_flight = ReservedPathSet()

    @property
    def config(self) -> AutoFilenameConfig:
        return self._config

    def update_config(self, config: AutoFilenameConfig) -> None:
        """Use ``config`` for every operation that starts from now on."""
        self._config = config

    def is_eligible(self, document: Document) -> bool:
        return is_in_watched_container(document.container, self._config)

    def pending_paths(self) -> tuple[str, ...]:
        return self._debouncer.pending_paths()

    async def maybe_rename(self, document: Document, immediate: bool = False) -> RenameOutcome:
        """Rename ``document`` now, or arm its debounce timer.

        Raises:
            StorageFailure: when reading, probing or renaming fails.
        """
        if not self.is_eligible(document):
            logger.debug("Skipping %s: not in a watched folder", document.path)
            return RenameOutcome(RenameStatus.INELIGIBLE, document.path)

        if not immediate and self._config.debounce_interval_ms > 0:
            self._debouncer.schedule(document, self._config.debounce_seconds)
            return RenameOutcome(RenameStatus.SCHEDULED, document.path)

        self._debouncer.cancel(document.path)
        return await self._rename_now(document)

    def handle_document_changed(self, document: Document) -> None:
        """Notification handler: debounce or start a rename without blocking the caller.

        Must run on the event loop thread. Failures are logged, never raised.
        """
        if not self.is_eligible(document):
            return

        if self._config.debounce_interval_ms > 0:
            self._debouncer.schedule(document, self._config.debounce_seconds)
            return

        task = asyncio.get_running_loop().create_task(self._rename_in_background(document))
        self._background.add(task)
        task.add_done_callback(self._background.discard)

    def attach(self, source: NotificationSource) -> Unsubscribe:
        """Subscribe to change notifications from ``source``."""
        return source.on_document_changed(self.handle_document_changed)

    def collect_documents(self) -> list[Document]:
        """List the documents of every watched folder, without duplicates."""
        found: dict[str, Document] = {}
        for container in self._config.watched_containers:
            for document in self._store.list_documents(container, recursive=self._config.include_subcontainers):
                found.setdefault(document.path, document)
        return list(found.values())

    async def rename_all(self, documents: list[Document] | None = None) -> BatchSummary:
        """Rename every eligible document concurrently and report the counts.

        One document failing does not stop the others; its error is recorded
        in ``BatchSummary.failures``.
        """
        if documents is None:
            documents = self.collect_documents()
        batch = [document for document in dict.fromkeys(documents) if self.is_eligible(document)]

        summary = BatchSummary(attempted=len(batch))
        if not batch:
            logger.info("No documents to rename")
            return summary

        for document in batch:
            self._debouncer.cancel(document.path)

        logger.info("Renaming %d documents", len(batch))
        unfulfilled: list[str] = []
        try:
            results = await asyncio.gather(*(self._rename_isolated(document, unfulfilled) for document in batch))
        finally:
            # Claims of failed renames stay held until the whole batch is done.
            for path in unfulfilled:
                self._in_flight.release(path)

        for document, result in zip(batch, results):
            if isinstance(result, Exception):
                summary.failures[document.path] = str(result) or type(result).__name__
            elif result.status is RenameStatus.RENAMED:
                summary.renamed += 1
            else:
                summary.unchanged += 1

        logger.info(summary.message())
        return summary

    async def aclose(self) -> None:
        """Cancel pending timers and wait for renames that already started."""
        await self._debouncer.cancel_all()
        await self._debouncer.join()
        if self._background:
            await asyncio.gather(*self._background, return_exceptions=True)

    async def _rename_isolated(self, document: Document, unfulfilled: list[str]) -> RenameOutcome | Exception:
        try:
            return await self._rename_now(document, unfulfilled)
        except AutoFilenameError as exc:
            logger.warning("Failed to rename %s: %s", document.path, exc)
            return exc
        except Exception as exc:
            logger.exception("Unexpected error renaming %s", document.path)
            return exc

    async def _rename_in_background(self, document: Document) -> None:
        try:
            await self._rename_now(document)
        except AutoFilenameError as exc:
            logger.error("Automatic rename of %s failed: %s", document.path, exc)
        except Exception:
            logger.exception("Unexpected error during automatic rename of %s", document.path)

    async def _rename_now(self, document: Document, unfulfilled: list[str] | None = None) -> RenameOutcome:
        """Derive, claim and commit a new name for ``document``.

        The destination stays claimed in the in-flight set until ``rename_to``
        returns; after that the file itself occupies the path. A batch passes
        ``unfulfilled`` to keep the claims of failed renames until it ends.
        """
        config = self._config
        destination: str | None = None
        committed = False
        try:
            content = await self._store.read_content(document)
            stem = derive_stem(content, config)
            destination = await resolve_destination(document, stem, self._store, self._in_flight)
            if destination is None:
                logger.debug("%s already named after its content", document.path)
                return RenameOutcome.unchanged(document.path)
            await self._store.rename_to(document, destination)
            committed = True
        except OSError as exc:
            raise StorageFailure(f"Storage error for {document.path}: {exc}", path=document.path) from exc
        finally:
            if destination is not None:
                if committed or unfulfilled is None:
                    self._in_flight.release(destination)
                else:
                    unfulfilled.append(destination)

        return RenameOutcome.renamed(document.path, destination)

"""Trailing-edge debounce keyed by document path."""

from __future__ import annotations

import asyncio
import itertools
import logging
from collections.abc import Awaitable, Callable

from autofilename.model import Document, PendingOperation

logger = logging.getLogger(__name__)


class Debouncer:
    """Run ``action`` once per path, ``delay`` seconds after the last request.

    A new request for a path cancels and replaces that path's timer; other
    paths are unaffected. The pending entry is dropped before ``action``
    starts, so a request arriving mid-action arms a fresh timer instead of
    cancelling work already in progress.
    """

    def __init__(self, action: Callable[[Document], Awaitable[None]]) -> None:
        self._action = action
        self._pending: dict[str, PendingOperation] = {}
        self._generations = itertools.count(1)
        self._inflight: set[asyncio.Task[None]] = set()

    def schedule(self, document: Document, delay: float) -> PendingOperation:
        """Arm (or re-arm) the timer for ``document.path``."""
        loop = asyncio.get_running_loop()
        self.cancel(document.path)

        operation = PendingOperation(
            path=document.path,
            document=document,
            due_time=loop.time() + delay,
            generation=next(self._generations),
        )
        operation.task = loop.create_task(self._fire_after(operation, delay))
        self._pending[document.path] = operation
        logger.debug("Scheduled %s (generation %d) in %.3fs", document.path, operation.generation, delay)
        return operation

    def cancel(self, path: str) -> bool:
        """Cancel the pending timer for ``path``; return True if one existed."""
        operation = self._pending.pop(path, None)
        if operation is None:
            return False
        if operation.task is not None:
            operation.task.cancel()
        logger.debug("Cancelled pending rename of %s (generation %d)", path, operation.generation)
        return True

    async def cancel_all(self) -> None:
        """Cancel every pending timer and wait for the tasks to finish."""
        operations = list(self._pending.values())
        self._pending.clear()
        tasks = [operation.task for operation in operations if operation.task is not None]
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    async def join(self) -> None:
        """Wait for actions that already started; pending timers are left alone."""
        if self._inflight:
            await asyncio.gather(*self._inflight, return_exceptions=True)

    def pending_paths(self) -> tuple[str, ...]:
        return tuple(sorted(self._pending))

    def get(self, path: str) -> PendingOperation | None:
        return self._pending.get(path)

    async def _fire_after(self, operation: PendingOperation, delay: float) -> None:
        await asyncio.sleep(delay)
        if self._pending.get(operation.path) is not operation:
            return
        del self._pending[operation.path]
        task = asyncio.current_task()
        if task is not None:
            self._inflight.add(task)
            task.add_done_callback(self._inflight.discard)
        await self._action(operation.document)

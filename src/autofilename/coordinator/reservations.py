"""Reservation of destination paths by renames that have not committed yet."""

from __future__ import annotations

import threading


class ReservedPathSet:
    """Destination paths claimed by renames still in flight.

    ``claim`` is a single check-and-insert under a lock, so two documents
    renamed concurrently can never both win the same path.
    """

    def __init__(self) -> None:
        self._paths: set[str] = set()
        self._lock = threading.Lock()

    def claim(self, path: str) -> bool:
        """Reserve ``path``; return False when it is already taken."""
        with self._lock:
            if path in self._paths:
                return False
            self._paths.add(path)
            return True

    def release(self, path: str) -> None:
        """Drop the claim on ``path``; unknown paths are ignored."""
        with self._lock:
            self._paths.discard(path)

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._paths

    def __len__(self) -> int:
        with self._lock:
            return len(self._paths)

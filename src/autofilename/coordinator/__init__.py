"""Rename coordination package."""

from __future__ import annotations

from .coordinator import RenameCoordinator
from .debounce import Debouncer
from .eligibility import is_in_watched_container
from .reservations import ReservedPathSet

__all__ = ["Debouncer", "RenameCoordinator", "ReservedPathSet", "is_in_watched_container"]

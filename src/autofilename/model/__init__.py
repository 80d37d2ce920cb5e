"""Core data models for autofilename."""

from .entities import BatchSummary, Document, PendingOperation, RenameOutcome, RenameStatus

__all__ = [
    "BatchSummary",
    "Document",
    "PendingOperation",
    "RenameOutcome",
    "RenameStatus",
]

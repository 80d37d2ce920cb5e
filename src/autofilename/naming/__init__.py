"""Stem derivation and destination path resolution."""

from __future__ import annotations

from .collisions import build_candidate_path, resolve_destination
from .deriver import derive_stem

__all__ = ["build_candidate_path", "derive_stem", "resolve_destination"]

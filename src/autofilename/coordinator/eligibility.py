"""Watched-folder membership checks."""

from __future__ import annotations

from autofilename.config.model import AutoFilenameConfig
from autofilename.constants.config import ROOT_CONTAINER


def is_in_watched_container(container: str, config: AutoFilenameConfig) -> bool:
    """Return True when ``container`` is watched by ``config``.

    Matching is exact and case sensitive. With ``include_subcontainers`` a
    watched folder also covers every folder below it, compared on whole path
    segments so ``notes`` does not cover ``notes-archive``.
    """
    watched = config.watched_containers
    if not watched:
        return False
    if container in watched:
        return True
    if not config.include_subcontainers:
        return False
    return any(folder == ROOT_CONTAINER or container.startswith(f"{folder}/") for folder in watched)

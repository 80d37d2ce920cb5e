"""Destination path construction and collision resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING

from autofilename.constants.config import ROOT_CONTAINER
from autofilename.constants.naming import (
    DUPLICATE_SUFFIX_TEMPLATE,
    FIRST_DUPLICATE_COUNTER,
    MAX_DISAMBIGUATION_ATTEMPTS,
)
from autofilename.exceptions import NameCollisionExhausted
from autofilename.model import Document

if TYPE_CHECKING:
    from autofilename.coordinator.reservations import ReservedPathSet
    from autofilename.storage.base import DocumentStore


def build_candidate_path(container: str, stem: str, extension: str, counter: int | None = None) -> str:
    """Join container, stem and extension, adding ``" (n)"`` when ``counter`` is set."""
    prefix = "" if container == ROOT_CONTAINER else f"{container}/"
    if counter is not None:
        stem = DUPLICATE_SUFFIX_TEMPLATE.format(stem=stem, counter=counter)
    return f"{prefix}{stem}{extension}"


async def resolve_destination(
    document: Document,
    stem: str,
    store: DocumentStore,
    reservations: ReservedPathSet | None = None,
) -> str | None:
    """Find the first free path for ``stem`` next to ``document``.

    Returns ``None`` when the document already sits at the path it would be
    given, either the plain ``stem`` or one of its numbered variants. With
    ``reservations`` the returned path has been claimed there; the caller
    releases it.
    """
    counter: int | None = None
    for attempt in range(MAX_DISAMBIGUATION_ATTEMPTS):
        candidate = build_candidate_path(document.container, stem, document.extension, counter)
        if candidate == document.path:
            return None
        if not await store.path_exists(candidate):
            if reservations is None:
                return candidate
            if reservations.claim(candidate):
                # A rename holding the claim may have committed while we probed.
                if not await store.path_exists(candidate):
                    return candidate
                reservations.release(candidate)
        counter = FIRST_DUPLICATE_COUNTER + attempt

    raise NameCollisionExhausted(
        f"No free name for '{stem}' after {MAX_DISAMBIGUATION_ATTEMPTS} attempts",
        path=document.path,
    )

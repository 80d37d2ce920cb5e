"""Document store backed by a folder of notes on local disk."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path, PurePosixPath

import aiofiles
import aiofiles.os

from autofilename.constants.config import DEFAULT_EXTENSION, ROOT_CONTAINER
from autofilename.exceptions import StorageFailure
from autofilename.model import Document
from autofilename.storage.base import DocumentStore

logger = logging.getLogger(__name__)


class LocalFolderStore(DocumentStore):
    """Serve notes under ``root`` addressed by POSIX paths relative to it."""

    def __init__(self, root: Path, extension: str = DEFAULT_EXTENSION) -> None:
        self.root = root.resolve()
        self.extension = extension
        self._rename_lock = asyncio.Lock()

    def resolve(self, path: str) -> Path:
        """Map a store path (or container) to a filesystem path."""
        if path == ROOT_CONTAINER:
            return self.root
        return self.root.joinpath(*PurePosixPath(path).parts)

    def document_for(self, file_path: Path) -> Document | None:
        """Return the document for a filesystem path, or ``None`` if it is not a note."""
        try:
            relative = file_path.resolve().relative_to(self.root)
        except ValueError:
            return None
        if relative.suffix != self.extension or _is_hidden(relative):
            return None
        return Document(relative.as_posix())

    async def read_content(self, document: Document) -> str:
        try:
            async with aiofiles.open(self.resolve(document.path), encoding="utf-8") as handle:
                return await handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageFailure(f"Cannot read {document.path}: {exc}", path=document.path) from exc

    async def path_exists(self, path: str) -> bool:
        return await aiofiles.os.path.exists(self.resolve(path))

    async def rename_to(self, document: Document, new_path: str) -> None:
        """Move ``document`` to ``new_path``; never replaces an existing file.

        ``os.rename`` silently replaces its target on POSIX, so the existence
        check and the move run under one lock shared by every rename of this
        store.
        """
        source = self.resolve(document.path)
        target = self.resolve(new_path)
        async with self._rename_lock:
            if await aiofiles.os.path.exists(target):
                raise StorageFailure(f"Refusing to overwrite existing {new_path}", path=document.path)
            try:
                await aiofiles.os.rename(source, target)
            except OSError as exc:
                raise StorageFailure(
                    f"Cannot rename {document.path} to {new_path}: {exc}",
                    path=document.path,
                ) from exc
        logger.info("Renamed %s -> %s", document.path, new_path)

    def list_documents(self, container: str, *, recursive: bool = False) -> list[Document]:
        base = self.resolve(container)
        if not base.is_dir():
            logger.debug("Container %s does not exist under %s", container, self.root)
            return []

        pattern = f"**/*{self.extension}" if recursive else f"*{self.extension}"
        documents: list[Document] = []
        for path in sorted(base.glob(pattern)):
            if not path.is_file():
                continue
            document = self.document_for(path)
            if document is not None:
                documents.append(document)
        return documents


def _is_hidden(relative: Path) -> bool:
    return any(part.startswith(".") for part in relative.parts)

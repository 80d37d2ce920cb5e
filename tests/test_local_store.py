"""Tests for the local folder store and its watchdog notifications."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest
from watchdog.events import DirCreatedEvent, FileCreatedEvent, FileModifiedEvent

from autofilename.exceptions import StorageFailure
from autofilename.model import Document
from autofilename.storage import FolderWatcher, LocalFolderStore
from autofilename.storage.watcher import _NoteEventHandler


def _make_tree(root: Path) -> None:
    (root / "Inbox" / "Sub").mkdir(parents=True)
    (root / ".trash").mkdir()
    (root / "top.md").write_text("Top", encoding="utf-8")
    (root / "Inbox" / "a.md").write_text("Alpha", encoding="utf-8")
    (root / "Inbox" / "image.png").write_bytes(b"\x89PNG")
    (root / "Inbox" / "Sub" / "b.md").write_text("Beta", encoding="utf-8")
    (root / ".trash" / "old.md").write_text("Old", encoding="utf-8")


def test_list_documents_in_root_only(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    store = LocalFolderStore(tmp_path)

    assert store.list_documents("/") == [Document("top.md")]


def test_list_documents_recursive_skips_hidden_and_other_extensions(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    store = LocalFolderStore(tmp_path)

    paths = [document.path for document in store.list_documents("/", recursive=True)]

    assert sorted(paths) == ["Inbox/Sub/b.md", "Inbox/a.md", "top.md"]


def test_list_documents_for_missing_container(tmp_path: Path) -> None:
    assert LocalFolderStore(tmp_path).list_documents("Nope") == []


def test_document_for_rejects_paths_outside_root(tmp_path: Path) -> None:
    store = LocalFolderStore(tmp_path / "notes")

    assert store.document_for(tmp_path / "elsewhere.md") is None
    assert store.document_for(tmp_path / "notes" / "x.txt") is None
    assert store.document_for(tmp_path / "notes" / "x.md") == Document("x.md")


@pytest.mark.asyncio
async def test_read_content(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    store = LocalFolderStore(tmp_path)

    assert await store.read_content(Document("Inbox/a.md")) == "Alpha"


@pytest.mark.asyncio
async def test_read_content_maps_errors_to_storage_failure(tmp_path: Path) -> None:
    (tmp_path / "binary.md").write_bytes(b"\xff\xfe\xfa")
    store = LocalFolderStore(tmp_path)

    with pytest.raises(StorageFailure, match="missing.md"):
        await store.read_content(Document("missing.md"))
    with pytest.raises(StorageFailure) as excinfo:
        await store.read_content(Document("binary.md"))
    assert excinfo.value.path == "binary.md"


@pytest.mark.asyncio
async def test_rename_to_moves_file(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    store = LocalFolderStore(tmp_path)

    await store.rename_to(Document("Inbox/a.md"), "Inbox/Alpha.md")

    assert await store.path_exists("Inbox/Alpha.md")
    assert not await store.path_exists("Inbox/a.md")
    assert (tmp_path / "Inbox" / "Alpha.md").read_text(encoding="utf-8") == "Alpha"


@pytest.mark.asyncio
async def test_rename_to_refuses_to_overwrite(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    (tmp_path / "Taken.md").write_text("keep me", encoding="utf-8")
    store = LocalFolderStore(tmp_path)

    with pytest.raises(StorageFailure, match="overwrite"):
        await store.rename_to(Document("top.md"), "Taken.md")

    assert (tmp_path / "Taken.md").read_text(encoding="utf-8") == "keep me"
    assert (tmp_path / "top.md").exists()


@pytest.mark.asyncio
async def test_rename_to_missing_source_raises(tmp_path: Path) -> None:
    store = LocalFolderStore(tmp_path)

    with pytest.raises(StorageFailure, match="Cannot rename"):
        await store.rename_to(Document("ghost.md"), "Ghost.md")


@pytest.mark.asyncio
async def test_path_exists_sees_folders(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    store = LocalFolderStore(tmp_path)

    assert await store.path_exists("Inbox")
    assert await store.path_exists("/")


@pytest.mark.asyncio
async def test_watcher_dispatch_delivers_on_loop(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    store = LocalFolderStore(tmp_path)
    watcher = FolderWatcher(store, asyncio.get_running_loop())
    changed: list[Document] = []
    opened: list[Document] = []
    unsubscribe = watcher.on_document_changed(changed.append)
    watcher.on_document_opened(opened.append)

    watcher.dispatch("changed", str(tmp_path / "Inbox" / "a.md"))
    watcher.dispatch("opened", str(tmp_path / "top.md").encode())
    watcher.dispatch("changed", str(tmp_path / "Inbox" / "image.png"))
    watcher.dispatch("changed", str(tmp_path / ".trash" / "old.md"))
    await asyncio.sleep(0)

    assert changed == [Document("Inbox/a.md")]
    assert opened == [Document("top.md")]

    unsubscribe()
    watcher.dispatch("changed", str(tmp_path / "Inbox" / "a.md"))
    await asyncio.sleep(0)
    assert changed == [Document("Inbox/a.md")]


@pytest.mark.asyncio
async def test_event_handler_ignores_directories(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    store = LocalFolderStore(tmp_path)
    watcher = FolderWatcher(store, asyncio.get_running_loop())
    changed: list[Document] = []
    watcher.on_document_changed(changed.append)
    handler = _NoteEventHandler(watcher)

    handler.on_created(DirCreatedEvent(str(tmp_path / "Inbox")))
    handler.on_created(FileCreatedEvent(str(tmp_path / "top.md")))
    handler.on_modified(FileModifiedEvent(str(tmp_path / "Inbox" / "a.md")))
    await asyncio.sleep(0)

    assert changed == [Document("top.md"), Document("Inbox/a.md")]


@pytest.mark.asyncio
async def test_watcher_start_and_stop(tmp_path: Path) -> None:
    watcher = FolderWatcher(LocalFolderStore(tmp_path), asyncio.get_running_loop())

    watcher.start()
    assert watcher.running
    watcher.stop()
    assert not watcher.running


@pytest.mark.asyncio
async def test_concurrent_renames_onto_one_target_keep_both_files(tmp_path: Path) -> None:
    (tmp_path / "a.md").write_text("first", encoding="utf-8")
    (tmp_path / "b.md").write_text("second", encoding="utf-8")
    store = LocalFolderStore(tmp_path)

    results = await asyncio.gather(
        store.rename_to(Document("a.md"), "Target.md"),
        store.rename_to(Document("b.md"), "Target.md"),
        return_exceptions=True,
    )

    failures = [result for result in results if isinstance(result, StorageFailure)]
    assert len(failures) == 1
    assert results.count(None) == 1
    remaining = sorted(path.name for path in tmp_path.iterdir())
    assert len(remaining) == 2
    assert "Target.md" in remaining
    contents = {path.read_text(encoding="utf-8") for path in tmp_path.iterdir()}
    assert contents == {"first", "second"}

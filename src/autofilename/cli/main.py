"""CLI entrypoint for autofilename."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from autofilename import __version__
from autofilename.config import (
    AutoFilenameConfig,
    apply_setting,
    load_config,
    parse_setting_value,
    save_config,
    validate_config_file,
)
from autofilename.constants.branding import CLI_DESCRIPTION
from autofilename.constants.config import CONFIG_FILENAME
from autofilename.coordinator import RenameCoordinator
from autofilename.exceptions import AutoFilenameError, ConfigError
from autofilename.exceptions.validation import format_errors
from autofilename.model import Document
from autofilename.naming import derive_stem
from autofilename.storage import FolderWatcher, LocalFolderStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="autofilename",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    derive = subparsers.add_parser("derive", help="Print the name a note would be given")
    derive.add_argument("file", type=Path, help="Note to read")
    derive.add_argument("-r", "--root", type=Path, required=True, help="Notes root path")
    derive.add_argument("-c", "--config", type=Path, help="Explicit config file")

    rename_all = subparsers.add_parser("rename-all", help="Rename every note in the watched folders")
    rename_all.add_argument("-r", "--root", type=Path, required=True, help="Notes root path")
    rename_all.add_argument("-c", "--config", type=Path, help="Explicit config file")

    watch = subparsers.add_parser("watch", help="Rename notes in the watched folders as they change")
    watch.add_argument("-r", "--root", type=Path, required=True, help="Notes root path")
    watch.add_argument("-c", "--config", type=Path, help="Explicit config file")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without renaming")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Notes root path")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    setting = subparsers.add_parser("set", help="Change one setting and save the config file")
    setting.add_argument("key", help="Setting name, e.g. max_stem_length")
    setting.add_argument(
        "values",
        nargs="+",
        help="New value; list settings such as watched_containers take several",
    )
    setting.add_argument("-r", "--root", type=Path, required=True, help="Notes root path")
    setting.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.command == "validate-config":
        return _handle_validate_config(args)
    if args.command == "set":
        return _handle_set(args)
    if args.command == "derive":
        return _handle_derive(args)

    if args.command not in {"rename-all", "watch"}:
        parser.error(f"Unsupported command: {args.command}")

    errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if not config.watched_containers:
        print(
            "Configuration error: watched_containers is empty, nothing to rename",
            file=sys.stderr,
        )
        return 2

    store = LocalFolderStore(args.root, extension=config.extension)
    try:
        if args.command == "rename-all":
            return asyncio.run(_rename_all(store, config))
        return asyncio.run(_watch(store, config))
    except AutoFilenameError as exc:
        print(f"Rename error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def _handle_set(args: argparse.Namespace) -> int:
    """Apply one setting edit; an invalid edit leaves the saved file untouched."""
    path = args.config.resolve() if args.config else args.root.resolve() / CONFIG_FILENAME
    try:
        current = load_config(args.root, path) if path.exists() else AutoFilenameConfig()
        value = parse_setting_value(args.key, args.values)
        updated = apply_setting(current, args.key, value)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    save_config(updated, path)
    print(f"{args.key} = {getattr(updated, args.key)!r}")
    return 0


def _handle_derive(args: argparse.Namespace) -> int:
    """Print the stem derived from a single note without renaming it."""
    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        content = args.file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Cannot read {args.file}: {exc}", file=sys.stderr)
        return 1

    print(derive_stem(content, config))
    return 0


async def _rename_all(store: LocalFolderStore, config: AutoFilenameConfig) -> int:
    coordinator = RenameCoordinator(store, config)
    try:
        summary = await coordinator.rename_all()
    finally:
        await coordinator.aclose()

    print(summary.message())
    for path, reason in sorted(summary.failures.items()):
        print(f"  failed: {path}: {reason}", file=sys.stderr)
    return 1 if summary.failed else 0


async def _watch(store: LocalFolderStore, config: AutoFilenameConfig) -> int:
    loop = asyncio.get_running_loop()
    watcher = FolderWatcher(store, loop)
    coordinator = RenameCoordinator(store, config)
    unsubscribe_changed = coordinator.attach(watcher)
    unsubscribe_opened = watcher.on_document_opened(_log_opened)

    watcher.start()
    try:
        await asyncio.Event().wait()
    finally:
        watcher.stop()
        unsubscribe_changed()
        unsubscribe_opened()
        await coordinator.aclose()
    return 0


def _log_opened(document: Document) -> None:
    logger.debug("Opened %s", document.path)


if __name__ == "__main__":
    raise SystemExit(main())

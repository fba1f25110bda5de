"""Discovery of the files to search from user-supplied paths."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


def _stat_key(path: str) -> tuple[int, int]:
    info = os.stat(path)
    return info.st_dev, info.st_ino


def _walk_files(directory: str, ancestors: frozenset[tuple[int, int]]) -> Iterator[Path]:
    """Yield files depth-first, following symlinks and skipping loops and unreadable entries."""
    try:
        with os.scandir(directory) as entries:
            listing = list(entries)
    except OSError as exc:
        logger.debug("Skipping unreadable directory %s: %s", directory, exc)
        return

    for entry in listing:
        path = Path(entry.path)
        if path.is_file():
            logger.debug("Adding file: %s", path)
            yield path
        elif path.is_dir():
            try:
                key = _stat_key(entry.path)
            except OSError:
                continue
            if key in ancestors:
                logger.debug("Skipping filesystem loop at %s", path)
                continue
            yield from _walk_files(entry.path, ancestors | {key})


def _top_level_files(directory: Path) -> Iterator[Path]:
    with os.scandir(directory) as entries:
        for entry in entries:
            path = Path(entry.path)
            if path.is_file():
                logger.debug("Adding file: %s", path)
                yield path


def find_files(paths: Iterable[str | os.PathLike[str]], recursive: bool) -> list[Path]:
    """Collect files from the given paths.

    Files are taken as they are; directories contribute their top-level files,
    or every file below them when ``recursive`` is set. Missing paths are
    skipped with a warning.
    """
    files: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if not path.exists():
            logger.warning("Path does not exist: %s", path)
            continue
        if path.is_file():
            logger.debug("Adding file: %s", path)
            files.append(path)
        elif path.is_dir():
            if recursive:
                logger.debug("Recursively traversing directory: %s", path)
                files.extend(_walk_files(str(path), frozenset({_stat_key(str(path))})))
            else:
                logger.debug("Adding top-level files from directory: %s", path)
                files.extend(_top_level_files(path))
    logger.debug("Found %d files to search", len(files))
    return files
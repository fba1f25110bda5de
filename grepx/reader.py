"""File access: buffered reads for small files, memory mapping for large ones."""

from __future__ import annotations

import mmap
import os
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

MIN_SIZE_FOR_MMAP = 1024 * 1024


def _iter_lines(handle: BinaryIO) -> Iterator[str]:
    with handle:
        for raw in handle:
            if raw.endswith(b"\n"):
                raw = raw[:-1]
                if raw.endswith(b"\r"):
                    raw = raw[:-1]
            yield raw.decode("utf-8")


class FileReader:
    """Reads a file whole, in chunks or line by line."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)
        self._size = self._path.stat().st_size

    def size(self) -> int:
        """Return the file size recorded when the reader was created."""
        return self._size

    def _use_mmap(self) -> bool:
        return self._size >= MIN_SIZE_FOR_MMAP

    def read_all(self) -> bytes:
        """Return the whole file content."""
        if self._use_mmap():
            with open(self._path, "rb") as handle, mmap.mmap(
                handle.fileno(), 0, access=mmap.ACCESS_READ
            ) as mapped:
                return mapped[:]
        return self._path.read_bytes()

    def read_chunk(self, offset: int, size: int) -> bytes:
        """Return up to ``size`` bytes starting at ``offset``; empty past the end."""
        if offset > self._size:
            return b""
        actual = min(size, max(self._size - offset, 0))
        if actual <= 0:
            return b""
        if self._use_mmap():
            with open(self._path, "rb") as handle, mmap.mmap(
                handle.fileno(), 0, access=mmap.ACCESS_READ
            ) as mapped:
                end = min(offset + actual, len(mapped))
                return mapped[offset:end]
        with open(self._path, "rb") as handle:
            handle.seek(offset)
            return handle.read(actual)

    def read_lines(self) -> Iterator[str]:
        """Return an iterator over the file's lines without line endings.

        The file is opened immediately; lines that are not valid UTF-8
        raise UnicodeDecodeError when reached.
        """
        return _iter_lines(open(self._path, "rb"))
"""Parallel search over the discovered files."""

from __future__ import annotations

import logging
import os
import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from tqdm import tqdm

from grepx.cli import Args
from grepx.discovery import find_files
from grepx.matcher import RegexMatcher
from grepx.reader import FileReader

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Totals gathered over a whole search."""

    total_matches: int = 0
    files_searched: int = 0
    files_with_matches: int = 0
    bytes_processed: int = 0


@dataclass(frozen=True)
class _FileResult:
    matches: int
    bytes_processed: int


def _thread_count(requested: int) -> int:
    if requested == 0:
        return os.cpu_count() or 1
    return requested


def _process_file(path: Path, matcher: RegexMatcher, args: Args) -> _FileResult:
    reader = FileReader(path)
    file_size = reader.size()
    chunk_size = args.chunk_size * 1024

    if file_size < chunk_size:
        content = reader.read_all()
        return _FileResult(matcher.match_count(content), len(content))

    offset = 0
    total = 0
    while offset < file_size:
        chunk = reader.read_chunk(offset, chunk_size)
        if not chunk:
            break
        total += matcher.match_count(chunk)
        offset += len(chunk)
    return _FileResult(total, file_size)


def _iter_raw_lines(path: Path):
    with open(path, "rb") as handle:
        for raw in handle:
            if raw.endswith(b"\n"):
                raw = raw[:-1]
                if raw.endswith(b"\r"):
                    raw = raw[:-1]
            yield raw


def _display_matches_with_line_numbers(path: Path, matcher: RegexMatcher) -> None:
    lines = _iter_raw_lines(path)
    print(f"File: {path}")
    for number, raw in enumerate(lines, start=1):
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError:
            continue
        if matcher.is_match(raw):
            print(f"{number}: {line}")
    print()


def _report(path: Path, matches: int, matcher: RegexMatcher, args: Args) -> None:
    name = str(path)
    if not args.count and not args.files_with_matches:
        if args.line_numbers:
            try:
                _display_matches_with_line_numbers(path, matcher)
            except OSError as exc:
                print(f"Error displaying matches for {name}: {exc}", file=sys.stderr)
        else:
            print(f"Found {matches} matches in {name}")
    elif args.files_with_matches:
        print(name)
    else:
        print(f"{name}: {matches}")


def execute_search(args: Args) -> SearchResult:
    """Search every file named by ``args`` in parallel and return the totals.

    Per-file output is printed as each file finishes. Raises ValueError for an
    invalid pattern and OSError when a directory cannot be listed.
    """
    logger.info("Initializing search engine")
    matcher = RegexMatcher(args.pattern, args.case_sensitive)

    num_threads = _thread_count(args.threads)
    logger.info("Using %d threads for search", num_threads)

    files = find_files(args.path, args.recursive)
    logger.info("Found %d files to search", len(files))

    result = SearchResult()
    lock = threading.Lock()

    with tqdm(total=len(files), unit="files", disable=not args.progress) as progress:

        def search_one(path: Path) -> None:
            logger.debug("Searching file: %s", path)
            try:
                file_result = _process_file(path, matcher, args)
            except (OSError, ValueError) as exc:
                with lock:
                    print(f"Error processing file {path}: {exc}", file=sys.stderr)
            else:
                with lock:
                    result.total_matches += file_result.matches
                    result.files_searched += 1
                    result.bytes_processed += file_result.bytes_processed
                    if file_result.matches > 0:
                        result.files_with_matches += 1
                        _report(path, file_result.matches, matcher, args)
            with lock:
                progress.update(1)

        with ThreadPoolExecutor(max_workers=num_threads) as pool:
            for _ in pool.map(search_one, files):
                pass

        progress.set_postfix_str("Search complete")

    logger.info(
        "Search completed. Found %d matches in %d files (%d had matches)",
        result.total_matches,
        result.files_searched,
        result.files_with_matches,
    )
    return result
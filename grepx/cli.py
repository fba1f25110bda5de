"""Command-line argument parsing."""

from __future__ import annotations

import argparse
import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

_VERSION = "0.1.0"
_PACKAGE_LOGGER = "grepx"


class OutputFormat(enum.Enum):
    """How search results are printed."""

    TEXT = "text"
    JSON = "json"
    GREP = "grep"

    def __str__(self) -> str:
        return self.value


class LogLevel(enum.Enum):
    """Verbosity of the package's logging."""

    OFF = "off"
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"

    def __str__(self) -> str:
        return self.value

    @property
    def logging_level(self) -> int:
        """The matching level of the standard logging module."""
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS = {
    LogLevel.OFF: logging.CRITICAL + 10,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.TRACE: logging.DEBUG - 5,
}


@dataclass
class Args:
    """Parsed search options."""

    pattern: str
    path: list[str] = field(default_factory=lambda: ["."])
    threads: int = 0
    recursive: bool = False
    case_sensitive: bool = False
    line_numbers: bool = False
    files_with_matches: bool = False
    count: bool = False
    progress: bool = False
    chunk_size: int = 64
    format: OutputFormat = OutputFormat.TEXT
    log_level: LogLevel = LogLevel.INFO


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return value


def _enum_type(kind: type[enum.Enum]):
    def convert(text: str):
        try:
            return kind(text.lower())
        except ValueError:
            choices = ", ".join(member.value for member in kind)
            raise argparse.ArgumentTypeError(
                f"invalid value {text!r} (choose from {choices})"
            ) from None

    return convert


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grepx",
        description="GrepX - A distributed, multi-threaded regex search engine",
    )
    parser.add_argument("-V", "--version", action="version", version=f"grepx {_VERSION}")
    parser.add_argument("pattern", help="Regex pattern to search for")
    parser.add_argument("path", nargs="*", help="File paths to search (default: .)")
    parser.add_argument(
        "-t", "--threads", type=_non_negative_int, default=0,
        help="Number of threads to use (0 = auto)",
    )
    parser.add_argument("-r", "--recursive", action="store_true",
                        help="Recursively search directories")
    parser.add_argument("-s", "--case-sensitive", action="store_true",
                        help="Case-sensitive matching")
    parser.add_argument("-n", "--line-numbers", action="store_true",
                        help="Show line numbers")
    parser.add_argument("-l", "--files-with-matches", action="store_true",
                        help="Only print filenames with matches")
    parser.add_argument("-c", "--count", action="store_true", help="Count matches per file")
    parser.add_argument("-p", "--progress", action="store_true", help="Display progress bar")
    parser.add_argument(
        "--chunk-size", type=_non_negative_int, default=64,
        help="Chunk size in KB for parallel processing",
    )
    parser.add_argument(
        "-f", "--format", type=_enum_type(OutputFormat), default=OutputFormat.TEXT,
        help="Output format: text, json or grep",
    )
    parser.add_argument(
        "--log-level", type=_enum_type(LogLevel), default=LogLevel.INFO,
        help="Logging level: off, error, warn, info, debug or trace",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Args:
    """Parse command-line options and apply the chosen log level to the package logger.

    Invalid options make the parser exit with status 2.
    """
    namespace = _build_parser().parse_intermixed_args(argv)
    args = Args(
        pattern=namespace.pattern,
        path=list(namespace.path) or ["."],
        threads=namespace.threads,
        recursive=namespace.recursive,
        case_sensitive=namespace.case_sensitive,
        line_numbers=namespace.line_numbers,
        files_with_matches=namespace.files_with_matches,
        count=namespace.count,
        progress=namespace.progress,
        chunk_size=namespace.chunk_size,
        format=namespace.format,
        log_level=namespace.log_level,
    )
    logging.getLogger(_PACKAGE_LOGGER).setLevel(args.log_level.logging_level)
    return args
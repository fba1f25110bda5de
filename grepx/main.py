"""Command entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from grepx.cli import parse_args
from grepx.engine import execute_search

logger = logging.getLogger("grepx")


def _configure_logging() -> None:
    if not any(getattr(h, "_grepx", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s %(name)s] %(message)s"))
        handler._grepx = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
        logger.propagate = False


def main(argv: Sequence[str] | None = None) -> int:
    """Run a search from the command line and return the exit status."""
    _configure_logging()
    args = parse_args(argv)
    logger.info("Starting GrepX search with pattern: %s", args.pattern)
    try:
        result = execute_search(args)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Found {result.total_matches} matches in {result.files_searched} files")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Regular-expression matching over raw file content."""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Match:
    """A single regex match: its text, optional 1-based line and byte span."""

    text: str
    line_number: int | None
    byte_offset: int
    byte_length: int


def _decode(data: bytes) -> str | None:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _line_starts(text: str) -> list[int]:
    return [0, *(newline.end() for newline in re.finditer("\n", text))]


class RegexMatcher:
    """Multi-line regex matcher, case-insensitive unless asked otherwise.

    Content that is not valid UTF-8 never matches.
    """

    def __init__(self, pattern: str, case_sensitive: bool) -> None:
        flags = re.MULTILINE
        if not case_sensitive:
            flags |= re.IGNORECASE
        try:
            self._regex = re.compile(pattern, flags)
        except re.error as exc:
            raise ValueError(f"Failed to compile regex pattern: {pattern}") from exc
        self._pattern = pattern

    def pattern(self) -> str:
        """Return the pattern the matcher was built from."""
        return self._pattern

    def find_matches(self, text: bytes, with_line_numbers: bool) -> list[Match]:
        """Return every match in ``text`` with byte offsets and, optionally, line numbers."""
        decoded = _decode(text)
        if decoded is None:
            return []

        line_starts = _line_starts(decoded) if with_line_numbers else None
        found = []
        char_pos = 0
        byte_pos = 0
        for hit in self._regex.finditer(decoded):
            start = hit.start()
            byte_pos += _utf8_len(decoded[char_pos:start])
            char_pos = start
            matched = hit.group()
            line_number = (
                bisect.bisect_right(line_starts, start) if line_starts is not None else None
            )
            found.append(Match(matched, line_number, byte_pos, _utf8_len(matched)))
        return found

    def is_match(self, text: bytes) -> bool:
        """Return whether ``text`` contains at least one match."""
        decoded = _decode(text)
        return decoded is not None and self._regex.search(decoded) is not None

    def match_count(self, text: bytes) -> int:
        """Return the number of non-overlapping matches in ``text``."""
        decoded = _decode(text)
        if decoded is None:
            return 0
        return sum(1 for _ in self._regex.finditer(decoded))
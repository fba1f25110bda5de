"""Text helpers: match context extraction and human-readable formatting."""

from __future__ import annotations

import math

_KB = 1024
_MB = _KB * 1024
_GB = _MB * 1024
_MAX_UNSIGNED = 2**64 - 1


def _saturating_uint(value: float) -> int:
    """Convert a float to a non-negative integer, clamping out-of-range values."""
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return _MAX_UNSIGNED
    return min(int(value), _MAX_UNSIGNED)


def extract_context(text: str, match_start: int, match_end: int, context_lines: int) -> str:
    """Return the lines holding a match plus up to ``context_lines`` lines on each side.

    With ``context_lines`` of zero only the matched text itself is returned.
    """
    if context_lines == 0:
        return text[match_start:match_end]

    line_start = text.rfind("\n", 0, match_start) + 1
    newline = text.find("\n", match_end)
    line_end = len(text) if newline == -1 else newline

    context_start = line_start
    lines_before = 0
    while lines_before < context_lines and context_start > 0:
        pos = text.rfind("\n", 0, context_start - 1)
        if pos == -1:
            context_start = 0
            break
        context_start = pos + 1
        lines_before += 1

    context_end = line_end
    lines_after = 0
    while lines_after < context_lines and context_end < len(text):
        pos = text.find("\n", context_end + 1)
        if pos == -1:
            context_end = len(text)
            break
        context_end = pos
        lines_after += 1

    return text[context_start:context_end]


def format_size(size: int) -> str:
    """Format a byte count as B, KB, MB or GB."""
    if size >= _GB:
        return f"{size / _GB:.2f} GB"
    if size >= _MB:
        return f"{size / _MB:.2f} MB"
    if size >= _KB:
        return f"{size / _KB:.2f} KB"
    return f"{size} B"


def format_duration(seconds: float) -> str:
    """Format a duration in seconds using the most suitable unit."""
    if seconds < 0.001:
        return f"{seconds * 1_000_000.0:.2f} μs"
    if seconds < 1.0:
        return f"{seconds * 1_000.0:.2f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = _saturating_uint(seconds / 60.0)
    remaining = math.fmod(seconds, 60.0)
    return f"{minutes}m {remaining:.2f}s"


def calculate_speed(byte_count: int, duration_secs: float) -> float:
    """Return throughput in bytes per second, or 0.0 for a non-positive duration."""
    if duration_secs > 0.0:
        return byte_count / duration_secs
    return 0.0


def format_speed(bytes_per_sec: float) -> str:
    """Format a throughput as a size per second."""
    return f"{format_size(_saturating_uint(bytes_per_sec))}/s"
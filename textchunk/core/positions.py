"""Reconstruct approximate line ranges for chunks of a source text.

Chunks are located with a first-occurrence search, so content that repeats
earlier in the source can be attributed to the wrong lines. The ranges are
meant as retrieval metadata, not exact offsets.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypedDict

__all__ = ["LineRange", "PositionTracker", "line_ranges"]

LineRange = TypedDict("LineRange", {"from": int, "to": int})


def _count_newlines(text: str) -> int:
    return text.count("\n")


class PositionTracker:
    """Walks the chunks of one text in emission order."""

    def __init__(self, text: str):
        self.text = text
        self.line_counter_index = 1
        self.prev_chunk: str | None = None

    def _intermediate_newlines(self, chunk: str) -> int:
        """Newlines dropped between the previous chunk and *chunk*."""
        if not self.prev_chunk:
            return 0

        prev_start = self.text.find(self.prev_chunk)
        if prev_start == -1:
            return 0
        prev_end = prev_start + len(self.prev_chunk)

        # Overlapping chunks start before prev_end and are not found here.
        chunk_start = self.text.find(chunk, prev_end)
        if chunk_start == -1:
            return 0

        return _count_newlines(self.text[prev_end:chunk_start])

    def advance(self, chunk: str) -> LineRange:
        """Return the 1-indexed line range of *chunk* and move past it."""
        self.line_counter_index += self._intermediate_newlines(chunk)

        new_lines = _count_newlines(chunk)
        lines: LineRange = {
            "from": self.line_counter_index,
            "to": self.line_counter_index + new_lines,
        }

        self.line_counter_index += new_lines
        self.prev_chunk = chunk
        return lines


def line_ranges(text: str, chunks: Iterable[str]) -> list[LineRange]:
    """One :data:`LineRange` per chunk, in order."""
    tracker = PositionTracker(text)
    return [tracker.advance(chunk) for chunk in chunks]

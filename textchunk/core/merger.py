"""Overlap-aware accumulation of small fragments into bounded chunks."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from collections.abc import Iterable
import logging

from textchunk.core.policy import SplitPolicy

__all__ = ["OversizeObserver", "log_oversized_chunk", "join_splits", "merge_splits"]

logger = logging.getLogger(__name__)

# Called with (window_total, chunk_size) whenever a chunk is emitted from a
# window that already exceeds the configured size.
OversizeObserver = Callable[[int, int], None]


def log_oversized_chunk(total: int, chunk_size: int) -> None:
    """Default observer: report the overflow as a warning."""
    logger.warning(
        "Created a chunk of size %d, which is longer than the specified %d",
        total,
        chunk_size,
    )


def join_splits(splits: Iterable[str], separator: str) -> str | None:
    """Join *splits* with *separator* and strip; ``None`` if nothing is left."""
    text = separator.join(splits).strip()
    return text or None


def merge_splits(
    splits: Iterable[str],
    separator: str,
    policy: SplitPolicy,
    on_oversized: OversizeObserver | None = None,
) -> list[str]:
    """Accumulate *splits* into chunks of roughly ``policy.chunk_size``.

    The running total only counts fragment lengths, not the separators that
    join them, so an emitted chunk may be longer than ``chunk_size`` by up to
    ``(len(window) - 1) * len(separator)``. A single fragment that is itself
    too large is emitted as-is.

    After each emitted chunk the window is trimmed from the front until it
    fits inside ``chunk_overlap`` (and leaves room for the incoming
    fragment); whatever survives is repeated at the start of the next chunk.
    """
    notify = on_oversized or log_oversized_chunk
    chunk_size = policy.chunk_size
    chunk_overlap = policy.chunk_overlap

    docs: list[str] = []
    current: deque[str] = deque()
    total = 0

    for split in splits:
        length = len(split)
        if total + length >= chunk_size and current:
            if total > chunk_size:
                notify(total, chunk_size)

            doc = join_splits(current, separator)
            if doc is not None:
                docs.append(doc)

            while total > chunk_overlap or (total + length > chunk_size and total > 0):
                total -= len(current.popleft())

        current.append(split)
        total += length

    doc = join_splits(current, separator)
    if doc is not None:
        docs.append(doc)

    return docs

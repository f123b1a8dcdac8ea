"""Chunk size / overlap policy shared by the merger and the splitters."""

from __future__ import annotations

from dataclasses import dataclass

from textchunk.core.errors import ConfigurationError

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 200


@dataclass(frozen=True)
class SplitPolicy:
    """Immutable ``chunk_size`` / ``chunk_overlap`` pair.

    Validated once at construction; ``chunk_overlap`` must stay strictly
    below ``chunk_size`` so that the merge window can always make progress.
    """

    chunk_size: int = DEFAULT_CHUNK_SIZE
    chunk_overlap: int = DEFAULT_CHUNK_OVERLAP

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ConfigurationError(f"chunk_size must be > 0, got {self.chunk_size}")
        if self.chunk_overlap < 0:
            raise ConfigurationError(
                f"chunk_overlap must be >= 0, got {self.chunk_overlap}"
            )
        if self.chunk_overlap >= self.chunk_size:
            raise ConfigurationError("Cannot have chunk_overlap >= chunk_size")

"""Consistent markdown chunking strategy shared by the loader & CLI."""

from __future__ import annotations

from functools import lru_cache

from textchunk.core.splitter import MarkdownTextSplitter

__all__ = ["get_markdown_splitter", "split_markdown"]

MARKDOWN_CHUNK_SIZE = 512  # tokens ≈ 2‑3× chars → keep ≤ ~200 tokens
MARKDOWN_CHUNK_OVERLAP = 50


@lru_cache(maxsize=8)
def get_markdown_splitter(
    chunk_size: int = MARKDOWN_CHUNK_SIZE,
    chunk_overlap: int = MARKDOWN_CHUNK_OVERLAP,
) -> MarkdownTextSplitter:
    """Cached splitter per (size, overlap); splitters hold no per-call state."""
    return MarkdownTextSplitter(chunk_size=chunk_size, chunk_overlap=chunk_overlap)


def split_markdown(text: str) -> list[str]:
    """Return a list of *overlapping* chunks suitable for embedding."""
    return get_markdown_splitter().split_text(text)

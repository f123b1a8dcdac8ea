"""Load a Markdown file → List[Document] with line-range metadata.

Metadata rules
--------------
1. Every front-matter field is copied onto each chunk; dates become ISO
   strings so the records stay JSON-serialisable.
2. ``source`` is always the file path (it wins over a front-matter
   ``source`` key).
3. ``loc.lines`` is counted from the first line *after* the front matter.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any

import frontmatter

from textchunk.core.types import Document
from textchunk.utils.text_splitter import MARKDOWN_CHUNK_OVERLAP
from textchunk.utils.text_splitter import MARKDOWN_CHUNK_SIZE
from textchunk.utils.text_splitter import get_markdown_splitter

__all__ = ["parse_markdown_file"]


def _plain(value: Any) -> Any:
    """Front-matter YAML may yield date objects; keep everything else."""
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, list):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    return value


def parse_markdown_file(
    path: str | Path,
    chunk_size: int = MARKDOWN_CHUNK_SIZE,
    chunk_overlap: int = MARKDOWN_CHUNK_OVERLAP,
) -> list[Document]:
    """Return *chunked* representation of one Markdown file."""
    path = Path(path)
    post = frontmatter.load(path)

    metadata = {key: _plain(value) for key, value in post.metadata.items()}
    metadata["source"] = str(path)

    splitter = get_markdown_splitter(chunk_size, chunk_overlap)
    return splitter.create_documents([post.content], [metadata])

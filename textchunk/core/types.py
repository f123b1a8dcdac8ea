"""Domain models shared across the package."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from langchain_core.documents import Document

from textchunk.core.positions import LineRange

__all__ = ["Document", "to_record", "with_line_range"]


def with_line_range(metadata: Mapping[str, Any], lines: LineRange) -> dict[str, Any]:
    """Shallow-merge ``loc.lines`` into a copy of *metadata*.

    Other keys of an existing ``loc`` mapping survive; ``lines`` is always
    overwritten. The input mapping is left untouched.
    """
    loc = metadata.get("loc")
    loc = dict(loc) if isinstance(loc, Mapping) else {}
    loc["lines"] = dict(lines)
    return {**metadata, "loc": loc}


def to_record(doc: Document) -> dict[str, Any]:
    """Flatten a chunk Document into a JSON-friendly dict.

    Metadata keys sit at the top level next to `content`.
    """
    return {**doc.metadata, "content": doc.page_content}

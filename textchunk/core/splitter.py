"""Recursive character splitting with overlap and line-position metadata.

``RecursiveCharacterTextSplitter`` tries separators in priority order
(paragraphs, lines, words, characters by default), merges the resulting
fragments back up to ``chunk_size`` and only descends to the next separator
for fragments that are still too large. Every chunk handed out through
``create_documents`` carries ``metadata["loc"]["lines"]``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import asyncio
from collections.abc import Iterable, Mapping, Sequence
import logging
from typing import Any

from textchunk.core.config import DEFAULT_SEPARATORS
from textchunk.core.config import Settings
from textchunk.core.languages import Language
from textchunk.core.languages import get_separators_for_language
from textchunk.core.merger import OversizeObserver
from textchunk.core.merger import merge_splits
from textchunk.core.policy import DEFAULT_CHUNK_OVERLAP
from textchunk.core.policy import DEFAULT_CHUNK_SIZE
from textchunk.core.policy import SplitPolicy
from textchunk.core.positions import PositionTracker
from textchunk.core.types import Document
from textchunk.core.types import with_line_range

__all__ = [
    "TextSplitter",
    "CharacterTextSplitter",
    "RecursiveCharacterTextSplitter",
    "MarkdownTextSplitter",
]

logger = logging.getLogger(__name__)

Metadata = Mapping[str, Any]


class TextSplitter(ABC):
    """Base class: subclasses decide how a text becomes chunks.

    Turning chunks into Documents (with line ranges) and batching over many
    texts is shared here.
    """

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
        on_oversized: OversizeObserver | None = None,
    ):
        self.policy = SplitPolicy(chunk_size=chunk_size, chunk_overlap=chunk_overlap)
        self.on_oversized = on_oversized

    @property
    def chunk_size(self) -> int:
        return self.policy.chunk_size

    @property
    def chunk_overlap(self) -> int:
        return self.policy.chunk_overlap

    @abstractmethod
    def split_text(self, text: str) -> list[str]:
        """Split *text* into an ordered list of chunks."""

    def merge_splits(self, splits: Iterable[str], separator: str) -> list[str]:
        return merge_splits(splits, separator, self.policy, self.on_oversized)

    # -------- Documents --------------------------------------------------
    def _create_documents_from_text(
        self, text: str, metadata: Metadata
    ) -> list[Document]:
        tracker = PositionTracker(text)
        documents = []
        for chunk in self.split_text(text):
            lines = tracker.advance(chunk)
            documents.append(
                Document(page_content=chunk, metadata=with_line_range(metadata, lines))
            )
        return documents

    @staticmethod
    def _metadatas_for(
        texts: Sequence[str], metadatas: Sequence[Metadata | None] | None
    ) -> list[Metadata]:
        # Each text gets its own empty mapping when none was supplied.
        metadatas = metadatas or []
        resolved: list[Metadata] = []
        for i in range(len(texts)):
            meta = metadatas[i] if i < len(metadatas) else None
            resolved.append(meta if meta is not None else {})
        return resolved

    def create_documents(
        self,
        texts: Sequence[str],
        metadatas: Sequence[Metadata | None] | None = None,
    ) -> list[Document]:
        """One Document per chunk, in text order then chunk order."""
        texts = list(texts)
        documents: list[Document] = []
        for text, metadata in zip(texts, self._metadatas_for(texts, metadatas)):
            documents.extend(self._create_documents_from_text(text, metadata))

        logger.debug("Split %d texts into %d chunks", len(texts), len(documents))
        return documents

    async def acreate_documents(
        self,
        texts: Sequence[str],
        metadatas: Sequence[Metadata | None] | None = None,
    ) -> list[Document]:
        """Like :meth:`create_documents`, splitting each text in a worker thread.

        ``asyncio.gather`` returns results in submission order, so the output
        order matches :meth:`create_documents` whatever finishes first.
        """
        texts = list(texts)
        per_text = await asyncio.gather(
            *(
                asyncio.to_thread(self._create_documents_from_text, text, metadata)
                for text, metadata in zip(texts, self._metadatas_for(texts, metadatas))
            )
        )
        return [doc for docs in per_text for doc in docs]

    @staticmethod
    def _select_documents(documents: Iterable[Any]) -> tuple[list[str], list[Metadata]]:
        """Pull text/metadata out of Documents, skipping those without content."""
        texts: list[str] = []
        metadatas: list[Metadata] = []
        for doc in documents:
            content = getattr(doc, "page_content", None)
            if content is None:
                continue
            texts.append(content)
            metadatas.append(getattr(doc, "metadata", None) or {})
        return texts, metadatas

    def split_documents(self, documents: Iterable[Document]) -> list[Document]:
        """Re-chunk existing Documents, keeping their metadata."""
        texts, metadatas = self._select_documents(documents)
        return self.create_documents(texts, metadatas)

    async def asplit_documents(self, documents: Iterable[Document]) -> list[Document]:
        texts, metadatas = self._select_documents(documents)
        return await self.acreate_documents(texts, metadatas)

    def transform_documents(self, documents: Iterable[Document]) -> list[Document]:
        """Alias of :meth:`split_documents` for document-transformer callers."""
        return self.split_documents(documents)


class CharacterTextSplitter(TextSplitter):
    """Split on a single separator, then merge back up to ``chunk_size``."""

    def __init__(
        self,
        separator: str = "\n\n",
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
        on_oversized: OversizeObserver | None = None,
    ):
        super().__init__(chunk_size, chunk_overlap, on_oversized)
        self.separator = separator

    def split_text(self, text: str) -> list[str]:
        splits = text.split(self.separator) if self.separator else list(text)
        return self.merge_splits(splits, self.separator)


class RecursiveCharacterTextSplitter(TextSplitter):
    """Split by the first separator present, recursing on oversized pieces.

    ``""`` in ``separators`` means "individual characters" and always
    matches, so a list ending in ``""`` can break any text down to
    ``chunk_size``.
    """

    get_separators_for_language = staticmethod(get_separators_for_language)

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
        separators: Sequence[str] | None = None,
        on_oversized: OversizeObserver | None = None,
    ):
        super().__init__(chunk_size, chunk_overlap, on_oversized)
        self.separators = list(separators if separators is not None else DEFAULT_SEPARATORS)

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, **kwargs: Any
    ) -> RecursiveCharacterTextSplitter:
        """Build a splitter from environment-driven :class:`Settings`."""
        settings = settings or Settings()
        kwargs.setdefault("separators", settings.separators)
        return cls(
            chunk_size=settings.chunk_size,
            chunk_overlap=settings.chunk_overlap,
            **kwargs,
        )

    @classmethod
    def from_language(
        cls, language: Language | str, **kwargs: Any
    ) -> RecursiveCharacterTextSplitter:
        return cls(separators=get_separators_for_language(language), **kwargs)

    def split_text(self, text: str) -> list[str]:
        return self._split_text(text, self.separators)

    def _split_text(self, text: str, separators: list[str]) -> list[str]:
        if not separators:
            # Nothing left to split on: keep the piece whole.
            chunk = text.strip()
            return [chunk] if chunk else []

        separator = separators[-1]
        remaining: list[str] = []
        for i, candidate in enumerate(separators):
            if candidate == "" or candidate in text:
                separator = candidate
                remaining = separators[i + 1 :]
                break

        splits = text.split(separator) if separator else list(text)

        final_chunks: list[str] = []
        good_splits: list[str] = []
        for split in splits:
            if len(split) < self.chunk_size:
                good_splits.append(split)
                continue

            if good_splits:
                final_chunks.extend(self.merge_splits(good_splits, separator))
                good_splits = []
            final_chunks.extend(self._split_text(split, remaining))

        if good_splits:
            final_chunks.extend(self.merge_splits(good_splits, separator))

        return final_chunks


class MarkdownTextSplitter(RecursiveCharacterTextSplitter):
    """Recursive splitter preset that prefers Markdown headings and rules."""

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
        on_oversized: OversizeObserver | None = None,
    ):
        super().__init__(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            separators=get_separators_for_language(Language.MARKDOWN),
            on_oversized=on_oversized,
        )

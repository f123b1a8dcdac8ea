"""CLI helper - chunk an entire directory of text / markdown files.

Usage::

    python -m scripts.chunk_folder ~/Notes --output chunks.jsonl
"""

from __future__ import annotations

import json
import logging
import pathlib
from typing import TextIO

import click

from textchunk.core.config import Settings
from textchunk.core.errors import ConfigurationError
from textchunk.core.errors import UnsupportedLanguageError
from textchunk.core.splitter import RecursiveCharacterTextSplitter
from textchunk.core.types import to_record
from textchunk.ingestion.markdown_loader import parse_markdown_file

logger = logging.getLogger(__name__)

PATTERNS = ("*.md", "*.txt")


def _build_splitter(
    settings: Settings,
    chunk_size: int | None,
    chunk_overlap: int | None,
    language: str | None,
) -> RecursiveCharacterTextSplitter:
    size = chunk_size if chunk_size is not None else settings.chunk_size
    overlap = chunk_overlap if chunk_overlap is not None else settings.chunk_overlap
    try:
        if language:
            return RecursiveCharacterTextSplitter.from_language(
                language, chunk_size=size, chunk_overlap=overlap
            )
        return RecursiveCharacterTextSplitter(
            chunk_size=size, chunk_overlap=overlap, separators=settings.separators
        )
    except UnsupportedLanguageError as e:
        raise click.BadParameter(str(e), param_hint="--language") from e
    except ConfigurationError as e:
        raise click.BadParameter(str(e), param_hint="--chunk-overlap") from e


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "directory", type=click.Path(exists=True, file_okay=False, path_type=pathlib.Path)
)
@click.option("--chunk-size", type=int, default=None, help="Target chunk length.")
@click.option("--chunk-overlap", type=int, default=None, help="Overlap between chunks.")
@click.option(
    "--language",
    default=None,
    help="Separator preset (markdown, latex, html). .md files always use markdown.",
)
@click.option(
    "--output",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="JSON-lines destination (default: stdout).",
)
def main(
    directory: pathlib.Path,
    chunk_size: int | None,
    chunk_overlap: int | None,
    language: str | None,
    output: TextIO,
    settings: Settings | None = None,
) -> None:
    """Chunk every ``.md`` / ``.txt`` under *DIRECTORY* (recursive)."""
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    splitter = _build_splitter(settings, chunk_size, chunk_overlap, language)

    paths = sorted(p for pattern in PATTERNS for p in directory.rglob(pattern))
    if not paths:
        click.echo("No text or markdown files found - exiting.", err=True)
        raise SystemExit(0)

    total = 0
    for p in paths:
        if p.suffix == ".md":
            docs = parse_markdown_file(
                p, chunk_size=splitter.chunk_size, chunk_overlap=splitter.chunk_overlap
            )
        else:
            text = p.read_text(encoding="utf-8")
            docs = splitter.create_documents([text], [{"source": str(p)}])

        logger.info("%s: %d chunks", p, len(docs))
        for doc in docs:
            output.write(json.dumps(to_record(doc), ensure_ascii=False) + "\n")
        total += len(docs)

    click.echo(f"Done. {total} chunks from {len(paths)} files.", err=True)


if __name__ == "__main__":  # pragma: no cover
    main()

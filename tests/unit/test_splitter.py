from __future__ import annotations

import pytest

from tests.helpers import RecordingObserver
from textchunk.core.errors import UnsupportedLanguageError
from textchunk.core.languages import get_separators_for_language
from textchunk.core.splitter import CharacterTextSplitter
from textchunk.core.splitter import MarkdownTextSplitter
from textchunk.core.splitter import RecursiveCharacterTextSplitter

LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit.\n\n"
    "Sed do eiusmod tempor incididunt ut labore et dolore magna aliqua.\n"
    "Ut enim ad minim veniam, quis nostrud exercitation ullamco laboris.\n\n"
    "Duis aute irure dolor in reprehenderit in voluptate velit esse cillum."
)


@pytest.mark.unit
def test_paragraph_separator_only():
    """``a``+``b`` fits (2 < 3) so they share a chunk despite the separator."""
    splitter = RecursiveCharacterTextSplitter(
        chunk_size=3, chunk_overlap=0, separators=["\n\n"]
    )
    assert splitter.split_text("a\n\nb\n\nc") == ["a\n\nb", "c"]


@pytest.mark.unit
def test_oversized_fragment_recurses_with_remaining_separators():
    splitter = RecursiveCharacterTextSplitter(chunk_size=10, chunk_overlap=0)
    chunks = splitter.split_text("foo bar baz\n\nqux quux")
    assert chunks == ["foo bar baz", "qux quux"]


@pytest.mark.unit
def test_word_level_overlap():
    splitter = RecursiveCharacterTextSplitter(chunk_size=10, chunk_overlap=4)
    chunks = splitter.split_text("one two three four five")
    assert chunks == ["one two", "two three", "four five"]


@pytest.mark.unit
def test_empty_and_whitespace_input():
    splitter = RecursiveCharacterTextSplitter()
    assert splitter.split_text("") == []
    assert splitter.split_text("   \n\n  \n ") == []


@pytest.mark.unit
def test_long_run_without_separators_terminates():
    splitter = RecursiveCharacterTextSplitter(chunk_size=100, chunk_overlap=10)
    chunks = splitter.split_text("x" * 10_000)

    assert len(chunks) > 1
    assert all(set(chunk) == {"x"} for chunk in chunks)
    # Character-level fragments add no separator, so the bound is exact here.
    assert all(len(chunk) <= 100 for chunk in chunks)


@pytest.mark.unit
def test_chunk_size_one_degrades_to_characters():
    splitter = RecursiveCharacterTextSplitter(chunk_size=1, chunk_overlap=0)
    assert splitter.split_text("abc") == ["a", "b", "c"]
    assert splitter.split_text("a b") == ["a", "b"]


@pytest.mark.unit
def test_exhausted_separators_keep_oversized_piece():
    """Without ``""`` in the list an unsplittable piece stays whole."""
    splitter = RecursiveCharacterTextSplitter(
        chunk_size=5, chunk_overlap=0, separators=["|"]
    )
    assert splitter.split_text("abcdefghij") == ["abcdefghij"]


@pytest.mark.unit
def test_round_trip_keeps_all_non_whitespace_content():
    splitter = RecursiveCharacterTextSplitter(chunk_size=40, chunk_overlap=0)
    chunks = splitter.split_text(LOREM)

    assert len(chunks) > 1
    assert "".join("".join(c.split()) for c in chunks) == "".join(LOREM.split())


@pytest.mark.unit
def test_overlapping_chunks_are_substrings_of_source():
    splitter = RecursiveCharacterTextSplitter(chunk_size=40, chunk_overlap=15)
    chunks = splitter.split_text(LOREM)

    assert len(chunks) > 1
    assert all(chunk in LOREM for chunk in chunks)


@pytest.mark.unit
def test_no_oversize_warning_for_recursively_split_text():
    observer = RecordingObserver()
    splitter = RecursiveCharacterTextSplitter(
        chunk_size=40, chunk_overlap=10, on_oversized=observer
    )
    splitter.split_text(LOREM * 3)
    assert observer.calls == []


@pytest.mark.unit
def test_character_splitter():
    splitter = CharacterTextSplitter(separator="\n\n", chunk_size=5, chunk_overlap=0)
    assert splitter.split_text("ab\n\ncd\n\nef") == ["ab\n\ncd", "ef"]


@pytest.mark.unit
def test_character_splitter_reports_oversized_fragment():
    observer = RecordingObserver()
    splitter = CharacterTextSplitter(
        separator="\n\n", chunk_size=5, chunk_overlap=0, on_oversized=observer
    )
    assert splitter.split_text("abcdefgh\n\nij") == ["abcdefgh", "ij"]
    assert observer.calls == [(8, 5)]


@pytest.mark.unit
def test_markdown_splitter_prefers_headings():
    text = "# Title\n\nIntro para.\n## Section A\n\nBody a.\n## Section B\n\nBody b."
    splitter = MarkdownTextSplitter(chunk_size=30, chunk_overlap=0)

    # The heading separator itself is consumed by the split.
    assert splitter.split_text(text) == [
        "# Title\n\nIntro para.",
        "Section A\n\nBody a.",
        "Section B\n\nBody b.",
    ]


@pytest.mark.unit
def test_markdown_splitter_uses_markdown_separators():
    splitter = MarkdownTextSplitter(chunk_size=100, chunk_overlap=10)
    assert splitter.separators == get_separators_for_language("markdown")
    assert splitter.chunk_overlap == 10


@pytest.mark.unit
def test_from_language():
    splitter = RecursiveCharacterTextSplitter.from_language(
        "latex", chunk_size=50, chunk_overlap=5
    )
    assert splitter.separators[0] == "\n\\chapter{"
    assert splitter.chunk_size == 50

    with pytest.raises(UnsupportedLanguageError):
        RecursiveCharacterTextSplitter.from_language("cobol")


@pytest.mark.unit
def test_html_preset_splits_on_tags():
    splitter = RecursiveCharacterTextSplitter.from_language(
        "html", chunk_size=10, chunk_overlap=0
    )
    # The empty fragment before the first tag re-attaches it to "first".
    assert splitter.split_text("<p>first<p>second") == ["<p>first", "second"]


@pytest.mark.unit
def test_separator_list_is_copied():
    separators = ["\n", ""]
    splitter = RecursiveCharacterTextSplitter(separators=separators)
    separators.append(" ")
    assert splitter.separators == ["\n", ""]

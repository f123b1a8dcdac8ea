"""Separator presets for the document formats the splitter knows about."""

from __future__ import annotations

from enum import Enum

from textchunk.core.errors import UnsupportedLanguageError

__all__ = ["Language", "get_separators_for_language"]


class Language(str, Enum):
    MARKDOWN = "markdown"
    LATEX = "latex"
    HTML = "html"


def get_separators_for_language(language: Language | str) -> list[str]:
    """Return a fresh copy of the ordered separators for *language*.

    Raises:
        UnsupportedLanguageError: for any tag outside :class:`Language`.
    """
    try:
        language = Language(language)
    except ValueError:
        raise UnsupportedLanguageError(language) from None

    if language is Language.MARKDOWN:
        return [
            # Markdown headings, starting with level 2
            "\n## ",
            "\n### ",
            "\n#### ",
            "\n##### ",
            "\n###### ",
            # Setext headings (underlined with --- / ===) are not handled
            # End of code block
            "```\n\n",
            # Horizontal rules; only the three-character forms
            "\n\n***\n\n",
            "\n\n---\n\n",
            "\n\n___\n\n",
            "\n\n",
            "\n",
            " ",
            "",
        ]
    elif language is Language.LATEX:
        return [
            # Sectioning commands
            "\n\\chapter{",
            "\n\\section{",
            "\n\\subsection{",
            "\n\\subsubsection{",
            # Environments
            "\n\\begin{enumerate}",
            "\n\\begin{itemize}",
            "\n\\begin{description}",
            "\n\\begin{list}",
            "\n\\begin{quote}",
            "\n\\begin{quotation}",
            "\n\\begin{verse}",
            "\n\\begin{verbatim}",
            # Math environments
            "\n\\begin{align}",
            "$$",
            "$",
            # Plain lines
            "\n\n",
            "\n",
            " ",
            "",
        ]
    else:
        return [
            # Body and block-level tags
            "<body>",
            "<div>",
            "<p>",
            "<br>",
            "<li>",
            "<h1>",
            "<h2>",
            "<h3>",
            "<h4>",
            "<h5>",
            "<h6>",
            "<span>",
            "<table>",
            "<tr>",
            "<td>",
            "<th>",
            "<ul>",
            "<ol>",
            "<header>",
            "<footer>",
            "<nav>",
            # Head
            "<head>",
            "<style>",
            "<script>",
            "<meta>",
            "<title>",
            # Plain text
            " ",
            "",
        ]

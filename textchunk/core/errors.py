"""Exceptions raised by the splitter configuration layer."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Invalid split policy (e.g. ``chunk_overlap >= chunk_size``)."""


class UnsupportedLanguageError(ValueError):
    """No separator preset exists for the requested language tag."""

    def __init__(self, language: object):
        self.language = language
        super().__init__(f"Language {language} is not supported.")

"""Errors raised while loading a Markdown corpus."""

from __future__ import annotations

from pathlib import Path


class CorpusError(Exception):
    """Base class for failures that abort a corpus load."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class DirectoryError(CorpusError):
    """The corpus directory is missing, not a directory, or unreadable."""


class ReadError(CorpusError):
    """A selected file could not be opened or decoded as text."""

"""Utility helpers for working with files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator


def normalize_extension(extension: str) -> str:
    """Return ``extension`` as a path suffix, e.g. ``md`` -> ``.md``."""
    return "." + extension[1:] if extension.startswith(".") else "." + extension


def iter_markdown_paths(directory: Path, extension: str = "md") -> Iterator[Path]:
    """Yield files directly inside ``directory`` whose suffix matches exactly.

    Entries come back in directory-listing order; subdirectories are not
    descended into. ``OSError`` from listing propagates to the caller.
    """
    suffix = normalize_extension(extension)
    for child in directory.iterdir():
        if child.suffix == suffix and child.is_file():
            yield child

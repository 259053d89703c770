"""Markdown corpus loading.

Reads every matching file of a directory into memory. Loading is
all-or-nothing: any unreadable file aborts the whole corpus.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from sentence_extractor.config import DEFAULT_ENCODING, DEFAULT_EXTENSION
from sentence_extractor.errors import DirectoryError, ReadError
from sentence_extractor.models import Document
from sentence_extractor.utils.files import iter_markdown_paths

LOGGER = logging.getLogger(__name__)


def find_markdown_files(
    directory: Path, extension: str = DEFAULT_EXTENSION, *, sort_paths: bool = False
) -> List[Path]:
    """List the Markdown files directly inside ``directory``."""
    directory = Path(directory)
    if not directory.is_dir():
        LOGGER.error("Not a readable directory: %s", directory)
        raise DirectoryError(f"Not a directory: {directory}", directory)

    try:
        paths = list(iter_markdown_paths(directory, extension))
    except OSError as exc:
        LOGGER.error("Failed to list %s: %s", directory, exc)
        raise DirectoryError(f"Cannot list directory {directory}: {exc}", directory) from exc

    if sort_paths:
        paths.sort()
    return paths


def read_document(path: Path, *, encoding: str = DEFAULT_ENCODING) -> Document:
    """Read one file fully as text."""
    path = Path(path)
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.error("Failed to read %s: %s", path, exc)
        raise ReadError(f"Cannot read {path}: {exc}", path) from exc

    LOGGER.debug("Read %s (%d chars)", path, len(text))
    return Document(path=path, text=text)


def load_corpus(
    directory: Path,
    extension: str = DEFAULT_EXTENSION,
    *,
    encoding: str = DEFAULT_ENCODING,
    sort_paths: bool = False,
) -> List[Document]:
    """Load every Markdown file of ``directory`` in listing order.

    Raises:
        DirectoryError: the directory cannot be listed.
        ReadError: a matching file cannot be read or decoded. No partial
            corpus is returned.
    """
    paths = find_markdown_files(directory, extension, sort_paths=sort_paths)
    corpus = [read_document(path, encoding=encoding) for path in paths]
    LOGGER.info("Loaded %d Markdown files from %s", len(corpus), directory)
    return corpus


def load_file(path: Path, *, encoding: str = DEFAULT_ENCODING) -> List[Document]:
    """Load a single known file as a one-document corpus."""
    path = Path(path)
    if not path.is_file():
        LOGGER.error("Not a regular file: %s", path)
        raise ReadError(f"Not a file: {path}", path)
    return [read_document(path, encoding=encoding)]

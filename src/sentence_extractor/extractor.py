"""Sentence extraction pipeline."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, List, Sequence

from sentence_extractor.config import DEFAULT_ENCODING, DEFAULT_EXTENSION, ParserOptions
from sentence_extractor.ingestion.markdown_loader import load_corpus, load_file
from sentence_extractor.models import Document, ExtractedDocument
from sentence_extractor.parsing.sentences import parse_sentences

LOGGER = logging.getLogger(__name__)


class SentenceExtractor:
    """Coordinates corpus loading and per-document parsing."""

    def __init__(
        self,
        options: ParserOptions | None = None,
        *,
        extension: str = DEFAULT_EXTENSION,
        encoding: str = DEFAULT_ENCODING,
        workers: int = 1,
        sort_paths: bool = False,
    ) -> None:
        self.options = options or ParserOptions()
        self.extension = extension
        self.encoding = encoding
        self.workers = max(workers, 1)
        self.sort_paths = sort_paths

    def extract(self, directory: Path) -> List[ExtractedDocument]:
        """Extract sentences from every Markdown file in ``directory``."""
        corpus = load_corpus(
            Path(directory),
            self.extension,
            encoding=self.encoding,
            sort_paths=self.sort_paths,
        )
        return self.parse_corpus(corpus)

    def extract_file(self, path: Path) -> List[ExtractedDocument]:
        """Extract sentences from a single Markdown file."""
        return self.parse_corpus(load_file(Path(path), encoding=self.encoding))

    def parse_corpus(self, corpus: Sequence[Document]) -> List[ExtractedDocument]:
        """Parse loaded documents, keeping corpus order."""
        if self.workers == 1 or len(corpus) < 2:
            return [self._parse_single(document) for document in corpus]

        # Documents share no parser state, so they can be mapped in parallel
        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            return list(pool.map(self._parse_single, corpus))

    def _parse_single(self, document: Document) -> ExtractedDocument:
        sentences = parse_sentences(document.text, self.options)
        LOGGER.debug("Parsed %d sentences from %s", len(sentences), document.path)
        return ExtractedDocument(path=document.path, sentences=sentences)


def get_sentences(
    directory: Path, extension: str = DEFAULT_EXTENSION, **kwargs: Any
) -> List[List[str]]:
    """Return the sentence lists of every Markdown file in ``directory``.

    Keyword arguments are forwarded to :class:`SentenceExtractor`.
    """
    extractor = SentenceExtractor(extension=extension, **kwargs)
    return [document.sentences for document in extractor.extract(directory)]

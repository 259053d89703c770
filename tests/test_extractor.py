"""Tests for the extraction pipeline."""

from __future__ import annotations

from pathlib import Path

import pytest

from sentence_extractor.config import ParserOptions
from sentence_extractor.errors import DirectoryError, ReadError
from sentence_extractor.extractor import SentenceExtractor, get_sentences
from sentence_extractor.models import Document, ExtractedDocument

FIXTURES = Path(__file__).parent / "fixtures"

FIRST_SENTENCE = (
    "The following piece of code takes a `PathBuf` and extracts the file name, "
    "eventually converting it to an _owned_ `String`."
)


class TestGetSentences:
    """Test get_sentences against the fixture articles."""

    def test_correct_articles(self) -> None:
        """Should find both Markdown fixtures and ignore other files."""
        articles = get_sentences(FIXTURES)
        assert len(articles) == 2

    def test_first_sentence_correct(self) -> None:
        """Should extract the first prose sentence after the front matter."""
        articles = get_sentences(FIXTURES, sort_paths=True)
        assert articles[0][0] == FIRST_SENTENCE

    def test_first_article(self) -> None:
        """Should extract prose and the code block in order."""
        articles = get_sentences(FIXTURES, sort_paths=True)
        assert articles[0] == [
            FIRST_SENTENCE,
            "fn file_name(path: PathBuf) -> String {\n"
            "    path.file_name().unwrap().to_string_lossy().into_owned()\n"
            "}\n",
            "A path is not guaranteed to be valid UTF-8.",
            "Converting it is lossy on some platforms.",
        ]

    def test_second_article(self) -> None:
        """Should join a carried-over tail with the following lines."""
        articles = get_sentences(FIXTURES, sort_paths=True)
        assert articles[1] == [
            "Small tools should fail fast.",
            "Nobody wants half a result. Errors from reading files are propagated "
            "to the caller.",
        ]

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Should propagate loader errors."""
        with pytest.raises(DirectoryError):
            get_sentences(tmp_path / "missing")


class TestSentenceExtractor:
    """Test SentenceExtractor."""

    def test_extract_returns_paths(self) -> None:
        """Should pair each sentence list with its source path."""
        documents = SentenceExtractor(sort_paths=True).extract(FIXTURES)

        assert [doc.path.name for doc in documents] == [
            "01-pathbuf-to-string.md",
            "02-error-handling.md",
        ]
        assert all(isinstance(doc, ExtractedDocument) for doc in documents)

    def test_parallel_matches_sequential(self) -> None:
        """Should produce identical ordered output with several workers."""
        sequential = SentenceExtractor(sort_paths=True).extract(FIXTURES)
        parallel = SentenceExtractor(workers=4, sort_paths=True).extract(FIXTURES)

        assert parallel == sequential

    def test_parse_corpus_keeps_order(self) -> None:
        """Should keep the corpus order for many documents."""
        corpus = [Document(path=Path(f"{i}.md"), text=f"Doc {i}.\n") for i in range(20)]

        documents = SentenceExtractor(workers=3).parse_corpus(corpus)

        assert [doc.sentences for doc in documents] == [[f"Doc {i}."] for i in range(20)]

    def test_parse_corpus_empty(self) -> None:
        """Should return nothing for an empty corpus."""
        assert SentenceExtractor().parse_corpus([]) == []

    def test_options_are_applied(self) -> None:
        """Should pass parser options to every document."""
        corpus = [Document(path=Path("a.md"), text="Done. Not done")]

        default = SentenceExtractor().parse_corpus(corpus)
        flushed = SentenceExtractor(ParserOptions(flush_trailing=True)).parse_corpus(corpus)

        assert default[0].sentences == ["Done."]
        assert flushed[0].sentences == ["Done.", "Not done"]

    def test_extract_file(self) -> None:
        """Should parse a single file as a one-document result."""
        documents = SentenceExtractor().extract_file(FIXTURES / "02-error-handling.md")

        assert len(documents) == 1
        assert len(documents[0]) == 2

    def test_extract_file_missing(self, tmp_path: Path) -> None:
        """Should propagate ReadError for a missing file."""
        with pytest.raises(ReadError):
            SentenceExtractor().extract_file(tmp_path / "missing.md")

    def test_worker_count_floor(self) -> None:
        """Should never use fewer than one worker."""
        assert SentenceExtractor(workers=0).workers == 1

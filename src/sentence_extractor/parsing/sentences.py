"""Split Markdown articles into sentences.

The parser is a single pass over the lines of a document. It drops headings,
front matter and fence markers, joins prose lines with spaces, and keeps each
fenced code block as one sentence with its line breaks intact.

Sentence boundaries are lexical: a line ending in ``.`` closes a sentence, and
``". "`` inside a prose line splits it. This is a heuristic, not real sentence
segmentation; abbreviations such as ``e.g. this`` are split too.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List

from sentence_extractor.config import ParserOptions
from sentence_extractor.parsing.state import INITIAL_STATE, advance


def iter_lines(text: str) -> Iterator[str]:
    """Yield the lines of ``text`` split on ``\\n``, dropping a trailing ``\\r``."""
    for line in text.split("\n"):
        yield line[:-1] if line.endswith("\r") else line


def iter_sentences(
    lines: Iterable[str], options: ParserOptions | None = None
) -> Iterator[str]:
    """Yield sentences as the lines that complete them are consumed.

    Text still buffered when the lines run out is discarded unless
    ``options.flush_trailing`` is set, in which case it is yielded with
    trailing whitespace removed.
    """
    options = options or ParserOptions()
    state = INITIAL_STATE
    for line in lines:
        state, completed = advance(state, line, options)
        yield from completed

    if options.flush_trailing and state.buffer.strip():
        yield state.buffer.rstrip()


def parse_sentences(text: str, options: ParserOptions | None = None) -> List[str]:
    """Parse one Markdown document into its ordered list of sentences.

    Never raises for malformed Markdown: unterminated fences or preambles
    simply yield fewer sentences.
    """
    return list(iter_sentences(iter_lines(text), options))

"""Line-level state machine behind the sentence parser.

``advance`` is a pure transition: given the current state and one source line
it returns the next state and any sentences the line completed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from sentence_extractor.config import ParserOptions

SENTENCE_BREAK = ". "
FENCE = "```"
PREAMBLE_DELIMITER = "---"


class ParserMode(Enum):
    NORMAL = "normal"
    PREAMBLE = "preamble"
    CODE_BLOCK = "code_block"
    # A "---" pair opened inside a fence; the fence resumes once it closes.
    CODE_PREAMBLE = "code_preamble"

    @property
    def in_preamble(self) -> bool:
        return self in (ParserMode.PREAMBLE, ParserMode.CODE_PREAMBLE)

    @property
    def in_code_block(self) -> bool:
        return self is ParserMode.CODE_BLOCK

    def toggle_preamble(self) -> ParserMode:
        return _PREAMBLE_TOGGLE[self]


_PREAMBLE_TOGGLE = {
    ParserMode.NORMAL: ParserMode.PREAMBLE,
    ParserMode.PREAMBLE: ParserMode.NORMAL,
    ParserMode.CODE_BLOCK: ParserMode.CODE_PREAMBLE,
    ParserMode.CODE_PREAMBLE: ParserMode.CODE_BLOCK,
}


@dataclass(frozen=True, slots=True)
class ParserState:
    """Current mode plus the sentence being accumulated."""

    mode: ParserMode = ParserMode.NORMAL
    buffer: str = ""


INITIAL_STATE = ParserState()


def _split_inline(buffer: str, line: str) -> Tuple[str, List[str]]:
    """Flush every fragment of ``line`` that is followed by ". "."""
    sentences: List[str] = []
    fragments = line.split(SENTENCE_BREAK)
    last = len(fragments) - 1
    for idx, fragment in enumerate(fragments):
        if not fragment:
            continue
        if idx < last:
            sentences.append(buffer + fragment + ".")
            buffer = ""
        else:
            # Unterminated tail carries over into the next line.
            buffer += fragment + " "
    return buffer, sentences


def advance(
    state: ParserState, line: str, options: ParserOptions | None = None
) -> Tuple[ParserState, List[str]]:
    """Apply one line to ``state``.

    Rules are checked in order: blank lines, headings, preamble delimiters,
    preamble content, fences, inline ". " splits, lines ending in a period,
    and finally continuation lines.
    """
    options = options or ParserOptions()
    mode = state.mode

    if not line:
        return state, []

    if line.startswith("#") and not (options.keep_code_headings and mode.in_code_block):
        return state, []

    if line.startswith(PREAMBLE_DELIMITER):
        return ParserState(mode.toggle_preamble(), state.buffer), []

    if mode.in_preamble:
        return state, []

    if line.startswith(FENCE):
        if mode.in_code_block:
            return ParserState(ParserMode.NORMAL), [state.buffer]
        return ParserState(ParserMode.CODE_BLOCK, state.buffer), []

    if not mode.in_code_block and SENTENCE_BREAK in line:
        buffer, sentences = _split_inline(state.buffer, line)
        return ParserState(mode, buffer), sentences

    if line.endswith("."):
        return ParserState(mode), [state.buffer + line]

    separator = "\n" if mode.in_code_block else " "
    return ParserState(mode, state.buffer + line + separator), []

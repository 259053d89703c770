"""Core sentence extractor data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(frozen=True, slots=True)
class Document:
    """Raw text of one Markdown source file."""

    path: Path
    text: str


@dataclass(slots=True)
class ExtractedDocument:
    """Sentences parsed from a document, in source order."""

    path: Path
    sentences: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.sentences)

"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


DEFAULT_EXTENSION = "md"
DEFAULT_ENCODING = "utf-8"


def _get_default_directory() -> Path:
    """Get the default corpus directory for the current working directory."""
    # Static site generators conventionally keep articles here
    local_posts = Path("content/_posts")
    if local_posts.is_dir():
        return local_posts

    return Path(".")


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Switches for the sentence parser's documented quirks.

    Both default to the historical behaviour: a trailing sentence without a
    closing period is dropped, and ``#`` lines are removed even inside code.
    """

    flush_trailing: bool = False
    keep_code_headings: bool = False


@dataclass(slots=True)
class AppConfig:
    directory: Path | None = None
    extension: str = DEFAULT_EXTENSION
    encoding: str = DEFAULT_ENCODING
    flush_trailing: bool = False
    keep_code_headings: bool = False
    workers: int = 1
    sort_paths: bool = False

    def __post_init__(self) -> None:
        if self.directory is None:
            self.directory = _get_default_directory()

    def resolve_directory(self, base_dir: Path | None = None) -> Path:
        if self.directory is None:
            self.directory = _get_default_directory()
        if Path(self.directory).is_absolute() or base_dir is None:
            return Path(self.directory)
        return base_dir / self.directory

    def parser_options(self) -> ParserOptions:
        return ParserOptions(
            flush_trailing=self.flush_trailing,
            keep_code_headings=self.keep_code_headings,
        )

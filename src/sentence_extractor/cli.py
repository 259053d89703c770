"""Command line interface for the sentence extractor."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from sentence_extractor.config import AppConfig
from sentence_extractor.errors import CorpusError
from sentence_extractor.extractor import SentenceExtractor
from sentence_extractor.models import ExtractedDocument


console = Console()
app = typer.Typer(help="Extract sentences from Markdown articles")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _print_documents(documents: List[ExtractedDocument], as_json: bool) -> None:
    if as_json:
        console.print_json(
            data=[
                {"path": str(document.path), "sentences": document.sentences}
                for document in documents
            ]
        )
        return

    for document in documents:
        console.print(
            f"[bold]{escape(str(document.path))}[/bold] ({len(document)} sentences)",
            soft_wrap=True,
        )
        for i, sentence in enumerate(document.sentences):
            # Sentences are arbitrary text, never rich markup
            console.print(f"{i}, {sentence}", markup=False, highlight=False, soft_wrap=True)


@app.command()
def extract(
    directory: Optional[Path] = typer.Argument(
        None, help="Directory with Markdown articles.", resolve_path=True
    ),
    ext: str = typer.Option(AppConfig().extension, "--ext", help="Markdown file extension"),
    flush_trailing: bool = typer.Option(
        AppConfig().flush_trailing, help="Keep a final sentence that has no closing period"
    ),
    keep_code_headings: bool = typer.Option(
        AppConfig().keep_code_headings, help="Keep '#' lines inside code blocks"
    ),
    workers: int = typer.Option(AppConfig().workers, help="Documents parsed in parallel"),
    sort: bool = typer.Option(AppConfig().sort_paths, "--sort", help="Sort files by name"),
    last: bool = typer.Option(False, "--last", help="Only print the last document"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Extract sentences from every Markdown file in a directory."""
    _setup_logging(verbose)
    config = AppConfig(
        directory=directory if directory is not None else AppConfig().directory,
        extension=ext,
        flush_trailing=flush_trailing,
        keep_code_headings=keep_code_headings,
        workers=workers,
        sort_paths=sort,
    )
    resolved_dir = config.resolve_directory(Path.cwd())

    extractor = SentenceExtractor(
        config.parser_options(),
        extension=config.extension,
        encoding=config.encoding,
        workers=config.workers,
        sort_paths=config.sort_paths,
    )
    try:
        documents = extractor.extract(resolved_dir)
    except CorpusError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if not documents:
        console.print("[yellow]No Markdown files found.[/yellow]")
        return

    if last:
        documents = documents[-1:]
    _print_documents(documents, as_json)


@app.command("file")
def extract_file(
    path: Path = typer.Argument(..., help="Markdown file to parse.", resolve_path=True),
    flush_trailing: bool = typer.Option(
        AppConfig().flush_trailing, help="Keep a final sentence that has no closing period"
    ),
    keep_code_headings: bool = typer.Option(
        AppConfig().keep_code_headings, help="Keep '#' lines inside code blocks"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Extract sentences from a single Markdown file."""
    _setup_logging(verbose)
    config = AppConfig(flush_trailing=flush_trailing, keep_code_headings=keep_code_headings)
    extractor = SentenceExtractor(config.parser_options(), encoding=config.encoding)

    try:
        documents = extractor.extract_file(path)
    except CorpusError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    _print_documents(documents, as_json)

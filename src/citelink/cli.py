"""CLI entry point — Typer app for citelink commands.

Usage:
    citelink annotate answer.txt --doc handbook.txt --doc faq.md
    citelink score "first sentence" "second sentence"
    citelink status
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

app = typer.Typer(
    name="citelink",
    help="Citation extraction — match response sentences to source documents.",
    no_args_is_help=True,
)

console = Console()

_RESPONSE_PATH = typer.Argument(..., help="File holding the response text")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.command()
def annotate(
    response_path: Annotated[Path, _RESPONSE_PATH],
    docs: list[Path] = typer.Option(
        ..., "--doc", "-d", help="Source document (repeatable)",
    ),
    max_citations: int | None = typer.Option(
        None, "--max", "-m", min=0, help="Maximum citations",
    ),
    strategy: str | None = typer.Option(
        None, "--strategy", "-s", help="Ranking strategy (greedy, weighted)",
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON"),
) -> None:
    """Cite a response against source documents and print the result."""
    from citelink.config import load_settings
    from citelink.documents.registry import DocumentRegistry
    from citelink.documents.schemas import SourceDocument
    from citelink.pipeline.formatting import format_citations
    from citelink.pipeline.processor import CitationProcessor

    settings = load_settings()
    if strategy:
        settings.ranking.strategy = strategy

    response_text = response_path.read_text(encoding="utf-8")
    # a path passed twice loads once
    registry = DocumentRegistry(SourceDocument.from_path(p) for p in docs)
    documents = registry.documents()

    try:
        processor = CitationProcessor(settings=settings)
    except ValueError as exc:
        console.print(f"[red]Error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    result = processor.process_response(response_text, documents, max_citations)

    if as_json:
        typer.echo(json.dumps(asdict(result), indent=2, default=str))
        return

    console.print(result.highlighted_content, markup=False, highlight=False, soft_wrap=True)

    if not result.citations:
        console.print("\n[dim]No citations found.[/]")
        return

    table = Table(title="Citations")
    table.add_column("#", style="cyan")
    table.add_column("Source")
    table.add_column("Confidence", justify="right")
    table.add_column("Response span")
    table.add_column("Snippet")

    for i, c in enumerate(result.citations, start=1):
        table.add_row(
            str(i),
            escape(c.source_document),
            f"{c.confidence:.2f}",
            f"{c.response_start_index}-{c.response_end_index}",
            escape(c.text_snippet[:60]),
        )

    console.print(table)
    console.print(format_citations(result.citations), markup=False)


@app.command()
def score(
    first: str = typer.Argument(..., help="First sentence"),
    second: str = typer.Argument(..., help="Second sentence"),
) -> None:
    """Print the Jaccard similarity of two sentences."""
    from citelink.config import load_settings
    from citelink.text.similarity import SimilarityScorer

    settings = load_settings()
    scorer = SimilarityScorer(settings.matching.min_token_length)
    value = scorer.score(first, second)
    passes = value > settings.matching.similarity_threshold

    console.print(f"Similarity: [bold]{value:.4f}[/]")
    console.print(
        f"Threshold {settings.matching.similarity_threshold}: "
        + ("[green]match[/]" if passes else "[yellow]no match[/]"),
    )


@app.command()
def status() -> None:
    """Show active settings and available ranking strategies."""
    from citelink import __version__
    from citelink.config import load_settings
    from citelink.ranking.factory import available_rankers

    settings = load_settings()

    console.print(f"\n[bold green]citelink[/] v{__version__}\n")

    table = Table(title="Settings")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value")

    for section_name, section in settings:
        for key, value in section:
            table.add_row(f"{section_name}.{key}", escape(str(value)))

    table.add_row("rankers", ", ".join(available_rankers()))

    console.print(table)


if __name__ == "__main__":
    app()

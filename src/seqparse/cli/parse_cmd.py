"""seqparse parse / detect -- read a sequence file and render the result."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from seqparse.config import config
from seqparse.exceptions import ReadError
from seqparse.ingestion.detect import detect_format
from seqparse.models import (
    DetectionFailed,
    FastaParsed,
    GenBankDocument,
    GenBankParsed,
    ParseFailed,
    ParseOutcome,
)
from seqparse.services import parse_service

console = Console()

SEQUENCE_PREVIEW = 60


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or config.debug else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _preview(sequence: str, full: bool) -> str:
    if full or len(sequence) <= SEQUENCE_PREVIEW:
        return sequence
    return f"{sequence[:SEQUENCE_PREVIEW]}..."


def _render_fasta(outcome: FastaParsed, full: bool) -> None:
    console.print(f"[bold]FASTA Records ({len(outcome.records)})[/bold]")
    for record in outcome.records:
        console.print(f"\n[bold cyan]{escape(record.header) or '-'}[/bold cyan]")
        console.print(f"  {_preview(record.sequence, full) or '-'}")
        console.print(f"  Length: {record.length} bp")


def _render_genbank(document: GenBankDocument) -> None:
    console.print("[bold]GenBank[/bold]")
    if document.locus:
        console.print(f"  LOCUS: {escape(document.locus)}")

    if not document.features:
        console.print("[yellow]No features found.[/yellow]")
        return

    table = Table(title=f"Features ({len(document.features)})")
    table.add_column("Key", style="cyan")
    table.add_column("Location")
    table.add_column("Qualifiers")
    for feature in document.features:
        qualifiers = "\n".join(
            f"{name}: {escape(value.display())}" for name, value in feature.qualifiers.items()
        )
        table.add_row(escape(feature.key), escape(feature.location), qualifiers or "-")
    console.print(table)


def _render_failure(outcome: ParseOutcome) -> None:
    if isinstance(outcome, DetectionFailed):
        console.print(f"[red]{outcome.message}[/red]")
    elif isinstance(outcome, ParseFailed):
        console.print(f"[red]{escape(outcome.reason)}[/red]")


def parse_cmd(
    path: Path = typer.Argument(..., help="Path to a FASTA or GenBank file"),
    output_json: bool = typer.Option(False, "--json", help="Output raw JSON"),
    full: bool = typer.Option(False, "--full", help="Print complete sequences"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Parse a FASTA or GenBank file."""
    _configure_logging(verbose)
    try:
        outcome = parse_service.parse_file(path)
    except ReadError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    if output_json:
        typer.echo(outcome.model_dump_json(indent=2))
    elif isinstance(outcome, FastaParsed):
        _render_fasta(outcome, full)
    elif isinstance(outcome, GenBankParsed):
        _render_genbank(outcome.document)
    else:
        _render_failure(outcome)

    if not outcome.ok:
        raise typer.Exit(code=1)


def detect_cmd(
    path: Path = typer.Argument(..., help="Path to a sequence file"),
):
    """Print the detected format of a file."""
    try:
        text = parse_service.read_sequence_file(path)
    except ReadError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    typer.echo(detect_format(text).value)

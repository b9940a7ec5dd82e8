import sys
from pathlib import Path

import typer

from moz60check.domain.services.diagnostic_parser import parse


def parse_output(
    source: Path | None = typer.Argument(
        None, help="File with raw moz60tool output (default: stdin)"
    ),
    compact: bool = typer.Option(
        False, "--compact", help="Print the single-line form sent to presentation processes"
    ),
) -> None:
    """Parse raw moz60tool output and print the per-file report as JSON."""
    if source is None:
        raw_text = sys.stdin.read()
    else:
        try:
            raw_text = source.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            typer.echo(f"Cannot read {source}: {e}", err=True)
            raise typer.Exit(1) from e

    report = parse(raw_text)

    if compact:
        typer.echo(report.to_handoff_line(), nl=False)
    else:
        typer.echo(report.model_dump_json(indent=2))

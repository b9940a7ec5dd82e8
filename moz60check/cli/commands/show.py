"""Presentation process: render one report read from stdin."""

import sys

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from moz60check.cli.formatters.report_formatter import format_read_error, format_report
from moz60check.cli.theme import theme
from moz60check.domain.entities.diagnostic_report import DiagnosticReport

console = Console()


def show_report(
    name: str = typer.Argument(..., help="Extension name"),
    uuid: str = typer.Argument(..., help="Extension UUID"),
    url: str = typer.Argument("", help="Extension homepage"),
) -> None:
    """Show a report handed over on stdin as a single JSON line."""
    try:
        report = DiagnosticReport.from_handoff_line(sys.stdin.readline())
    except ValueError as e:
        logger.error("Invalid report for {}: {}", uuid, e)
        format_read_error(console, uuid)
        raise typer.Exit(1) from e

    if report.is_clean:
        console.print(f"[{theme.SUCCESS_BOLD}]No problems found in {escape(uuid)}[/]")
        return

    format_report(console, name, uuid, url or None, report)

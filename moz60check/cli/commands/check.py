import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from moz60check.application.check_orchestrator import CheckOrchestrator
from moz60check.application.indicator import Indicator
from moz60check.cli.formatters.report_formatter import format_report
from moz60check.cli.formatters.status_formatter import format_results_table, format_status
from moz60check.cli.theme import theme
from moz60check.cli.utils import get_settings
from moz60check.domain.entities.diagnostic_report import DiagnosticReport
from moz60check.domain.value_objects.check_target import CheckTarget
from moz60check.domain.value_objects.target_status import TargetStatus
from moz60check.infrastructure.catalog.extension_catalog import (
    ExtensionCatalog,
    target_from_path,
)
from moz60check.infrastructure.config.settings import Settings
from moz60check.infrastructure.presentation.subprocess_presenter import (
    SubprocessPresenter,
    template_command,
)
from moz60check.infrastructure.tool.moz60tool_runner import Moz60ToolRunner

console = Console()


def check_extensions(
    ctx: typer.Context,
    paths: list[Path] | None = typer.Argument(None, help="Extension directories to check"),
    check_all: bool = typer.Option(False, "--all", "-a", help="Check every installed extension"),
    show: bool = typer.Option(
        False, "--show", help="Open a presentation process per extension with problems"
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with an error when the linter could not run"
    ),
) -> None:
    """Run moz60tool over extensions and report the results."""
    settings = get_settings(ctx)
    exit_code = asyncio.run(_check(settings, paths or [], check_all, show, strict))
    if exit_code:
        raise typer.Exit(exit_code)


def build_presenter(settings: Settings) -> SubprocessPresenter:
    if settings.presenter_command:
        return SubprocessPresenter(template_command(settings.presenter_command))
    return SubprocessPresenter()


def _print_change(target: CheckTarget, status: TargetStatus) -> None:
    console.print(f"  {format_status(status)} [{theme.DIM}]{escape(target.uuid)}[/]")


async def _check(
    settings: Settings,
    paths: list[Path],
    check_all: bool,
    show: bool,
    strict: bool,
) -> int:
    orchestrator = CheckOrchestrator(
        Moz60ToolRunner(settings.tool_path, settings.tool_timeout_s),
        build_presenter(settings) if show else None,
    )
    indicator = Indicator(orchestrator, ExtensionCatalog(settings.extension_dirs), _print_change)

    try:
        if check_all:
            indicator.populate()
        for path in paths:
            indicator.add_target(target_from_path(path))

        if not indicator.targets:
            console.print(f"[{theme.ERROR}]Nothing to check.[/] Pass extension paths or --all.")
            return 1

        reports: list[DiagnosticReport] = await asyncio.gather(*indicator.activate_all())
        results = [
            (target, indicator.status(target.uuid), report)
            for target, report in zip(indicator.targets, reports, strict=True)
        ]

        console.print()
        format_results_table(console, results, orchestrator.launch_failures)

        if show:
            await orchestrator.wait_presentations()
        else:
            for target, _, report in results:
                if not report.is_clean:
                    format_report(console, target.name, target.uuid, target.url, report)

        if strict and orchestrator.launch_failures:
            return 2
        return 1 if any(not report.is_clean for report in reports) else 0
    finally:
        await indicator.destroy()

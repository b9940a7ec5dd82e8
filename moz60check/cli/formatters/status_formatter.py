from rich.console import Console
from rich.markup import escape
from rich.table import Table

from moz60check.cli.theme import theme
from moz60check.domain.entities.diagnostic_report import DiagnosticReport
from moz60check.domain.value_objects.check_target import CheckTarget
from moz60check.domain.value_objects.target_status import TargetStatus

STATUS_STYLES = {
    TargetStatus.UNCHECKED: theme.STATUS_UNCHECKED,
    TargetStatus.CHECKING: theme.STATUS_CHECKING,
    TargetStatus.CLEAN: theme.STATUS_CLEAN,
    TargetStatus.ERRORS: theme.STATUS_ERRORS,
}

STATUS_ICONS = {
    TargetStatus.UNCHECKED: "?",
    TargetStatus.CHECKING: "…",
    TargetStatus.CLEAN: "✓",
    TargetStatus.ERRORS: "✗",
}


def format_status(status: TargetStatus) -> str:
    return f"[{STATUS_STYLES[status]}]{STATUS_ICONS[status]} {status.value}[/]"


def format_targets_table(console: Console, targets: list[CheckTarget], title: str) -> None:
    table = Table(title=title)
    table.add_column("UUID", style=theme.TABLE_ID)
    table.add_column("Name", style=theme.TABLE_VALUE)
    table.add_column("Path", style=theme.TABLE_LABEL)

    for target in targets:
        table.add_row(escape(target.uuid), escape(target.name), escape(str(target.path)))

    console.print(table)


def format_results_table(
    console: Console,
    results: list[tuple[CheckTarget, TargetStatus, DiagnosticReport]],
    failed: frozenset[str] = frozenset(),
) -> None:
    table = Table(title="moz60tool results")
    table.add_column("Extension", style=theme.TABLE_VALUE)
    table.add_column("Status")
    table.add_column("Files", justify="right")
    table.add_column("Lines", justify="right")

    for target, status, report in results:
        status_text = format_status(status)
        if target.uuid in failed:
            status_text += f" [{theme.WARNING}](linter failed)[/]"
        table.add_row(
            escape(target.name),
            status_text,
            str(len(report.files)),
            str(report.line_count),
        )

    console.print(table)

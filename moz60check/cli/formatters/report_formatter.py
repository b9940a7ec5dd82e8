from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from moz60check.cli.theme import theme
from moz60check.domain.entities.diagnostic_report import DiagnosticReport
from moz60check.domain.services.line_classifier import classify_line
from moz60check.domain.value_objects.diagnostic_line import ClassifiedLine, DiagnosticKind


def display_name(path: str, uuid: str) -> str:
    """Show paths relative to the extension directory when possible."""
    _, sep, rest = path.partition(uuid)
    return rest if sep and rest else path


def _format_line(path: str, classified: ClassifiedLine) -> Text:
    if classified.kind == DiagnosticKind.LOCATION:
        text = Text(
            f"Line {classified.line}, Column {classified.column}: {classified.message}",
            style=theme.DIAG_LOCATION,
        )
        text.stylize(Style(link=f"file://{path}"))
        return Text("\n").append_text(text)

    if classified.kind == DiagnosticKind.RECOMMENDATION:
        text = Text(classified.text, style=theme.DIAG_RECOMMENDATION)
        text.highlight_words(["CORRECT:"], style=theme.DIAG_CORRECT)
        text.highlight_words(["WRONG:"], style=theme.DIAG_WRONG)
        return text

    return Text(classified.text)


def format_file(path: str, lines: list[str], uuid: str) -> Panel:
    title = Text(display_name(path, uuid), style=theme.DIAG_FILE)
    body: list[Text] = []

    for line in lines:
        classified = classify_line(path, line)
        if classified.kind == DiagnosticKind.SUMMARY:
            # The count goes into the heading
            title.append(f" - {classified.text}", style=theme.DIAG_SUMMARY)
            continue
        body.append(_format_line(path, classified))

    return Panel(Group(*body), title=title, title_align="left", border_style=theme.BORDER_INFO)


def format_report(
    console: Console,
    name: str,
    uuid: str,
    url: str | None,
    report: DiagnosticReport,
) -> None:
    console.print(f"\n[{theme.HEADER}]{escape(name)}[/] [{theme.DIM}]{escape(uuid)}[/]")
    if url:
        console.print(f"[{theme.DIM_ITALIC}]{escape(url)}[/]")
    console.print()

    for path in report.files:
        console.print(format_file(path, report.lines_for(path), uuid))


def format_read_error(console: Console, uuid: str) -> None:
    console.print(
        Panel(
            Text(f"Error reading moz60tool output for {uuid}", justify="center"),
            border_style=theme.BORDER_ERROR,
        )
    )

import typer
from rich.console import Console
from rich.markup import escape

from moz60check.cli.formatters.status_formatter import format_targets_table
from moz60check.cli.theme import theme
from moz60check.cli.utils import get_settings
from moz60check.infrastructure.catalog.extension_catalog import ExtensionCatalog

console = Console()


def list_extensions(ctx: typer.Context) -> None:
    """List installed extensions that can be checked."""
    settings = get_settings(ctx)
    targets = ExtensionCatalog(settings.extension_dirs).discover()

    if not targets:
        console.print(f"[{theme.DIM}]No extensions found[/]")
        for directory in settings.extension_dirs:
            console.print(f"  [{theme.DIM}]searched {escape(str(directory))}[/]")
        return

    format_targets_table(console, targets, title="Extensions")

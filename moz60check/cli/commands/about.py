import typer
from rich.console import Console

from moz60check.cli.theme import theme
from moz60check.infrastructure.tool.moz60tool_runner import MOZ60TOOL_URL

console = Console()


def about_tool(
    open_browser: bool = typer.Option(False, "--open", help="Open the page in a browser"),
) -> None:
    """Show where moz60tool comes from."""
    console.print(f"[{theme.HEADER}]moz60tool[/] {MOZ60TOOL_URL}")
    if open_browser:
        typer.launch(MOZ60TOOL_URL)

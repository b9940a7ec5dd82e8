import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console

from moz60check.cli.commands import about, check, list_targets, parse_output, show
from moz60check.cli.theme import theme
from moz60check.cli.utils import get_log_dir
from moz60check.infrastructure.config.settings import ConfigError, load_settings
from moz60check.infrastructure.tool.moz60tool_runner import MOZ60TOOL_URL


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> Path:
    """Configure loguru logging and return the log file path."""
    logger.remove()

    file_path = log_file or get_log_dir() / "moz60check.log"
    file_path.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        file_path,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {process} | {level: <8} | {name}:{function}:{line} - {message}",
        level="DEBUG",
        rotation="10 MB",
        encoding="utf-8",
    )

    if verbose:
        logger.add(
            sys.stderr,
            format="{time:HH:mm:ss} | {level: <8} | {message}",
            level="DEBUG",
        )

    return file_path


app = typer.Typer(
    name="moz60check",
    help="moz60check - run moz60tool over GNOME Shell extensions",
    epilog=f"About moz60tool: {MOZ60TOOL_URL}",
    no_args_is_help=True,
)

# Register commands
app.command(name="check")(check.check_extensions)
app.command(name="list")(list_targets.list_extensions)
app.command(name="parse")(parse_output.parse_output)
app.command(name="show")(show.show_report)
app.command(name="about")(about.about_tool)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output", is_eager=True),
    config: Path | None = typer.Option(None, "--config", "-c", help="Config file"),
) -> None:
    """moz60check - run moz60tool over GNOME Shell extensions."""
    try:
        settings = load_settings(config)
    except ConfigError as e:
        Console(stderr=True).print(f"[{theme.ERROR_BOLD}]Configuration error:[/] {e}")
        raise typer.Exit(1) from e

    setup_logging(verbose=verbose, log_file=settings.log_file)
    ctx.obj = settings


if __name__ == "__main__":
    app()

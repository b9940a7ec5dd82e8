"""CLI utility functions."""

import os
from pathlib import Path

import typer

from moz60check.infrastructure.config.settings import Settings, load_settings


def get_log_dir() -> Path:
    """Return the directory log files are written to."""
    cache_home = os.environ.get("XDG_CACHE_HOME")
    base = Path(cache_home) if cache_home else Path.home() / ".cache"
    return base / "moz60check" / "logs"


def get_settings(ctx: typer.Context | None) -> Settings:
    """Settings loaded by the app callback, or the defaults."""
    if ctx is not None and isinstance(ctx.obj, Settings):
        return ctx.obj
    return load_settings()

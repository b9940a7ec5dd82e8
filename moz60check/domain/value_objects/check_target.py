from pathlib import Path

from pydantic import BaseModel, Field


class CheckTarget(BaseModel, frozen=True):
    """An extension directory to run the linter over."""

    uuid: str = Field(description="Stable identity of the target, e.g. the extension UUID")
    name: str = Field(description="Human readable name")
    path: Path = Field(description="Directory holding the target's JavaScript sources")
    url: str | None = Field(default=None, description="Optional homepage or repository URL")

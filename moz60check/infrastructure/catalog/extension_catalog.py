"""Discover GNOME Shell extensions installed on this machine."""

import json
import os
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ConfigDict

from moz60check.domain.value_objects.check_target import CheckTarget

METADATA_FILE = "metadata.json"
SYSTEM_EXTENSION_DIR = Path("/usr/share/gnome-shell/extensions")


class ExtensionMetadata(BaseModel):
    """The subset of an extension's metadata.json that we use."""

    model_config = ConfigDict(extra="ignore")

    uuid: str
    name: str
    url: str | None = None


def default_extension_dirs() -> list[Path]:
    """User extensions first, then system wide ones, like GNOME Shell."""
    data_home = os.environ.get("XDG_DATA_HOME")
    user_data = Path(data_home) if data_home else Path.home() / ".local" / "share"
    return [user_data / "gnome-shell" / "extensions", SYSTEM_EXTENSION_DIR]


def load_metadata(directory: Path) -> ExtensionMetadata | None:
    """Read metadata.json from an extension directory, None if missing or invalid."""
    path = directory / METADATA_FILE
    if not path.is_file():
        return None
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return ExtensionMetadata(**data)
    except (OSError, ValueError, TypeError) as e:
        logger.warning(f"Failed to load extension metadata from {path}: {e}")
        return None


def target_from_path(path: str | Path) -> CheckTarget:
    """Build a CheckTarget for an arbitrary directory.

    Uses metadata.json when present, the directory name otherwise.
    """
    directory = Path(path).expanduser().absolute()
    metadata = load_metadata(directory)
    if metadata is None:
        return CheckTarget(uuid=directory.name, name=directory.name, path=directory)
    return CheckTarget(uuid=metadata.uuid, name=metadata.name, path=directory, url=metadata.url)


class ExtensionCatalog:
    """Find extension directories in a list of install locations."""

    def __init__(self, search_dirs: list[Path] | None = None) -> None:
        self.search_dirs = search_dirs if search_dirs is not None else default_extension_dirs()

    def discover(self) -> list[CheckTarget]:
        targets: dict[str, CheckTarget] = {}

        for search_dir in self.search_dirs:
            if not search_dir.is_dir():
                logger.debug("Extension directory {} does not exist", search_dir)
                continue

            try:
                children = sorted(search_dir.iterdir())
            except PermissionError:
                logger.warning(f"Permission denied scanning {search_dir}")
                continue

            for child in children:
                if not child.is_dir():
                    continue
                metadata = load_metadata(child)
                if metadata is None:
                    continue
                if metadata.uuid in targets:
                    logger.debug(
                        "Skipping {} in {}, already found in {}",
                        metadata.uuid,
                        search_dir,
                        targets[metadata.uuid].path.parent,
                    )
                    continue
                targets[metadata.uuid] = CheckTarget(
                    uuid=metadata.uuid,
                    name=metadata.name,
                    path=child,
                    url=metadata.url,
                )

        return list(targets.values())

import json
import stat
from collections.abc import Callable
from pathlib import Path

import pytest

from moz60check.domain.value_objects.check_target import CheckTarget

FAKE_TOOL = """#!/bin/sh
echo "Scanning $1"
if grep -q "Lang.Class" "$1"; then
  echo "$1:1:5: Lang.Class is deprecated"
  echo "  WRONG: var Foo = new Lang.Class({"
  echo "  CORRECT: var Foo = class Foo {"
  echo "1 errors found."
else
  echo "0 errors found."
fi
echo ""
"""


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep config lookups and log files inside tmp_path."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CACHE_HOME", str(home / ".cache"))
    monkeypatch.setenv("XDG_DATA_HOME", str(home / ".local" / "share"))
    monkeypatch.chdir(tmp_path)
    return home


def _write_executable(path: Path, content: str) -> Path:
    path.write_text(content)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def make_script(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write an executable shell script to tmp_path."""

    def factory(name: str, content: str) -> Path:
        return _write_executable(tmp_path / name, content)

    return factory


@pytest.fixture
def fake_tool(tmp_path: Path) -> Path:
    return _write_executable(tmp_path / "moz60tool", FAKE_TOOL)


def _make_extension(
    root: Path,
    uuid: str,
    name: str | None = None,
    files: dict[str, str] | None = None,
    url: str | None = None,
) -> Path:
    directory = root / uuid
    directory.mkdir(parents=True)
    metadata = {"uuid": uuid, "name": name or uuid, "shell-version": ["3.30"]}
    if url:
        metadata["url"] = url
    (directory / "metadata.json").write_text(json.dumps(metadata))
    for relative, content in (files or {}).items():
        path = directory / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return directory


@pytest.fixture
def make_extension() -> Callable[..., Path]:
    return _make_extension


@pytest.fixture
def extensions_dir(tmp_path: Path) -> Path:
    root = tmp_path / "extensions"
    root.mkdir()
    return root


@pytest.fixture
def target(tmp_path: Path) -> CheckTarget:
    return CheckTarget(
        uuid="example@example.com",
        name="Example",
        path=tmp_path / "example@example.com",
        url="https://example.com/example",
    )

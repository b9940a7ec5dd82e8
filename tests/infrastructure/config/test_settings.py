"""Tests for settings loading."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from moz60check.infrastructure.config.settings import (
    PROJECT_CONFIG_NAME,
    ConfigError,
    Settings,
    load_settings,
    user_config_path,
)


def write_config(path: Path, data: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))
    return path


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults_without_config(self) -> None:
        """Defaults apply when no config file exists."""
        settings = load_settings()

        assert settings == Settings()
        assert settings.tool_path == "moz60tool"
        assert settings.tool_timeout_s == 120
        assert settings.presenter_command is None

    def test_explicit_path(self, tmp_path: Path) -> None:
        """An explicit config path is read."""
        path = write_config(tmp_path / "custom.json", {"tool_path": "/opt/moz60tool"})

        assert load_settings(path).tool_path == "/opt/moz60tool"

    def test_explicit_missing_path_raises(self, tmp_path: Path) -> None:
        """A missing explicit config path raises ConfigError."""
        with pytest.raises(ConfigError):
            load_settings(tmp_path / "missing.json")

    def test_project_config_before_user_config(self, tmp_path: Path) -> None:
        """The project config shadows the user config."""
        write_config(tmp_path / PROJECT_CONFIG_NAME, {"tool_timeout_s": 5})
        write_config(user_config_path(), {"tool_timeout_s": 50})

        assert load_settings().tool_timeout_s == 5

    def test_user_config(self) -> None:
        """The user config is read when no project config exists."""
        write_config(user_config_path(), {"presenter_command": ["viewer", "{uuid}"]})

        assert load_settings().presenter_command == ["viewer", "{uuid}"]

    def test_extension_dirs_are_expanded(self, isolated_env: Path, tmp_path: Path) -> None:
        """Extension directories have ~ expanded."""
        path = write_config(tmp_path / "c.json", {"extension_dirs": ["~/exts"]})

        assert load_settings(path).extension_dirs == [isolated_env / "exts"]

    @pytest.mark.parametrize(
        "content",
        [
            "{broken",
            "[1, 2]",
            json.dumps({"unknown_key": 1}),
            json.dumps({"tool_timeout_s": 0}),
            json.dumps({"presenter_command": ["sh", "-c", "cat > ${HOME}/{uuid}.json"]}),
        ],
    )
    def test_invalid_config_raises(self, tmp_path: Path, content: str) -> None:
        """Broken or invalid config files raise ConfigError."""
        path = tmp_path / "bad.json"
        path.write_text(content)

        with pytest.raises(ConfigError):
            load_settings(path)

    def test_presenter_command_with_escaped_braces(self, tmp_path: Path) -> None:
        """Doubled braces are kept for the presenter to format later."""
        command = ["sh", "-c", "cat > ${{HOME}}/{uuid}.json"]
        path = write_config(tmp_path / "c.json", {"presenter_command": command})

        assert load_settings(path).presenter_command == command


class TestSettingsValidation:
    """Tests for Settings field validators."""

    def test_unknown_placeholder_is_rejected(self) -> None:
        """A placeholder other than name, uuid, url or path fails validation."""
        with pytest.raises(ValidationError, match="presenter"):
            Settings(presenter_command=["viewer", "{target}"])

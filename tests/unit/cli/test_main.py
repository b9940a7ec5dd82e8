"""Tests for CLI main module."""

import json
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from moz60check.cli.main import app, setup_logging

runner = CliRunner()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self, tmp_path: Path) -> None:
        """Test default logging setup configures file handler."""
        from loguru import logger

        with patch("moz60check.cli.main.get_log_dir", return_value=tmp_path):
            log_file = setup_logging(verbose=False)

        assert len(logger._core.handlers) >= 1
        assert log_file.parent == tmp_path
        assert log_file.suffix == ".log"

    def test_setup_logging_verbose(self, tmp_path: Path) -> None:
        """Test verbose logging adds stderr handler."""
        from loguru import logger

        with patch("moz60check.cli.main.get_log_dir", return_value=tmp_path):
            setup_logging(verbose=True)

        assert len(logger._core.handlers) >= 2

    def test_setup_logging_explicit_file(self, tmp_path: Path) -> None:
        """Test an explicit log file path is used."""
        log_file = setup_logging(log_file=tmp_path / "logs" / "custom.log")

        assert log_file == tmp_path / "logs" / "custom.log"
        assert log_file.parent.is_dir()


class TestAppCallback:
    """Tests for the app callback."""

    def test_no_args_shows_help(self) -> None:
        """Running without a command shows help."""
        result = runner.invoke(app, [])

        assert "check" in result.output
        assert "parse" in result.output

    def test_invalid_config_exits(self, tmp_path: Path) -> None:
        """An invalid config file exits with 1."""
        config = tmp_path / "bad.json"
        config.write_text(json.dumps({"tool_timeout_s": -1}))

        result = runner.invoke(app, ["--config", str(config), "list"])

        assert result.exit_code == 1

    def test_log_file_from_config(self, tmp_path: Path) -> None:
        """The log file from the config is used."""
        log_file = tmp_path / "from-config.log"
        config = tmp_path / "config.json"
        config.write_text(
            json.dumps({"log_file": str(log_file), "extension_dirs": [str(tmp_path / "none")]})
        )

        result = runner.invoke(app, ["--config", str(config), "list"])

        assert result.exit_code == 0
        assert log_file.exists()

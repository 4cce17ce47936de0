"""Unit tests for the main CLI application."""

import logging
from pathlib import Path

from filesideload import __version__
from filesideload.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


def test_version() -> None:
    """--version prints the version and exits."""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"filesideload version {__version__}" in result.output


def test_help_lists_command_groups() -> None:
    """--help shows every command group."""
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for name in ("config", "ls", "ingest"):
        assert name in result.output


def test_verbose_enables_debug_logging(config_home: Path) -> None:
    """--verbose lowers the log level to DEBUG."""
    runner.invoke(app, ["--verbose", "config", "show"])

    assert logging.getLogger().level == logging.DEBUG


def test_quiet_raises_log_level(config_home: Path) -> None:
    """--quiet only keeps errors."""
    runner.invoke(app, ["--quiet", "config", "show"])

    assert logging.getLogger().level == logging.ERROR

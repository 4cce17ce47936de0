"""Unit tests for ingest CLI commands.

Tests for the filesideload ingest verify, plan and finalize commands.
"""

import json
from pathlib import Path

from filesideload.cli.main import app
from filesideload.core.settings import SideloadSettings, save_settings
from typer.testing import CliRunner

runner = CliRunner()


def _configure(drop_dir: Path, delete_file: bool = False) -> None:
    save_settings(SideloadSettings(directory=str(drop_dir), delete_file=delete_file))


class TestIngestVerify:
    """Tests for ingest verify."""

    def test_accepted(self, config_home: Path, drop_dir: Path) -> None:
        """An accepted file prints its canonical path."""
        _configure(drop_dir)

        result = runner.invoke(app, ["ingest", "verify", "a.txt"])

        assert result.exit_code == 0
        assert "a.txt" in result.output

    def test_rejected(self, config_home: Path, drop_dir: Path) -> None:
        """A rejected path prints the reason and exits 1."""
        _configure(drop_dir)

        result = runner.invoke(app, ["ingest", "verify", "../secret.txt"])

        assert result.exit_code == 1
        assert "Rejected" in result.output

    def test_directory_flag(self, config_home: Path, drop_dir: Path) -> None:
        """--dir expects a directory."""
        _configure(drop_dir)

        assert runner.invoke(app, ["ingest", "verify", "sub", "--dir"]).exit_code == 0
        result = runner.invoke(app, ["ingest", "verify", "sub"])
        assert result.exit_code == 1
        assert "not_a_file" in result.output


class TestIngestPlan:
    """Tests for ingest plan."""

    def test_single_file_json(self, config_home: Path, drop_dir: Path) -> None:
        """A single file request plans that file."""
        _configure(drop_dir)

        result = runner.invoke(app, ["ingest", "plan", "a.txt", "-f", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data == {
            "directory": None,
            "recursive": False,
            "files": [str(drop_dir / "a.txt")],
        }

    def test_directory_recursive_json(self, config_home: Path, drop_dir: Path) -> None:
        """A recursive directory request plans every nested file."""
        _configure(drop_dir)

        result = runner.invoke(app, ["ingest", "plan", "sub", "--dir", "-r", "-f", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["directory"] == str(drop_dir / "sub")
        assert data["files"] == [
            str(drop_dir / "sub" / "b.txt"),
            str(drop_dir / "sub" / "deeper" / "c.txt"),
        ]

    def test_illegal_directory(self, config_home: Path, drop_dir: Path) -> None:
        """Illegal paths are reported with exit code 1."""
        _configure(drop_dir)

        result = runner.invoke(app, ["ingest", "plan", "..", "--dir"])

        assert result.exit_code == 1
        assert "Illegal ingest directory" in result.output

    def test_empty_directory(self, config_home: Path, drop_dir: Path) -> None:
        """An empty directory plans nothing."""
        _configure(drop_dir)

        result = runner.invoke(app, ["ingest", "plan", "empty", "--dir"])

        assert result.exit_code == 0
        assert "No file to sideload" in result.output

    def test_table_output(self, config_home: Path, drop_dir: Path) -> None:
        """The default output lists files with a count."""
        _configure(drop_dir)

        result = runner.invoke(app, ["ingest", "plan", "sub", "--dir"])

        assert result.exit_code == 0
        assert "1 file(s) to sideload" in result.output


class TestIngestFinalize:
    """Tests for ingest finalize."""

    def test_disabled(self, config_home: Path, drop_dir: Path) -> None:
        """Nothing happens when deletion after import is off."""
        _configure(drop_dir)

        result = runner.invoke(app, ["ingest", "finalize", "a.txt", "--yes"])

        assert result.exit_code == 0
        assert "Deletion after import is disabled" in result.output
        assert (drop_dir / "a.txt").exists()

    def test_nothing_to_finalize(self, config_home: Path, drop_dir: Path) -> None:
        """Calling finalize without paths does nothing."""
        _configure(drop_dir, delete_file=True)

        result = runner.invoke(app, ["ingest", "finalize"])

        assert result.exit_code == 0
        assert "Nothing to finalize." in result.output

    def test_deletes_files_and_directory(self, config_home: Path, drop_dir: Path) -> None:
        """Imported files and their emptied directory are removed."""
        _configure(drop_dir, delete_file=True)

        result = runner.invoke(
            app,
            ["ingest", "finalize", "sub/b.txt", "sub/deeper/c.txt", "--dir", "sub", "--yes"],
        )

        assert result.exit_code == 0
        assert "completed successfully" in result.output
        assert not (drop_dir / "sub").exists()

    def test_confirmation_declined(self, config_home: Path, drop_dir: Path) -> None:
        """Declining the prompt leaves files in place."""
        _configure(drop_dir, delete_file=True)

        result = runner.invoke(app, ["ingest", "finalize", "a.txt"], input="n\n")

        assert result.exit_code == 0
        assert "Aborted." in result.output
        assert (drop_dir / "a.txt").exists()

    def test_confirmation_accepted(self, config_home: Path, drop_dir: Path) -> None:
        """Accepting the prompt deletes the files."""
        _configure(drop_dir, delete_file=True)

        result = runner.invoke(app, ["ingest", "finalize", "a.txt"], input="y\n")

        assert result.exit_code == 0
        assert not (drop_dir / "a.txt").exists()

    def test_dry_run(self, config_home: Path, drop_dir: Path) -> None:
        """Dry-run shows what would be removed without prompting."""
        _configure(drop_dir, delete_file=True)

        result = runner.invoke(app, ["ingest", "finalize", "a.txt", "--dir", "sub", "--dry-run"])

        assert result.exit_code == 0
        assert "DRY" in result.output
        assert (drop_dir / "a.txt").exists()
        assert (drop_dir / "sub").exists()

    def test_failure_exits_1(self, config_home: Path, drop_dir: Path) -> None:
        """A path that cannot be deleted makes the command fail."""
        _configure(drop_dir, delete_file=True)

        result = runner.invoke(app, ["ingest", "finalize", "missing.txt", "a.txt", "--yes"])

        assert result.exit_code == 1
        assert "FAIL" in result.output
        assert "1 succeeded, 1 failed." in result.output
        assert not (drop_dir / "a.txt").exists()

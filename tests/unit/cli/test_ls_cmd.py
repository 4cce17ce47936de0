"""Unit tests for listing CLI commands.

Tests for the filesideload ls files and ls dirs commands.
"""

import json
from pathlib import Path

from filesideload.cli.main import app
from filesideload.core.settings import SideloadSettings, save_settings
from typer.testing import CliRunner

runner = CliRunner()


def _configure(drop_dir: Path, **kwargs: object) -> None:
    save_settings(SideloadSettings(directory=str(drop_dir), **kwargs))  # type: ignore[arg-type]


class TestLsFiles:
    """Tests for ls files."""

    def test_requires_configuration(self, config_home: Path) -> None:
        """Listing without a sideload directory fails."""
        result = runner.invoke(app, ["ls", "files"])

        assert result.exit_code == 1
        assert "No sideload directory configured" in result.output

    def test_unavailable_directory(self, config_home: Path, tmp_path: Path) -> None:
        """Listing with a vanished sideload directory fails."""
        save_settings(SideloadSettings(directory=str(tmp_path / "gone")))

        result = runner.invoke(app, ["ls", "files"])

        assert result.exit_code == 1
        assert "Sideload directory is not available" in result.output

    def test_table_output(self, config_home: Path, drop_dir: Path) -> None:
        """Files are shown in a table with a count."""
        _configure(drop_dir)

        result = runner.invoke(app, ["ls", "files"])

        assert result.exit_code == 0
        assert "Files to Sideload" in result.output
        assert "sub/deeper/c.txt" in result.output
        assert "5 file(s) listed" in result.output

    def test_json_output(self, config_home: Path, drop_dir: Path) -> None:
        """JSON output lists paths in order with the truncation flag."""
        _configure(drop_dir)

        result = runner.invoke(app, ["ls", "files", "--flat", "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data == {"paths": ["a.txt", "File2.txt", "file10.txt"], "more_available": False}

    def test_limit(self, config_home: Path, drop_dir: Path) -> None:
        """A limit truncates the listing and flags more."""
        _configure(drop_dir)

        result = runner.invoke(app, ["ls", "files", "--limit", "2", "-f", "json"])

        data = json.loads(result.stdout)
        assert len(data["paths"]) == 2
        assert data["more_available"] is True

    def test_truncation_hint(self, config_home: Path, drop_dir: Path) -> None:
        """The table output hints at truncated listings."""
        _configure(drop_dir, max_files=1)

        result = runner.invoke(app, ["ls", "files"])

        assert result.exit_code == 0
        assert "raise the limit" in result.output

    def test_sub_directory_argument(self, config_home: Path, drop_dir: Path) -> None:
        """A directory argument restricts the listing."""
        _configure(drop_dir)

        result = runner.invoke(app, ["ls", "files", "sub", "--flat", "-f", "json"])

        assert json.loads(result.stdout)["paths"] == ["sub/b.txt"]

    def test_user_directory_labels(self, config_home: Path, drop_dir: Path) -> None:
        """Files of the user directory are labelled relative to it."""
        _configure(drop_dir, user_directory="sub")

        result = runner.invoke(app, ["ls", "files"])

        assert result.exit_code == 0
        assert "deeper/c.txt" in result.output
        assert "a.txt" not in result.output

    def test_empty_listing(self, config_home: Path, drop_dir: Path) -> None:
        """An empty directory prints a hint."""
        _configure(drop_dir)

        result = runner.invoke(app, ["ls", "files", "empty"])

        assert result.exit_code == 0
        assert "No file" in result.output


class TestLsDirs:
    """Tests for ls dirs."""

    def test_json_output(self, config_home: Path, drop_dir: Path) -> None:
        """Directories holding files are listed."""
        _configure(drop_dir)

        result = runner.invoke(app, ["ls", "dirs", "-f", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "paths": ["sub", "sub/deeper"],
            "more_available": False,
        }

    def test_depth(self, config_home: Path, drop_dir: Path) -> None:
        """--depth 0 lists direct sub-directories only."""
        _configure(drop_dir)

        result = runner.invoke(app, ["ls", "dirs", "--depth", "0", "-f", "json"])

        assert json.loads(result.stdout)["paths"] == ["sub"]

    def test_table_output(self, config_home: Path, drop_dir: Path) -> None:
        """Directories are shown in a table."""
        _configure(drop_dir)

        result = runner.invoke(app, ["ls", "dirs"])

        assert result.exit_code == 0
        assert "Directories to Sideload" in result.output
        assert "2 directory(s) listed" in result.output

    def test_no_directory(self, config_home: Path, drop_dir: Path) -> None:
        """A tree without listable directories prints a hint."""
        _configure(drop_dir)

        result = runner.invoke(app, ["ls", "dirs", "empty"])

        assert result.exit_code == 0
        assert "No directory" in result.output

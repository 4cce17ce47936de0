"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from filesideload.filesystem.service import SideloadFileSystem

_real_access = os.access


@pytest.fixture
def drop_dir(tmp_path: Path) -> Path:
    """Sideload directory with a small tree.

    Layout::

        drop/
            a.txt
            file10.txt
            File2.txt
            sub/
                b.txt
                deeper/
                    c.txt
            empty/
    """
    root = tmp_path / "drop"
    root.mkdir()
    (root / "a.txt").write_text("a")
    (root / "file10.txt").write_text("10")
    (root / "File2.txt").write_text("2")
    (root / "sub").mkdir()
    (root / "sub" / "b.txt").write_text("b")
    (root / "sub" / "deeper").mkdir()
    (root / "sub" / "deeper" / "c.txt").write_text("c")
    (root / "empty").mkdir()
    return root.resolve()


@pytest.fixture
def make_fs() -> Callable[..., SideloadFileSystem]:
    """Factory building a SideloadFileSystem from keyword settings."""

    def _make(directory: Path | str | None, **kwargs: object) -> SideloadFileSystem:
        return SideloadFileSystem.configure(directory, **kwargs)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def deny_access() -> Iterator[Callable[[Path, int], None]]:
    """Deny selected permission bits on selected paths via os.access.

    Usage: ``deny_access(path, os.W_OK)`` makes every ``os.access`` call
    on ``path`` requesting ``os.W_OK`` return False.
    """
    denied: dict[str, int] = {}

    def _fake_access(path: object, mode: int, *args: object, **kwargs: object) -> bool:
        key = os.fspath(path)  # type: ignore[arg-type]
        if key in denied and mode & denied[key]:
            return False
        return _real_access(path, mode, *args, **kwargs)  # type: ignore[arg-type]

    def _deny(path: Path, mode: int) -> None:
        denied[str(path)] = denied.get(str(path), 0) | mode

    with patch("os.access", side_effect=_fake_access):
        yield _deny


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home

"""Lazy, pruned directory traversal.

Yields the entries of a directory tree one at a time. Each directory's
own entries are yielded (in natural order) before any of its
sub-directories is entered, so files directly inside the start
directory always come first. Sub-directories that are not readable and
traversable are yielded but never entered; symlinked directories are
never entered either.
"""

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from filesideload.utils.sorting import natural_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WalkEntry:
    """A filesystem entry met during a walk.

    Attributes:
        path: Entry path (not resolved) below the walked directory.
        depth: 0 for direct children of the walked directory.
        is_dir: Entry is a directory (symlinks followed).
        is_symlink: Entry itself is a symbolic link.
    """

    path: Path
    depth: int
    is_dir: bool
    is_symlink: bool


def is_traversable(path: Path) -> bool:
    """Check if a directory can be listed and entered."""
    return os.access(path, os.R_OK | os.X_OK)


def is_fully_accessible(path: Path) -> bool:
    """Check if an entry is readable, writable and executable."""
    return os.access(path, os.R_OK | os.W_OK | os.X_OK)


def _scan(directory: Path, depth: int) -> list[WalkEntry]:
    """List one directory level, sorted naturally; empty on any error."""
    try:
        with os.scandir(directory) as it:
            raw = list(it)
    except OSError as e:
        logger.debug("Skipping unreadable directory %s: %s", directory, e)
        return []

    entries: list[WalkEntry] = []
    for item in sorted(raw, key=lambda i: (natural_key(i.name), i.name)):
        try:
            is_dir = item.is_dir()
            is_symlink = item.is_symlink()
        except OSError:
            is_dir = False
            is_symlink = False
        entries.append(WalkEntry(Path(item.path), depth, is_dir, is_symlink))
    return entries


def iter_entries(
    directory: Path,
    *,
    recursive: bool = True,
    max_depth: int = -1,
) -> Iterator[WalkEntry]:
    """Walk a directory tree lazily.

    Args:
        directory: Directory to walk.
        recursive: Descend into sub-directories.
        max_depth: Deepest level entered (-1 = unbounded, 0 = direct
            children only). Ignored when ``recursive`` is False.

    Yields:
        WalkEntry for every entry below ``directory``.
    """
    yield from _walk(directory, 0, recursive, max_depth)


def _walk(directory: Path, depth: int, recursive: bool, max_depth: int) -> Iterator[WalkEntry]:
    entries = _scan(directory, depth)
    yield from entries

    if not recursive or (max_depth >= 0 and depth >= max_depth):
        return

    for entry in entries:
        if not entry.is_dir or entry.is_symlink:
            continue
        if not is_traversable(entry.path):
            logger.debug("Pruning directory without permission: %s", entry.path)
            continue
        yield from _walk(entry.path, depth + 1, recursive, max_depth)

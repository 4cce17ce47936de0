"""Removal of sideload directories emptied by an import.

Removal is best-effort: it runs after the import already succeeded, so
any failure is logged and reported as False rather than raised.
"""

import logging
import os
from pathlib import Path

from filesideload.filesystem.walker import is_fully_accessible, iter_entries

logger = logging.getLogger(__name__)


def dir_has_no_file_and_is_removable(directory: Path) -> bool:
    """Check if a directory holds no file and could be removed entirely.

    The whole subtree is walked: the check fails as soon as a
    non-directory entry is met, or a directory that is not readable,
    writable and executable.

    Args:
        directory: Directory to inspect, already verified.

    Returns:
        True when only removable, file-free directories remain.
    """
    if not directory.is_dir() or not is_fully_accessible(directory):
        return False

    for entry in iter_entries(directory, recursive=True):
        if not entry.is_dir or entry.is_symlink:
            return False
        if not is_fully_accessible(entry.path):
            return False
    return True


def remove_tree(directory: Path) -> bool:
    """Remove a directory and everything inside it, best-effort.

    Only existing, readable and writable directories are touched.
    Children are removed depth-first; symbolic links are unlinked, never
    followed. Individual failures are logged and skipped.

    Args:
        directory: Directory to remove.

    Returns:
        True if the directory itself was removed.
    """
    try:
        if directory.is_symlink() or not directory.is_dir():
            return False
    except OSError:
        return False
    if not os.access(directory, os.R_OK | os.W_OK):
        return False

    try:
        with os.scandir(directory) as it:
            children = list(it)
    except OSError as e:
        logger.warning("Cannot list directory for removal %s: %s", directory, e)
        return False

    for child in children:
        path = Path(child.path)
        try:
            if child.is_dir(follow_symlinks=False):
                remove_tree(path)
            else:
                path.unlink()
        except OSError as e:
            logger.warning("Cannot remove %s: %s", path, e)

    try:
        directory.rmdir()
    except OSError as e:
        logger.warning("Cannot remove directory %s: %s", directory, e)
        return False

    logger.info("Removed emptied sideload directory %s", directory)
    return True

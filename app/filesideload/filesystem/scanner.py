"""Bounded listing of files and directories available to sideload.

DirectoryScanner walks the sideload directory, gates every entry through
PathVerifier and returns root-relative paths in a deterministic,
case-insensitive natural order. Results are recomputed on every call.
"""

import logging
import os
from pathlib import Path

from filesideload.filesystem.models import ScanResult, SideloadConfig
from filesideload.filesystem.verifier import PathVerifier
from filesideload.filesystem.walker import is_fully_accessible, iter_entries
from filesideload.utils.sorting import natural_sorted

logger = logging.getLogger(__name__)


class DirectoryScanner:
    """Lists files and sub-directories of the sideload directory.

    Args:
        config: Sideload configuration (root, deletion mode, default caps).
        verifier: Verifier gating each entry. Built from config if omitted.
    """

    def __init__(self, config: SideloadConfig, verifier: PathVerifier | None = None) -> None:
        self._config = config
        self._verifier = verifier if verifier is not None else PathVerifier(config)

    def list_files(
        self,
        directory: str | Path | None = None,
        recursive: bool = False,
        max_files: int | None = None,
    ) -> ScanResult:
        """List files available to sideload from a directory.

        Files directly inside ``directory`` are listed first, then files of
        sub-directories; each group is in case-insensitive natural order.

        Args:
            directory: Directory to list (absolute or root-relative).
                Defaults to the sideload directory.
            recursive: Include files of sub-directories.
            max_files: Cap on listed files. None uses the configured cap,
                0 means unbounded.

        Returns:
            ScanResult with root-relative paths.
        """
        real_dir = self._verify_start(directory)
        if real_dir is None:
            return ScanResult()

        limit = self._config.max_files if max_files is None else max_files
        top_level: list[str] = []
        nested: list[str] = []
        seen: set[str] = set()
        more_available = False

        for entry in iter_entries(real_dir, recursive=recursive):
            if entry.is_dir:
                continue
            real = self._verifier.verify(entry.path, base_dir=real_dir)
            if real is None:
                continue
            relative = self._relative(real)
            if relative in seen:
                continue
            if limit and len(seen) >= limit:
                more_available = True
                break
            seen.add(relative)
            if real.parent == real_dir:
                top_level.append(relative)
            else:
                nested.append(relative)

        paths = natural_sorted(top_level) + natural_sorted(nested)
        logger.debug("Listed %d file(s) in %s", len(paths), real_dir)
        return ScanResult(tuple(paths), more_available)

    def list_dirs(
        self,
        directory: str | Path | None = None,
        max_depth: int = -1,
        max_dirs: int | None = None,
    ) -> ScanResult:
        """List sub-directories that can be sideloaded as a whole.

        Args:
            directory: Directory to walk (absolute or root-relative).
                Defaults to the sideload directory.
            max_depth: Deepest level walked (-1 = unbounded, 0 = direct
                children only).
            max_dirs: Cap on listed directories. None uses the configured
                cap, 0 means unbounded.

        Returns:
            ScanResult with root-relative paths.
        """
        real_dir = self._verify_start(directory)
        if real_dir is None:
            return ScanResult()

        limit = self._config.max_directories if max_dirs is None else max_dirs
        seen: set[str] = set()
        more_available = False

        for entry in iter_entries(real_dir, recursive=True, max_depth=max_depth):
            if not entry.is_dir:
                continue
            real = self._verifier.verify(entry.path, as_directory=True, base_dir=real_dir)
            if real is None or not self.is_listable_dir(real):
                continue
            relative = self._relative(real)
            if relative in seen:
                continue
            if limit and len(seen) >= limit:
                more_available = True
                break
            seen.add(relative)

        logger.debug("Listed %d directory(ies) in %s", len(seen), real_dir)
        return ScanResult(tuple(natural_sorted(seen)), more_available)

    def is_listable_dir(self, directory: Path) -> bool:
        """Check if a directory is worth offering for a whole-directory import.

        The directory must contain at least one regular file below it that
        passes verification; other entries such as FIFOs or dangling
        symlinks do not count.
        In deletion mode, every directory of the subtree must also be
        readable, writable and executable and every file readable, so that
        the whole content could be removed once imported.

        Args:
            directory: Verified directory.

        Returns:
            True if the directory can be listed.
        """
        strict = self._config.delete_file
        if strict and not is_fully_accessible(directory):
            return False

        has_file = False
        for entry in iter_entries(directory, recursive=True):
            if entry.is_dir:
                if strict and not entry.is_symlink and not is_fully_accessible(entry.path):
                    return False
                continue
            if strict and not os.access(entry.path, os.R_OK):
                return False
            if self._verifier.verify(entry.path, base_dir=directory) is None:
                continue
            has_file = True
            if not strict:
                return True
        return has_file

    def _verify_start(self, directory: str | Path | None) -> Path | None:
        """Verify the directory a listing starts from."""
        root = self._config.root
        if root is None:
            return None
        start = directory if directory else root
        return self._verifier.verify(start, as_directory=True, allow_base=True)

    def _relative(self, real: Path) -> str:
        """Strip the sideload directory from a canonical path."""
        root = self._config.root
        if root is None:
            msg = "Sideload directory is not configured"
            raise RuntimeError(msg)
        return str(real.relative_to(root))

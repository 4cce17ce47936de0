"""Single entry point to the sideload filesystem layer.

SideloadFileSystem bundles the verifier, the scanner and the removal
helpers around one injected configuration. Hosts build it once per
request or process and call it for validation, listing and cleanup.
"""

import logging
from pathlib import Path

from filesideload.core.settings import SideloadSettings
from filesideload.filesystem.models import ScanResult, SideloadConfig, Verification
from filesideload.filesystem.remover import dir_has_no_file_and_is_removable, remove_tree
from filesideload.filesystem.scanner import DirectoryScanner
from filesideload.filesystem.verifier import PathVerifier

logger = logging.getLogger(__name__)


class SideloadFileSystem:
    """Verification, listing and removal over one sideload directory.

    Args:
        config: Sideload configuration shared by all components.
    """

    def __init__(self, config: SideloadConfig) -> None:
        self._config = config
        self._verifier = PathVerifier(config)
        self._scanner = DirectoryScanner(config, self._verifier)

    @classmethod
    def configure(
        cls,
        directory: str | Path | None,
        delete_file: bool = False,
        max_files: int = 0,
        max_directories: int = 0,
        user_directory: str = "",
    ) -> "SideloadFileSystem":
        """Build a filesystem layer from raw configuration values."""
        return cls(
            SideloadConfig.configure(
                directory,
                delete_file=delete_file,
                max_files=max_files,
                max_directories=max_directories,
                user_directory=user_directory,
            )
        )

    @classmethod
    def from_settings(cls, settings: SideloadSettings) -> "SideloadFileSystem":
        """Build a filesystem layer from persisted settings."""
        return cls(SideloadConfig.from_settings(settings))

    @property
    def config(self) -> SideloadConfig:
        """The injected configuration."""
        return self._config

    def verify(self, path: str | Path, as_directory: bool = False) -> Path | None:
        """Return the canonical path of a valid candidate, or None."""
        return self._verifier.verify(path, as_directory)

    def check(self, path: str | Path, as_directory: bool = False) -> Verification:
        """Verify a candidate and keep the rejection reason."""
        return self._verifier.check(path, as_directory)

    def list_files(
        self,
        directory: str | Path | None = None,
        recursive: bool = False,
        max_files: int | None = None,
    ) -> ScanResult:
        """List files available to sideload (see DirectoryScanner.list_files)."""
        return self._scanner.list_files(directory, recursive, max_files)

    def list_user_files(self, recursive: bool = True) -> ScanResult:
        """List files of the user directory, falling back to the sideload directory."""
        return self._scanner.list_files(self._config.user_root, recursive)

    def list_dirs(
        self,
        directory: str | Path | None = None,
        max_depth: int = -1,
        max_dirs: int | None = None,
    ) -> ScanResult:
        """List importable directories (see DirectoryScanner.list_dirs)."""
        return self._scanner.list_dirs(directory, max_depth, max_dirs)

    def is_listable_dir(self, directory: Path) -> bool:
        """Check if a verified directory would be offered for import."""
        return self._scanner.is_listable_dir(directory)

    def dir_has_no_file_and_is_removable(self, directory: str | Path) -> bool:
        """Check if a directory of the sideload directory is empty and removable."""
        real = self._verifier.verify(directory, as_directory=True)
        if real is None:
            return False
        return dir_has_no_file_and_is_removable(real)

    def remove_if_empty_and_removable(self, directory: str | Path) -> bool:
        """Remove a sub-directory left without files by an import.

        The sideload directory itself is never removed. Failures are
        logged and reported as False.

        Args:
            directory: Sub-directory (absolute or root-relative).

        Returns:
            True if the directory was removed.
        """
        real = self._verifier.verify(directory, as_directory=True)
        if real is None:
            logger.debug("Not removing unverified directory %s", directory)
            return False
        if not dir_has_no_file_and_is_removable(real):
            logger.debug("Not removing non-empty directory %s", real)
            return False
        return remove_tree(real)

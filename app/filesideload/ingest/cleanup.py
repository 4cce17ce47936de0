"""Removal of sideloaded sources after a successful import.

Handles deletion of imported source files with dry-run support, and
removal of the ingest directory once the last of its files is gone.
Every path is verified again right before it is touched, since the
listing it came from may be stale.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from filesideload.filesystem.service import SideloadFileSystem

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CleanupResult:
    """Result of a single cleanup operation.

    Attributes:
        path: Path that was operated on.
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
        dry_run: Whether this was a dry-run (nothing removed).
    """

    path: str
    success: bool
    error: str | None = None
    dry_run: bool = False


class SourceCleaner:
    """Deletes imported sources when deletion mode is enabled.

    Attributes:
        _fs: Sideload filesystem layer used to re-verify paths.
        _dry_run: If True, report what would be removed without removing.
    """

    def __init__(self, fs: SideloadFileSystem, dry_run: bool = False) -> None:
        """Initialize the SourceCleaner.

        Args:
            fs: Configured sideload filesystem layer.
            dry_run: If True, report what would be deleted without deleting.
        """
        self._fs = fs
        self._dry_run = dry_run

    @property
    def enabled(self) -> bool:
        """Check if the configuration asks for sources to be deleted."""
        return self._fs.config.delete_file

    def delete_sources(self, paths: list[str | Path]) -> list[CleanupResult]:
        """Delete imported source files and return results.

        Failures are isolated per path.

        Args:
            paths: Imported files (absolute or relative to the sideload directory).

        Returns:
            List of CleanupResult, one per input path.
        """
        if not self.enabled:
            return [
                CleanupResult(
                    path=str(path),
                    success=False,
                    error="Deletion after import is disabled",
                )
                for path in paths
            ]
        return [self._delete_single(path) for path in paths]

    def finalize_directory(self, directory: str | Path) -> CleanupResult:
        """Remove an ingest directory once all its files were imported.

        Args:
            directory: Ingest directory (absolute or relative to the sideload directory).

        Returns:
            CleanupResult; failure when the directory still holds files or
            cannot be removed.
        """
        path_str = str(directory)
        if not self.enabled:
            return CleanupResult(
                path=path_str,
                success=False,
                error="Deletion after import is disabled",
            )

        # Sources are still present during a dry-run, so emptiness cannot be checked.
        if self._dry_run:
            logger.info("Dry-run: would remove directory %s once empty", path_str)
            return CleanupResult(path=path_str, success=True, dry_run=True)

        if not self._fs.dir_has_no_file_and_is_removable(directory):
            return CleanupResult(
                path=path_str,
                success=False,
                error=f"Directory still has files or is not removable: {path_str}",
            )

        if not self._fs.remove_if_empty_and_removable(directory):
            return CleanupResult(
                path=path_str,
                success=False,
                error=f"Failed to remove directory: {path_str}",
            )
        return CleanupResult(path=path_str, success=True)

    def _delete_single(self, path: str | Path) -> CleanupResult:
        """Verify and delete one source file."""
        path_str = str(path)
        real = self._fs.verify(path)
        if real is None:
            return CleanupResult(
                path=path_str,
                success=False,
                error=f"Not a deletable file of the sideload directory: {path_str}",
            )

        if self._dry_run:
            logger.info("Dry-run: would delete %s", real)
            return CleanupResult(path=path_str, success=True, dry_run=True)

        try:
            real.unlink()
        except OSError as e:
            logger.warning("Cannot delete sideloaded file %s: %s", real, e)
            return CleanupResult(path=path_str, success=False, error=str(e))

        logger.info("Deleted sideloaded file %s", real)
        return CleanupResult(path=path_str, success=True)

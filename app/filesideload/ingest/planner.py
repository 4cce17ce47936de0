"""Validation and expansion of sideload requests.

RequestPlanner is the orchestration layer in front of the filesystem
core: it refuses illegal paths before any filesystem access, turns
verifier rejections into user-facing errors, and expands a directory
request into one import per contained file.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from filesideload.filesystem.models import RejectionReason
from filesideload.filesystem.service import SideloadFileSystem
from filesideload.ingest.requests import (
    DirectoryRequest,
    IllegalPathError,
    InvalidPathError,
    MissingPathError,
    SideloadRequest,
    SingleFileRequest,
)

logger = logging.getLogger(__name__)

# Paths refused outright: resolving them would point at the root or its parent.
_ILLEGAL_PATHS: frozenset[str] = frozenset({".", "..", "/"})

FIELD_DIRECTORY = "ingest_directory"
FIELD_FILENAME = "ingest_filename"

_ROOT_UNAVAILABLE = "The sideload directory is not configured or not available."


@dataclass(frozen=True, slots=True)
class ImportPlan:
    """Verified files to import for one request.

    Attributes:
        files: Canonical paths of the files to import, in listing order.
        directory: Canonical ingest directory for directory requests.
        recursive: Whether files of sub-directories are included.
    """

    files: list[Path] = field(default_factory=list)
    directory: Path | None = None
    recursive: bool = False


def _is_illegal(path: str) -> bool:
    return path in _ILLEGAL_PATHS or ".." in Path(path).parts


class RequestPlanner:
    """Validates sideload requests against the sideload directory.

    Args:
        fs: Configured sideload filesystem layer.
    """

    def __init__(self, fs: SideloadFileSystem) -> None:
        self._fs = fs

    def check_ingest_directory(self, directory: str) -> Path:
        """Validate the directory of a directory request.

        Args:
            directory: Path relative to the sideload directory, or absolute inside it.

        Returns:
            Canonical ingest directory.

        Raises:
            MissingPathError: If no directory is given.
            IllegalPathError: If the directory is ".", "..", "/" or contains "..".
            InvalidPathError: If the directory fails verification.
        """
        directory = directory.strip()
        if not directory:
            raise MissingPathError(FIELD_DIRECTORY, "No ingest directory specified.")
        if _is_illegal(directory):
            raise IllegalPathError(FIELD_DIRECTORY, "Illegal ingest directory specified.")

        result = self._fs.check(directory, as_directory=True)
        if result.path is not None:
            return result.path

        if result.reason == RejectionReason.ROOT_UNSET:
            message = _ROOT_UNAVAILABLE
        elif result.reason == RejectionReason.CONTAINER_NOT_WRITABLE:
            message = (
                f'Ingest directory "{directory}" is not writable but the configuration '
                "requires deletion after import."
            )
        elif result.reason == RejectionReason.NOT_A_DIRECTORY:
            message = f'Invalid ingest directory "{directory}" specified: not a directory'
        else:
            message = (
                f'Invalid ingest directory "{directory}" specified: '
                "incorrect path or insufficient permissions"
            )
        raise InvalidPathError(FIELD_DIRECTORY, message)

    def resolve_ingest_file(
        self,
        filename: str,
        ingest_directory: Path | None = None,
        recursive: bool = False,
    ) -> Path:
        """Validate one file to import.

        Args:
            filename: Path relative to the sideload directory, or absolute inside it.
            ingest_directory: Canonical directory of a directory request, if any.
            recursive: Whether the directory request includes sub-directories.

        Returns:
            Canonical file path.

        Raises:
            MissingPathError: If no filename is given.
            IllegalPathError: If the filename contains "..".
            InvalidPathError: If the file fails verification, or lies in a
                sub-directory of a non-recursive directory request.
        """
        filename = filename.strip()
        if not filename:
            raise MissingPathError(FIELD_FILENAME, "No ingest filename specified.")
        if _is_illegal(filename):
            raise IllegalPathError(FIELD_FILENAME, f'Illegal ingest filename "{filename}".')

        result = self._fs.check(filename)
        if result.path is None:
            if result.reason == RejectionReason.CONTAINER_NOT_WRITABLE:
                message = (
                    f'Cannot sideload file "{filename}": its directory is not writable but '
                    "the configuration requires deletion after import."
                )
            else:
                message = (
                    f'Cannot sideload file "{filename}". File does not exist or is not inside '
                    "the sideload directory or does not have sufficient permissions."
                )
            raise InvalidPathError(FIELD_FILENAME, message)

        real = result.path
        if ingest_directory is not None and not recursive and real.parent != ingest_directory:
            raise InvalidPathError(
                FIELD_FILENAME,
                f'Cannot sideload file "{filename}": ingestion of directory '
                f'"{ingest_directory}" is not set recursive.',
            )
        return real

    def expand(self, request: SideloadRequest) -> ImportPlan:
        """Turn a request into the list of files to import.

        Args:
            request: Single file or directory request.

        Returns:
            ImportPlan with verified canonical file paths.

        Raises:
            SideloadRequestError: If the request is invalid.
        """
        if isinstance(request, SingleFileRequest):
            return ImportPlan(files=[self.resolve_ingest_file(request.filename)])

        if isinstance(request, DirectoryRequest):
            directory = self.check_ingest_directory(request.directory)
            # Expansion is never capped: every file of the directory is imported.
            listing = self._fs.list_files(directory, request.recursive, max_files=0)
            root = self._fs.config.root
            if root is None:
                raise InvalidPathError(FIELD_DIRECTORY, _ROOT_UNAVAILABLE)
            files = [root / relative for relative in listing]
            logger.debug("Expanded %s into %d file(s)", directory, len(files))
            return ImportPlan(files=files, directory=directory, recursive=request.recursive)

        msg = f"Unsupported sideload request: {request!r}"
        raise TypeError(msg)

"""Sideload request variants and request errors.

A request either names one file or a whole directory of the sideload
directory. Directory requests may include files of sub-directories.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SingleFileRequest:
    """Import one file.

    Attributes:
        filename: Path relative to the sideload directory, or absolute inside it.
    """

    filename: str


@dataclass(frozen=True, slots=True)
class DirectoryRequest:
    """Import every file of a directory.

    Attributes:
        directory: Path relative to the sideload directory, or absolute inside it.
        recursive: Also import files of sub-directories.
    """

    directory: str
    recursive: bool = False


SideloadRequest = SingleFileRequest | DirectoryRequest


class SideloadRequestError(Exception):
    """Base exception for rejected sideload requests.

    Attributes:
        field: Request field the error applies to
            ("ingest_filename" or "ingest_directory").
        message: Human-readable explanation.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class MissingPathError(SideloadRequestError):
    """Raised when a request names no path at all."""


class IllegalPathError(SideloadRequestError):
    """Raised for paths refused before touching the filesystem (".", "..", "/")."""


class InvalidPathError(SideloadRequestError):
    """Raised when the path fails verification against the sideload directory."""

"""Filesystem domain models for sideload verification and listing.

This module defines the immutable configuration shared by the verifier,
scanner and remover, together with the result types they return.
"""

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from filesideload.core.settings import SideloadSettings

logger = logging.getLogger(__name__)


class RejectionReason(str, Enum):
    """Reason why a candidate path was rejected.

    Attributes:
        ROOT_UNSET: The sideload directory (or base override) is not configured.
        NOT_FOUND: The candidate cannot be resolved to an existing entry.
        IS_BASE: The candidate is the base directory itself.
        OUTSIDE_BASE: The candidate resolves outside the base directory.
        CONTAINER_NOT_WRITABLE: Deletion mode is on and the parent is read-only.
        NOT_READABLE: The entry cannot be read.
        NOT_A_DIRECTORY: A directory was expected.
        NOT_TRAVERSABLE: The directory is not executable.
        NOT_A_FILE: A regular file was expected.
    """

    ROOT_UNSET = "root_unset"
    NOT_FOUND = "not_found"
    IS_BASE = "is_base"
    OUTSIDE_BASE = "outside_base"
    CONTAINER_NOT_WRITABLE = "container_not_writable"
    NOT_READABLE = "not_readable"
    NOT_A_DIRECTORY = "not_a_directory"
    NOT_TRAVERSABLE = "not_traversable"
    NOT_A_FILE = "not_a_file"


@dataclass(frozen=True, slots=True)
class Verification:
    """Outcome of a single path verification.

    Attributes:
        path: Canonical path when accepted, None when rejected.
        reason: Rejection reason, None when accepted.
    """

    path: Path | None
    reason: RejectionReason | None = None

    @property
    def accepted(self) -> bool:
        """Check if the candidate was accepted."""
        return self.path is not None


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Bounded, ordered listing of root-relative paths.

    Attributes:
        paths: Relative paths (sideload directory stripped), in display order.
        more_available: True when the limit truncated the listing.
    """

    paths: tuple[str, ...] = ()
    more_available: bool = False

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def __bool__(self) -> bool:
        return bool(self.paths)


def resolve_root(directory: str | Path | None) -> Path | None:
    """Resolve a sideload directory to its canonical form.

    Args:
        directory: Administrator-supplied absolute path.

    Returns:
        Canonical path, or None when the directory is unset, relative,
        missing, not a directory, or not readable and traversable.
    """
    if not directory:
        return None

    path = Path(directory)
    if not path.is_absolute():
        logger.warning("Sideload directory must be absolute: %s", directory)
        return None

    try:
        real = path.resolve(strict=True)
        if not real.is_dir():
            logger.warning("Sideload directory is not a directory: %s", directory)
            return None
    except (OSError, RuntimeError, ValueError) as e:
        logger.warning("Cannot resolve sideload directory %s: %s", directory, e)
        return None

    if not os.access(real, os.R_OK | os.X_OK):
        logger.warning("Sideload directory is not readable: %s", directory)
        return None

    return real


def _resolve_user_root(root: Path | None, user_directory: str) -> Path | None:
    """Resolve the sub-directory listed to users, falling back to the root."""
    if root is None:
        return None
    if not user_directory or ".." in Path(user_directory).parts:
        return root

    try:
        real = (root / user_directory).resolve(strict=True)
    except (OSError, RuntimeError, ValueError):
        return root

    if real == root or root not in real.parents:
        return root
    if not real.is_dir() or not os.access(real, os.R_OK | os.X_OK):
        return root
    return real


@dataclass(frozen=True, slots=True)
class SideloadConfig:
    """Immutable sideload configuration injected into every component.

    Built once per request or process with :meth:`configure`; the root
    is resolved at that moment and never re-derived afterwards.

    Attributes:
        root: Canonical sideload directory, None when unset or invalid.
        delete_file: Whether sources are deleted after import.
        max_files: Default cap on listed files (0 = unbounded).
        max_directories: Default cap on listed directories (0 = unbounded).
        user_root: Canonical directory listed to users (root when unset).
    """

    root: Path | None
    delete_file: bool = False
    max_files: int = 0
    max_directories: int = 0
    user_root: Path | None = None

    def __post_init__(self) -> None:
        """Validate the listing caps."""
        if self.max_files < 0:
            msg = f"max_files cannot be negative, got {self.max_files}"
            raise ValueError(msg)
        if self.max_directories < 0:
            msg = f"max_directories cannot be negative, got {self.max_directories}"
            raise ValueError(msg)

    @classmethod
    def configure(
        cls,
        directory: str | Path | None,
        delete_file: bool = False,
        max_files: int = 0,
        max_directories: int = 0,
        user_directory: str = "",
    ) -> "SideloadConfig":
        """Build a configuration, resolving the sideload directory once.

        An invalid directory does not raise: the configuration is simply
        unset and every operation using it yields no results.

        Args:
            directory: Administrator-supplied sideload directory.
            delete_file: Delete sources after import.
            max_files: Cap on listed files (0 = unbounded).
            max_directories: Cap on listed directories (0 = unbounded).
            user_directory: Sub-path of the root listed to users.

        Returns:
            Frozen SideloadConfig.
        """
        root = resolve_root(directory)
        return cls(
            root=root,
            delete_file=delete_file,
            max_files=max_files,
            max_directories=max_directories,
            user_root=_resolve_user_root(root, user_directory),
        )

    @classmethod
    def from_settings(cls, settings: SideloadSettings) -> "SideloadConfig":
        """Build a configuration from persisted settings."""
        return cls.configure(
            settings.directory,
            delete_file=settings.delete_file,
            max_files=settings.max_files,
            max_directories=settings.max_directories,
            user_directory=settings.user_directory,
        )

    @property
    def is_valid(self) -> bool:
        """Check if the sideload directory resolved successfully."""
        return self.root is not None

    def user_label(self, relative: str) -> str:
        """Strip the user sub-directory prefix from a root-relative path.

        Args:
            relative: Path relative to the sideload directory.

        Returns:
            Path relative to the user directory when it lies inside it,
            the unchanged path otherwise.
        """
        if self.root is None or self.user_root is None or self.user_root == self.root:
            return relative
        prefix = str(self.user_root.relative_to(self.root)) + os.sep
        if relative.startswith(prefix):
            return relative[len(prefix) :]
        return relative

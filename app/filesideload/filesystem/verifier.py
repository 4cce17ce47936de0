"""Containment and permission checks for sideload candidates.

Every path handed to the sideload layer goes through PathVerifier before
it is listed, imported or deleted. Both the base directory and the
candidate are compared in canonical form, so ``..`` segments and symlinks
pointing outside the sideload directory resolve to an outside path and
fail the containment test.
"""

import logging
import os
from pathlib import Path

from filesideload.filesystem.models import RejectionReason, SideloadConfig, Verification

logger = logging.getLogger(__name__)


def is_within(path: Path, base: Path) -> bool:
    """Check if a canonical path lies on or under a canonical base.

    The prefix test is anchored on a separator so that ``/srv/drop2`` is
    not considered inside ``/srv/drop``.

    Args:
        path: Canonical path to test.
        base: Canonical base directory.

    Returns:
        True if path equals base or is a descendant of it.
    """
    path_str = str(path)
    base_str = str(base)
    if path_str == base_str:
        return True
    prefix = base_str if base_str.endswith(os.sep) else base_str + os.sep
    return path_str.startswith(prefix)


class PathVerifier:
    """Decides whether a candidate is a usable entry of the sideload directory.

    The verifier is stateless per call: its only inputs are the injected
    configuration (root and deletion mode) and the call arguments.

    Args:
        config: Sideload configuration.
    """

    def __init__(self, config: SideloadConfig) -> None:
        self._config = config

    def verify(
        self,
        candidate: str | Path,
        as_directory: bool = False,
        base_dir: Path | None = None,
        *,
        allow_base: bool = False,
    ) -> Path | None:
        """Verify a candidate and return its canonical path.

        Args:
            candidate: Absolute path, or path relative to the sideload directory.
            as_directory: Expect a traversable directory instead of a regular file.
            base_dir: Canonical containment base (defaults to the sideload directory).
            allow_base: Accept the base directory itself.

        Returns:
            Canonical path, or None if the candidate is rejected.
        """
        return self.check(candidate, as_directory, base_dir, allow_base=allow_base).path

    def check(
        self,
        candidate: str | Path,
        as_directory: bool = False,
        base_dir: Path | None = None,
        *,
        allow_base: bool = False,
    ) -> Verification:
        """Verify a candidate and report why it was rejected.

        Gates run in order, the first failure rejects:

        1. base directory unset
        2. candidate does not resolve to an existing entry
        3. candidate is the base directory (unless ``allow_base``)
        4. candidate lies outside the base directory
        5. deletion mode and containing directory not writable
        6. entry not readable
        7. wrong type: traversable directory or regular file

        Args:
            candidate: Absolute path, or path relative to the sideload directory.
            as_directory: Expect a traversable directory instead of a regular file.
            base_dir: Canonical containment base (defaults to the sideload directory).
            allow_base: Accept the base directory itself.

        Returns:
            Verification holding the canonical path or the rejection reason.
        """
        root = self._config.root
        base = base_dir if base_dir is not None else root
        if root is None or base is None:
            return Verification(None, RejectionReason.ROOT_UNSET)

        path = Path(candidate)
        if not path.is_absolute():
            path = root / path

        try:
            real = path.resolve(strict=True)
        except (OSError, RuntimeError, ValueError):
            return self._reject(candidate, RejectionReason.NOT_FOUND)

        if real == base and not allow_base:
            return self._reject(candidate, RejectionReason.IS_BASE)
        if not is_within(real, base):
            return self._reject(candidate, RejectionReason.OUTSIDE_BASE)

        try:
            # The base itself is never removed, so its parent may stay read-only.
            if self._config.delete_file and real != base and not os.access(real.parent, os.W_OK):
                return self._reject(candidate, RejectionReason.CONTAINER_NOT_WRITABLE)
            if not os.access(real, os.R_OK):
                return self._reject(candidate, RejectionReason.NOT_READABLE)
            if as_directory:
                if not real.is_dir():
                    return self._reject(candidate, RejectionReason.NOT_A_DIRECTORY)
                if not os.access(real, os.X_OK):
                    return self._reject(candidate, RejectionReason.NOT_TRAVERSABLE)
            elif not real.is_file():
                return self._reject(candidate, RejectionReason.NOT_A_FILE)
        except OSError:
            return self._reject(candidate, RejectionReason.NOT_FOUND)

        return Verification(real)

    @staticmethod
    def _reject(candidate: str | Path, reason: RejectionReason) -> Verification:
        logger.debug("Rejected sideload candidate %s: %s", candidate, reason.value)
        return Verification(None, reason)

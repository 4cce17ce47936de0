"""Sideload filesystem safety layer.

This module provides path verification against the sideload directory,
bounded and ordered listings of its files and directories, and removal
of directories emptied by an import.
"""

from filesideload.filesystem.models import (
    RejectionReason,
    ScanResult,
    SideloadConfig,
    Verification,
    resolve_root,
)
from filesideload.filesystem.remover import dir_has_no_file_and_is_removable, remove_tree
from filesideload.filesystem.scanner import DirectoryScanner
from filesideload.filesystem.service import SideloadFileSystem
from filesideload.filesystem.verifier import PathVerifier, is_within
from filesideload.filesystem.walker import WalkEntry, iter_entries

__all__ = [
    "DirectoryScanner",
    "PathVerifier",
    "RejectionReason",
    "ScanResult",
    "SideloadConfig",
    "SideloadFileSystem",
    "Verification",
    "WalkEntry",
    "dir_has_no_file_and_is_removable",
    "is_within",
    "iter_entries",
    "remove_tree",
    "resolve_root",
]

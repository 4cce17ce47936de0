"""Sideload request handling.

This module validates single-file and directory requests against the
sideload directory, expands directory requests into files, and cleans
up sources once they are imported.
"""

from filesideload.ingest.cleanup import CleanupResult, SourceCleaner
from filesideload.ingest.planner import ImportPlan, RequestPlanner
from filesideload.ingest.requests import (
    DirectoryRequest,
    IllegalPathError,
    InvalidPathError,
    MissingPathError,
    SideloadRequest,
    SideloadRequestError,
    SingleFileRequest,
)

__all__ = [
    "CleanupResult",
    "DirectoryRequest",
    "IllegalPathError",
    "ImportPlan",
    "InvalidPathError",
    "MissingPathError",
    "RequestPlanner",
    "SideloadRequest",
    "SideloadRequestError",
    "SingleFileRequest",
    "SourceCleaner",
]

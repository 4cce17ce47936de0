"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum

import typer

from filesideload.core.settings import SettingsError, load_settings_or_default
from filesideload.filesystem.service import SideloadFileSystem
from filesideload.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options for listings."""

    TABLE = "table"
    JSON = "json"


def require_filesystem() -> SideloadFileSystem:
    """Load settings and build the sideload filesystem layer.

    Exits with an error if the settings cannot be read or the sideload
    directory is unset or unusable.

    Returns:
        Configured SideloadFileSystem.

    Raises:
        typer.Exit: If no usable sideload directory is configured.
    """
    try:
        settings = load_settings_or_default()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    fs = SideloadFileSystem.from_settings(settings)
    if not fs.config.is_valid:
        if settings.directory:
            print_error(
                f"Sideload directory is not available: {settings.directory}. "
                "Run 'filesideload config check' for details."
            )
        else:
            print_error(
                "No sideload directory configured. "
                "Run 'filesideload config set --directory PATH' first."
            )
        raise typer.Exit(code=1)
    return fs

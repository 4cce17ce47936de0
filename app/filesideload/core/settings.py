"""Sideload settings and their persistence.

This module provides the settings model and I/O functions for the
sideload directory configured by the administrator: the directory
itself, whether sources are deleted after import, the listing caps,
and the sub-directory shown to users.

Settings are stored in ~/.config/filesideload/settings.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from filesideload.core.paths import get_settings_path

logger = logging.getLogger(__name__)


class SideloadSettings(BaseModel):
    """Persisted configuration of the sideload directory.

    Attributes:
        directory: Absolute path of the sideload directory (None = unset).
        delete_file: Delete a source file once it has been imported.
        max_files: Maximum number of files to list (0 = unbounded).
        max_directories: Maximum number of directories to list (0 = unbounded).
        user_directory: Sub-directory of the sideload directory shown to users.
    """

    model_config = ConfigDict(extra="forbid")

    directory: Annotated[
        str | None,
        Field(description="Absolute path to the sideload directory"),
    ] = None
    delete_file: Annotated[
        bool,
        Field(description="Delete sideloaded files after import"),
    ] = False
    max_files: Annotated[
        int,
        Field(ge=0, description="Maximum number of files to list (0 = no limit)"),
    ] = 0
    max_directories: Annotated[
        int,
        Field(ge=0, description="Maximum number of directories to list (0 = no limit)"),
    ] = 0
    user_directory: Annotated[
        str,
        Field(description="Sub-path of the sideload directory listed to users"),
    ] = ""

    @field_validator("directory", mode="before")
    @classmethod
    def strip_directory(cls, v: object) -> object:
        """Trim whitespace and treat a blank directory as unset."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("user_directory", mode="before")
    @classmethod
    def strip_user_directory(cls, v: object) -> object:
        """Trim whitespace and surrounding separators from the user sub-path."""
        if isinstance(v, str):
            return v.strip().strip("/")
        return v


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsNotFoundError(SettingsError):
    """Raised when the settings file is not found."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> SideloadSettings:
    """Load sideload settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated SideloadSettings object.

    Raises:
        SettingsNotFoundError: If the settings file doesn't exist.
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        raise SettingsNotFoundError(f"Settings not found: {settings_path}")

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    # Older files stored the checkbox value rather than a boolean.
    if isinstance(data.get("delete_file"), str):
        logger.warning(
            "Deprecated string value for 'delete_file' in %s, expected a boolean",
            settings_path,
        )
        data["delete_file"] = data["delete_file"].strip().lower() == "yes"

    try:
        return SideloadSettings.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def load_settings_or_default(path: Path | None = None) -> SideloadSettings:
    """Load settings, falling back to defaults when no file exists yet.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Loaded settings, or a default SideloadSettings.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    try:
        return load_settings(path)
    except SettingsNotFoundError:
        logger.debug("No settings file, using defaults")
        return SideloadSettings()


def save_settings(settings: SideloadSettings, path: Path | None = None) -> Path:
    """Save sideload settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        settings: The settings to save.
        path: Path to save the settings. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()

    data = _settings_to_dict(settings)

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path


def _settings_to_dict(settings: SideloadSettings) -> dict[str, object]:
    """Convert settings to a dictionary for TOML serialization.

    TOML has no null, so an unset directory is omitted.
    """
    result: dict[str, object] = {
        "delete_file": settings.delete_file,
        "max_files": settings.max_files,
        "max_directories": settings.max_directories,
    }
    if settings.directory is not None:
        result["directory"] = settings.directory
    if settings.user_directory:
        result["user_directory"] = settings.user_directory
    return result


def validate_directory(directory: str | None, delete_file: bool) -> list[str]:
    """Check that a directory can serve as the sideload directory.

    The directory must exist and be a readable, traversable directory.
    When sources are deleted after import it must also be writable.

    Args:
        directory: Candidate sideload directory.
        delete_file: Whether deletion mode is requested.

    Returns:
        Human-readable problems; empty when the directory is usable.
    """
    if not directory:
        return ["No sideload directory specified."]

    path = Path(directory)
    if not path.is_absolute():
        return [f"The sideload directory must be an absolute path: {directory}"]
    if not path.is_dir():
        return [f"The sideload directory is not a directory: {directory}"]

    problems: list[str] = []
    if not os.access(path, os.R_OK | os.X_OK):
        problems.append(f"The sideload directory is not readable: {directory}")
    if delete_file and not os.access(path, os.W_OK):
        problems.append(
            f"The sideload directory is not writable but deletion after import is enabled: "
            f"{directory}"
        )
    return problems

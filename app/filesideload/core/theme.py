"""Console colours for the filesideload CLI.

Colours come from the bundled ``data/theme.toml``, overridden key by key
by the user's ``theme.toml`` in the config directory when it exists.
Any colour Rich can parse is accepted ("green", "#0e8ac8", "color(33)").
"""

import logging
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.color import Color, ColorParseError
from rich.theme import Theme

from filesideload.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)


class ThemeColors(BaseModel):
    """Colour of each output role.

    Attributes:
        text: Plain text.
        muted: Secondary text, counts and hints.
        header: Table headers.
        border: Table borders.
        success: Completed operations.
        warning: Warnings and truncated listings.
        error: Errors and failed operations.
        info: Informational messages and dry-runs.
        file: File paths in listings.
        directory: Directory paths in listings.
    """

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    file: str = "#69B9A1"
    directory: str = "#0e8ac8"

    @field_validator("*")
    @classmethod
    def check_color(cls, value: str) -> str:
        """Reject values Rich cannot parse as a colour."""
        value = value.strip()
        try:
            Color.parse(value)
        except ColorParseError as e:
            msg = f"unknown color {value!r}"
            raise ValueError(msg) from e
        return value


def _read_colors(path: Path) -> dict[str, str]:
    """Read the [colors] table of a theme file.

    A missing, unreadable or malformed file yields an empty mapping.
    """
    try:
        with open(path, "rb") as f:
            table = tomllib.load(f).get("colors", {})
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    if not isinstance(table, dict):
        logger.warning("Ignoring theme file %s: 'colors' is not a table", path)
        return {}
    return {key: value for key, value in table.items() if isinstance(value, str)}


def load_theme(user_path: Path | None = None) -> ThemeColors:
    """Merge the bundled colours with the user overrides.

    Args:
        user_path: Override file. Defaults to theme.toml in the config directory.

    Returns:
        Validated colours; the built-in defaults when the merge is invalid.
    """
    bundled = resources.files("filesideload.data").joinpath("theme.toml")
    colors = _read_colors(Path(str(bundled)))
    colors.update(_read_colors(user_path or get_user_theme_path()))

    try:
        return ThemeColors(**colors)
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme used by the CLI consoles."""
    colors = colors or load_theme()
    styles = colors.model_dump()
    styles["error"] = f"bold {colors.error}"
    styles["directory"] = f"bold {colors.directory}"
    styles["bold_header"] = f"bold {colors.header}"
    styles["dim"] = colors.muted
    return Theme(styles)


@cache
def get_theme() -> Theme:
    """Get the Rich theme, loaded once per process."""
    return get_rich_theme()

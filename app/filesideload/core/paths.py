"""Locations of the filesideload configuration files.

Both files live in the XDG config directory:
- settings: $XDG_CONFIG_HOME/filesideload/settings.toml
- theme override: $XDG_CONFIG_HOME/filesideload/theme.toml

XDG_CONFIG_HOME defaults to ~/.config when unset or empty.
"""

import os
from pathlib import Path

APP_NAME = "filesideload"


def get_config_dir() -> Path:
    """Get the configuration directory, honouring XDG_CONFIG_HOME."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / APP_NAME


def get_settings_path() -> Path:
    """Get the sideload settings file path."""
    return get_config_dir() / "settings.toml"


def get_user_theme_path() -> Path:
    """Get the optional user theme override path."""
    return get_config_dir() / "theme.toml"

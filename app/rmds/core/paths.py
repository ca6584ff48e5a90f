"""XDG-compliant path management for rmds.

This module provides standardized paths following the XDG Base Directory
Specification for user configuration.

XDG defaults:
- Config: ~/.config/rmds/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "rmds"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/rmds/ (or XDG_CONFIG_HOME/rmds/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_settings_path() -> Path:
    """Get the default settings file path.

    Returns:
        Path to ~/.config/rmds/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme configuration path.

    Returns:
        Path to ~/.config/rmds/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_default_start_path() -> str | None:
    """Get the directory scanned when no paths are given.

    Reads ``$HOME`` directly rather than falling back to the password
    database, so an unset or empty variable means there is no default.

    Returns:
        The value of ``$HOME``, or None if it is unset or empty.
    """
    return os.environ.get("HOME") or None

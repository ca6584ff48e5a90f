"""User settings for rmds.

Settings are read from ``~/.config/rmds/config.toml`` and provide
defaults for the command-line flags. A missing default file is
equivalent to an empty one; a missing file named with --config is an
error.

Example::

    [clean]
    clean_all = true
    exclude = [".git", "node_modules"]
    max_depth = 8
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from rmds.cleaner.config import DS_STORE_NAME
from rmds.core.paths import get_settings_path

logger = logging.getLogger(__name__)

DEFAULT_TARGET_NAME = DS_STORE_NAME


class CleanSettings(BaseModel):
    """The ``[clean]`` table of the settings file.

    Attributes:
        name: Exact file name to delete when clean_all is off.
        clean_all: Delete both .DS_Store and AppleDouble (``._*``) files.
        exclude: Directory base names that are never entered.
        max_depth: Maximum recursion depth below each starting path.
        one_file_system: Do not cross filesystem boundaries.
    """

    model_config = ConfigDict(extra="forbid")

    name: Annotated[str, Field(min_length=1, description="File name to delete")] = (
        DEFAULT_TARGET_NAME
    )
    clean_all: Annotated[bool, Field(description="Also delete AppleDouble files")] = False
    exclude: Annotated[
        list[str],
        Field(default_factory=list, description="Directory names to skip"),
    ]
    max_depth: Annotated[
        int | None,
        Field(ge=0, description="Maximum recursion depth (None = unlimited)"),
    ] = None
    one_file_system: Annotated[
        bool,
        Field(description="Stay on the filesystem of each starting path"),
    ] = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names that would address a path instead of a file."""
        if os.sep in v or (os.altsep and os.altsep in v):
            msg = f"name must be a plain file name, got '{v}'"
            raise ValueError(msg)
        return v

    @field_validator("exclude")
    @classmethod
    def validate_exclude(cls, v: list[str]) -> list[str]:
        """Reject empty directory names."""
        if any(not name for name in v):
            msg = "exclude entries cannot be empty"
            raise ValueError(msg)
        return v


class Settings(BaseModel):
    """Top-level settings document.

    Attributes:
        clean: Defaults for the cleanup run.
    """

    model_config = ConfigDict(extra="forbid")

    clean: Annotated[
        CleanSettings,
        Field(default_factory=CleanSettings, description="Cleanup defaults"),
    ]


class SettingsError(Exception):
    """Raised when the settings file cannot be read or is invalid."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default
            settings path.

    Returns:
        Validated Settings object. Defaults if no path is given and the
        default settings file does not exist.

    Raises:
        SettingsError: If an explicitly given file does not exist, or a
            file cannot be read, is not valid TOML, or does not match the
            schema.
    """
    settings_path = path or get_settings_path()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        if path is not None:
            raise SettingsError(f"Settings file not found: {settings_path}") from e
        logger.debug("No settings file at %s, using defaults", settings_path)
        return Settings()
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings file {settings_path}: {e}") from e

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e

    logger.debug("Loaded settings from %s", settings_path)
    return settings

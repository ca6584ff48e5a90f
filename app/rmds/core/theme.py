"""Color theme for rmds output.

The bundled ``data/theme.toml`` defines every color. A user file at
``~/.config/rmds/theme.toml`` may override any subset of them.
"""

import logging
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from rmds.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)


class ThemeColors(BaseModel):
    """Hex colors for each kind of output line.

    Attributes:
        text: Base color of highlighted paths.
        muted: Secondary text such as the "Scanning:" prefix.
        info: Dry-run summary.
        success: Deletion summary.
        warning: Failed-deletion warning.
        error: Error prefix.
        deleted: "Deleted:" prefix.
        dry_run: "(dry-run) Would delete:" prefix.
        skipped: "Skipping (...)" prefix.
    """

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    info: str = "#0ec1c8"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    deleted: str = "#f53263"
    dry_run: str = "#0e8ac8"
    skipped: str = "#b2bec3"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Accept ``#RGB`` or ``#RRGGBB`` strings only."""
        if not isinstance(v, str):
            msg = f"{info.field_name}: color must be a string"
            raise ValueError(msg)
        color = v.strip()
        digits = color.removeprefix("#")
        if digits == color:
            msg = f"{info.field_name}: color must start with '#'"
            raise ValueError(msg)
        if len(digits) not in (3, 6):
            msg = f"{info.field_name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        if any(ch not in "0123456789abcdefABCDEF" for ch in digits):
            msg = f"{info.field_name}: invalid hex color '{color}'"
            raise ValueError(msg)
        return color


def get_bundled_theme_path() -> Path:
    """Path of the theme file shipped with the package."""
    return resources.files("rmds.data").joinpath("theme.toml")  # type: ignore[return-value]


def _read_colors(path: Path) -> dict[str, str]:
    """Read the ``[colors]`` table of a theme file.

    Missing, unreadable or malformed files yield an empty table so that
    a broken user theme never prevents a cleanup run.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    table = data.get("colors", {})
    if not isinstance(table, dict):
        logger.warning("Ignoring theme file %s: 'colors' is not a table", path)
        return {}
    return {key: value for key, value in table.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Merge the bundled theme with the user's overrides.

    Returns:
        ThemeColors from both files, or the built-in defaults if the
        merged colors do not validate.
    """
    colors = _read_colors(Path(get_bundled_theme_path()))
    overrides = _read_colors(get_user_theme_path())
    if overrides:
        logger.debug("Applying %d theme override(s)", len(overrides))

    try:
        return ThemeColors(**{**colors, **overrides})
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme used by the rmds consoles.

    Args:
        colors: Colors to use. Loaded from the theme files if None.

    Returns:
        Rich Theme with one style per output element.
    """
    if colors is None:
        colors = load_theme()

    return Theme(
        {
            "path": f"bold {colors.text}",
            "muted": colors.muted,
            "info": colors.info,
            "success": colors.success,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "deleted": colors.deleted,
            "dry_run": colors.dry_run,
            "skipped": colors.skipped,
        }
    )


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the Rich theme, loading it on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme

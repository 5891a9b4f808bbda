"""Colors for the pathsift CLI.

Defaults live on ThemeColors. Any of them can be overridden from
~/.config/pathsift/theme.toml:

    [colors]
    directory = "#5fafff"
    ambiguous = "#ffaf00"

A missing, unreadable or invalid override file leaves the defaults in
place.
"""

import logging
import re
import tomllib
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from pathsift.core.paths import get_theme_path
from pathsift.paths.classifier import PathKind

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) used by tables and messages.

    The four path kind colors are named after PathKind values.
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

    directory: str = "#0e8ac8"
    file: str = "#c1ff62"
    ambiguous: str = "#faf870"
    not_a_path: str = "#d44ebc"

    @field_validator("*")
    @classmethod
    def validate_hex_color(cls, v: str) -> str:
        """Validate that a color is a hex code."""
        color = v.strip()
        if not _HEX_COLOR.fullmatch(color):
            msg = f"invalid hex color {v!r}, expected #RGB or #RRGGBB"
            raise ValueError(msg)
        return color


def load_theme(path: Path | None = None) -> ThemeColors:
    """Load colors, applying overrides from the theme file on top of the defaults.

    Args:
        path: Override file. If None, uses the default theme path.

    Returns:
        Merged ThemeColors, or the defaults if the file is missing or invalid.
    """
    theme_path = path or get_theme_path()
    try:
        with open(theme_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return ThemeColors()
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", theme_path, e)
        return ThemeColors()

    try:
        colors = ThemeColors.model_validate(data.get("colors", {}))
    except ValidationError as e:
        logger.warning("Invalid colors in %s, using defaults: %s", theme_path, e)
        return ThemeColors()

    logger.debug("Loaded theme overrides from %s", theme_path)
    return colors


def get_rich_theme(colors: ThemeColors) -> Theme:
    """Map colors to the style names used in markup and tables."""
    styles = {
        "text": colors.text,
        "muted": colors.muted,
        "dim": colors.muted,
        "bold_header": f"bold {colors.header}",
        "border": colors.border,
        "success": colors.success,
        "warning": colors.warning,
        "error": f"bold {colors.error}",
        "info": colors.info,
    }
    for kind in PathKind:
        styles[f"kind.{kind.value}"] = getattr(colors, kind.value)
    styles["kind.directory"] = f"bold {colors.directory}"
    return Theme(styles)


@lru_cache(maxsize=1)
def get_theme() -> Theme:
    """Return the Rich theme, loading the theme file once per process."""
    return get_rich_theme(load_theme())

"""Color theme for rmd output.

Colors come from the bundled ``rmd/data/theme.toml``. A user file at
``$XDG_CONFIG_HOME/rmd/theme.toml`` may override any subset of them using
the same ``[colors]`` table. Entries that are not valid hex colors, or name
unknown styles, are skipped with a logged warning and the bundled value is
kept.
"""

import logging
import re
import tomllib
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from rmd.core.paths import get_theme_path

logger = logging.getLogger(__name__)

HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")

# Extra attributes layered on top of a style's color
STYLE_MODIFIERS: dict[str, str] = {
    "error": "bold",
    "deleted": "bold",
    "blocked": "bold",
}


class ThemeColors(BaseModel):
    """Hex colors for every named output style."""

    model_config = ConfigDict(extra="forbid")

    muted: str = "#b2bec3"
    warning: str = "#f5b332"
    error: str = "#f53263"

    # One style per result kind
    trashed: str = "#0e8ac8"
    deleted: str = "#f53263"
    cancelled: str = "#b2bec3"
    blocked: str = "#d44ebc"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, value: object) -> str:
        """Accept ``#RGB`` or ``#RRGGBB``, ignoring surrounding whitespace."""
        color = value.strip() if isinstance(value, str) else value
        if not isinstance(color, str) or not HEX_COLOR.match(color):
            msg = f"expected #RGB or #RRGGBB, got {value!r}"
            raise ValueError(msg)
        return color


def get_bundled_theme_path() -> Path:
    """Location of the theme shipped with the package."""
    return Path(str(resources.files("rmd.data").joinpath("theme.toml")))


def read_colors(path: Path) -> dict[str, object]:
    """Read the ``[colors]`` table of a theme file.

    A missing file is an empty table. Unreadable files and malformed
    tables are logged and treated as empty as well.

    Args:
        path: Theme file to read.

    Returns:
        Raw color entries keyed by style name.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return colors


def _accepted_overrides(overrides: dict[str, object], source: Path) -> dict[str, str]:
    """Keep only the override entries that validate on their own."""
    accepted: dict[str, str] = {}
    for name, value in overrides.items():
        if name not in ThemeColors.model_fields:
            logger.warning("Unknown style '%s' in %s", name, source)
            continue
        try:
            ThemeColors.model_validate({name: value})
        except ValidationError:
            logger.warning("Invalid color for '%s' in %s: %r", name, source, value)
            continue
        accepted[name] = str(value).strip()
    return accepted


def load_theme(user_path: Path | None = None) -> ThemeColors:
    """Merge the bundled theme with the user's overrides.

    Args:
        user_path: Override file. Defaults to the XDG theme path.

    Returns:
        Fully populated ThemeColors.
    """
    bundled_path = get_bundled_theme_path()
    colors = _accepted_overrides(read_colors(bundled_path), bundled_path)

    override_path = user_path or get_theme_path()
    overrides = _accepted_overrides(read_colors(override_path), override_path)
    if overrides:
        logger.debug("Applying %d theme overrides from %s", len(overrides), override_path)
    colors.update(overrides)

    return ThemeColors(**colors)


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme used by the consoles."""
    if colors is None:
        colors = load_theme()
    styles = {
        name: f"{STYLE_MODIFIERS[name]} {color}" if name in STYLE_MODIFIERS else color
        for name, color in colors.model_dump().items()
    }
    return Theme(styles)


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Return the Rich theme, building it on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme

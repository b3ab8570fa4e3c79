"""XDG-compliant locations used by rmd.

Configuration is application specific, the trash is not: it lives in the
shared freedesktop location so desktop trash viewers list what rmd
removed.

- Config: ``$XDG_CONFIG_HOME/rmd/`` (default ``~/.config/rmd/``)
- Trash: ``$XDG_DATA_HOME/Trash/{files,info}/`` (default ``~/.local/share/Trash``)
"""

import os
from pathlib import Path

APP_NAME = "rmd"

TRASH_DIRNAME = "Trash"
TRASH_FILES_DIRNAME = "files"
TRASH_INFO_DIRNAME = "info"


def _xdg_dir(env_var: str, fallback: str) -> Path:
    """Resolve an XDG base directory.

    An unset or empty variable means the fallback below the home directory.

    Args:
        env_var: Variable to consult, e.g. ``XDG_DATA_HOME``.
        fallback: Path relative to home, e.g. ``.local/share``.
    """
    value = os.environ.get(env_var)
    return Path(value) if value else Path.home() / fallback


def get_config_dir() -> Path:
    return _xdg_dir("XDG_CONFIG_HOME", ".config") / APP_NAME


def get_config_path() -> Path:
    """Protection rules file, ``<config dir>/config.toml``."""
    return get_config_dir() / "config.toml"


def get_theme_path() -> Path:
    """Color override file, ``<config dir>/theme.toml``."""
    return get_config_dir() / "theme.toml"


def get_data_home() -> Path:
    return _xdg_dir("XDG_DATA_HOME", ".local/share")


def get_trash_dir() -> Path:
    """Root of the trash, holding ``files/`` and ``info/``."""
    return get_data_home() / TRASH_DIRNAME


def ensure_dir(path: Path, name: str) -> Path:
    """Create a directory and any missing parents.

    Args:
        path: Directory to create. Existing directories are fine.
        name: What the directory is for, used in the error message.

    Returns:
        The directory path.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e.strerror or e}"
        raise RuntimeError(msg) from e
    return path

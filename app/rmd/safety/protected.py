"""Protected paths that must never be removed.

This module defines the system directories that are refused outright and
the name fragments that mark a target as hidden or configuration data.
Matching is done on absolute paths produced by
:func:`resolve_absolute_path`.
"""

import os
import pwd
from collections.abc import Iterable
from pathlib import Path

# Directories refused together with everything below them.
PROTECTED_DIRS: tuple[str, ...] = (
    "/bin",
    "/usr",
    "/etc",
    "/root",
    "/sbin",
    "/lib",
    "/lib64",
    "/opt",
    "/var",
    "/sys",
    "/proc",
    "/dev",
    "/boot",
)

HOME_DIRECTORY_REASON = "protected home directory"
DOT_ENTRY_REASON = "refusing to remove '.' or '..' directory"

# Substrings of the full path that mark user configuration.
CONFIG_PATTERNS: tuple[str, ...] = (
    ".config",
    ".bashrc",
    ".bash_profile",
    ".zshrc",
    ".gitconfig",
    ".vimrc",
    ".vim",
    ".ssh",
    ".gnupg",
)


def resolve_absolute_path(path: str) -> str:
    """Resolve a user-supplied path to the absolute path of the entry itself.

    Absolute paths are only normalized lexically. Relative paths get their
    parent directory canonicalized and the base name appended, so a symlink
    resolves to its own location rather than its target. When the parent
    cannot be resolved the current directory is simply prepended.

    Args:
        path: Path as given on the command line.

    Returns:
        Absolute path string.
    """
    if os.path.isabs(path):
        return os.path.normpath(path)

    trimmed = path.rstrip("/") or path
    parent, name = os.path.split(trimmed)

    # "." and ".." name the directory itself, not an entry inside it
    if name in (".", ".."):
        return os.path.realpath(trimmed)

    try:
        parent_abs = os.path.realpath(parent or ".", strict=True)
    except OSError:
        return os.path.join(os.getcwd(), path)
    return os.path.join(parent_abs, name)


def is_dot_entry(path: str) -> bool:
    """Check if the last component of a path is ``.`` or ``..``."""
    return os.path.basename(path.rstrip("/")) in (".", "..")


def _is_within(path: str, root: str) -> bool:
    root = root.rstrip("/") or "/"
    return path == root or path.startswith(root + "/")


def get_superuser_home() -> str:
    """Get the superuser's home directory.

    Returns:
        Home directory of uid 0, ``/root`` if it cannot be looked up.
    """
    try:
        return os.path.normpath(pwd.getpwuid(0).pw_dir)
    except KeyError:
        return "/root"


def get_user_home() -> str:
    """Get the invoking user's home directory."""
    return os.path.normpath(str(Path.home()))


def protection_reason(
    absolute_path: str,
    protected_dirs: Iterable[str] = PROTECTED_DIRS,
) -> str | None:
    """Check an absolute path against the protection rules.

    Rules are checked in order and the first match wins:

    1. the filesystem root itself;
    2. a protected system directory or anything below it;
    3. the superuser's home directory or anything below it;
    4. exactly the invoking user's home directory (its contents are
       not protected).

    Args:
        absolute_path: Path produced by :func:`resolve_absolute_path`.
        protected_dirs: Protected system directories.

    Returns:
        Human-readable reason for the first matching rule, None if the
        path is not protected.
    """
    if absolute_path == "/":
        return "protected root directory (/)"

    for protected in protected_dirs:
        if _is_within(absolute_path, protected):
            return f"protected system directory ({protected})"

    root_home = get_superuser_home()
    if root_home != "/" and _is_within(absolute_path, root_home):
        return f"protected system directory ({root_home})"

    if absolute_path == get_user_home():
        return HOME_DIRECTORY_REASON

    return None


def is_config_file(absolute_path: str, patterns: Iterable[str] = CONFIG_PATTERNS) -> bool:
    """Check if a path looks like a hidden or configuration file.

    Args:
        absolute_path: Absolute path of the entry.
        patterns: Substrings that mark configuration paths.

    Returns:
        True if the base name is hidden or the path contains a pattern.
    """
    if os.path.basename(absolute_path).startswith("."):
        return True
    return any(pattern in absolute_path for pattern in patterns)

"""User configuration for protection rules.

The built-in protected directories and config name patterns can be
extended (never reduced) from ``~/.config/rmd/config.toml``::

    [protection]
    protected_dirs = ["/srv", "/mnt/backup"]
    config_patterns = [".netrc", ".aws"]
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from rmd.core.paths import get_config_path
from rmd.safety.protected import CONFIG_PATTERNS, PROTECTED_DIRS

logger = logging.getLogger(__name__)


class ProtectionConfig(BaseModel):
    """Additional protection rules on top of the built-in ones.

    Attributes:
        protected_dirs: Extra absolute directories refused with their contents.
        config_patterns: Extra path fragments that mark configuration files.
    """

    model_config = ConfigDict(extra="forbid")

    protected_dirs: Annotated[
        list[str],
        Field(description="Extra protected directories (absolute paths)"),
    ] = []
    config_patterns: Annotated[
        list[str],
        Field(description="Extra config path fragments"),
    ] = []

    @field_validator("protected_dirs")
    @classmethod
    def validate_absolute(cls, value: list[str]) -> list[str]:
        """Require absolute directories and normalize them."""
        normalized: list[str] = []
        for entry in value:
            if not os.path.isabs(entry):
                msg = f"protected_dirs: '{entry}' is not an absolute path"
                raise ValueError(msg)
            normalized.append(os.path.normpath(entry))
        return normalized

    @field_validator("config_patterns")
    @classmethod
    def validate_patterns(cls, value: list[str]) -> list[str]:
        """Reject empty patterns, which would match every path."""
        if any(not pattern for pattern in value):
            msg = "config_patterns: empty pattern is not allowed"
            raise ValueError(msg)
        return value

    @property
    def effective_protected_dirs(self) -> tuple[str, ...]:
        """Built-in protected directories followed by the configured ones."""
        extra = [d for d in self.protected_dirs if d not in PROTECTED_DIRS]
        return PROTECTED_DIRS + tuple(dict.fromkeys(extra))

    @property
    def effective_config_patterns(self) -> tuple[str, ...]:
        """Built-in config patterns followed by the configured ones."""
        extra = [p for p in self.config_patterns if p not in CONFIG_PATTERNS]
        return CONFIG_PATTERNS + tuple(dict.fromkeys(extra))


class RmdConfig(BaseModel):
    """Top-level rmd configuration file."""

    model_config = ConfigDict(extra="forbid")

    protection: ProtectionConfig = ProtectionConfig()


class RmdConfigError(Exception):
    """Raised when the configuration file cannot be read or is invalid."""


def load_config(path: Path | None = None) -> RmdConfig:
    """Load configuration from a TOML file.

    A missing file is not an error: the built-in defaults apply.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated RmdConfig object.

    Raises:
        RmdConfigError: If the file cannot be read, parsed, or validated.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return RmdConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise RmdConfigError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise RmdConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return RmdConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise RmdConfigError(f"Invalid config content in {config_path}: {e}") from e

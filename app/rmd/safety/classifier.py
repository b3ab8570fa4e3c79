"""Classification of removal targets.

Empty operands are never found. ``.`` and ``..`` are refused, then the
protection rules are checked and short-circuit everything else.
Directory-ness is decided next, and only plain entries are checked for
hidden/config names.
"""

import logging
import os

from rmd.safety.config import ProtectionConfig
from rmd.safety.models import Category, ClassifiedPath, PathReference
from rmd.safety.protected import (
    DOT_ENTRY_REASON,
    HOME_DIRECTORY_REASON,
    is_config_file,
    is_dot_entry,
    protection_reason,
    resolve_absolute_path,
)

logger = logging.getLogger(__name__)


class PathClassifier:
    """Classifies user-supplied paths against the protection rules.

    Attributes:
        _config: Protection rules in effect (built-ins plus user extensions).
    """

    def __init__(self, config: ProtectionConfig | None = None) -> None:
        self._config = config if config is not None else ProtectionConfig()

    def classify(self, path: str) -> ClassifiedPath:
        """Classify a single path.

        Args:
            path: Path as given on the command line.

        Returns:
            ClassifiedPath carrying the category and, for protected
            targets, the reason naming the matched rule.
        """
        if not path:
            # An empty operand names nothing
            return ClassifiedPath(
                ref=PathReference(raw=path, absolute=""),
                category=Category.PLAIN_FILE,
                exists=False,
            )

        ref = PathReference(raw=path, absolute=resolve_absolute_path(path))
        exists = os.path.lexists(path)
        is_directory = os.path.isdir(path) and not os.path.islink(path)

        if is_dot_entry(path):
            logger.debug("Refusing dot entry %s", path)
            return ClassifiedPath(
                ref=ref,
                category=Category.DOT_ENTRY,
                reason=DOT_ENTRY_REASON,
                exists=exists,
                is_directory=is_directory,
            )

        reason = protection_reason(ref.absolute, self._config.effective_protected_dirs)
        if reason is not None:
            category = (
                Category.HOME_DIRECTORY
                if reason == HOME_DIRECTORY_REASON
                else Category.SYSTEM_PROTECTED
            )
            logger.debug("Classified %s as %s: %s", ref.absolute, category.value, reason)
            return ClassifiedPath(
                ref=ref,
                category=category,
                reason=reason,
                exists=exists,
                is_directory=is_directory,
            )

        if is_directory:
            category = Category.DIRECTORY
            is_config = False
        else:
            is_config = is_config_file(ref.absolute, self._config.effective_config_patterns)
            category = Category.CONFIG if is_config else Category.PLAIN_FILE

        logger.debug("Classified %s as %s", ref.absolute, category.value)
        return ClassifiedPath(
            ref=ref,
            category=category,
            exists=exists,
            is_directory=is_directory,
            is_config=is_config,
        )


def classify(path: str, config: ProtectionConfig | None = None) -> ClassifiedPath:
    """Classify a path with the given (or default) protection rules."""
    return PathClassifier(config).classify(path)

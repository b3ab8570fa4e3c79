"""Classification and disposition engine.

This module provides path classification against protection rules,
disposition resolution, the freedesktop trash store, and the executor
and batch controller that tie them together.
"""

from rmd.safety.batch import BatchController, BatchResult
from rmd.safety.classifier import PathClassifier, classify
from rmd.safety.config import ProtectionConfig, RmdConfig, RmdConfigError, load_config
from rmd.safety.executor import ActionExecutor
from rmd.safety.models import (
    Category,
    ClassifiedPath,
    Disposition,
    ExitCode,
    Flags,
    Outcome,
    PathReference,
    PathResult,
    PromptKind,
    Resolution,
    TrashItem,
)
from rmd.safety.protected import CONFIG_PATTERNS, PROTECTED_DIRS
from rmd.safety.resolver import Prompter, parse_response, resolve
from rmd.safety.trash import (
    TrashError,
    TrashInfoError,
    TrashInitError,
    TrashMoveError,
    TrashStore,
)

__all__ = [
    "CONFIG_PATTERNS",
    "PROTECTED_DIRS",
    "ActionExecutor",
    "BatchController",
    "BatchResult",
    "Category",
    "ClassifiedPath",
    "Disposition",
    "ExitCode",
    "Flags",
    "Outcome",
    "PathClassifier",
    "PathReference",
    "PathResult",
    "PromptKind",
    "Prompter",
    "ProtectionConfig",
    "Resolution",
    "RmdConfig",
    "RmdConfigError",
    "TrashError",
    "TrashInfoError",
    "TrashInitError",
    "TrashItem",
    "TrashMoveError",
    "TrashStore",
    "classify",
    "load_config",
    "parse_response",
    "resolve",
]

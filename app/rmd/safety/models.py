"""Domain models for removal requests.

This module defines the closed enumerations and immutable records that
flow between the classifier, the disposition resolver, the executor and
the batch controller.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum


class Category(str, Enum):
    """Classification of a removal target.

    Attributes:
        SYSTEM_PROTECTED: Inside a protected system directory or root's home.
        HOME_DIRECTORY: Exactly the invoking user's home directory.
        DOT_ENTRY: A path whose last component is ``.`` or ``..``.
        DIRECTORY: A real directory (symlinks to directories do not count).
        CONFIG: Hidden file or path that looks like user configuration.
        PLAIN_FILE: Anything else (regular file, symlink, special file).
    """

    SYSTEM_PROTECTED = "system_protected"
    HOME_DIRECTORY = "home_directory"
    DOT_ENTRY = "dot_entry"
    DIRECTORY = "directory"
    CONFIG = "config"
    PLAIN_FILE = "plain_file"

    @property
    def is_protected(self) -> bool:
        return self in (
            Category.SYSTEM_PROTECTED,
            Category.HOME_DIRECTORY,
            Category.DOT_ENTRY,
        )


class Disposition(str, Enum):
    """Resolved action for a single target.

    Attributes:
        TRASH: Move to the trash store.
        PERMANENT_DELETE: Remove without going through the trash.
        CANCEL: Leave the target alone.
        BLOCKED: Refused by a protection rule.
        NOT_FOUND: Target does not exist.
    """

    TRASH = "trash"
    PERMANENT_DELETE = "delete"
    CANCEL = "cancel"
    BLOCKED = "blocked"
    NOT_FOUND = "not_found"

    @property
    def is_removal(self) -> bool:
        return self in (Disposition.TRASH, Disposition.PERMANENT_DELETE)


class PromptKind(str, Enum):
    """Variant of the confirmation prompt shown to the user."""

    FOLDER = "folder"
    CONFIG = "config"
    DELETE = "delete"


class ExitCode(IntEnum):
    """Process exit codes.

    Attributes:
        SUCCESS: Every target was handled.
        FAILURE: A target was cancelled, missing, or failed.
        BLOCKED: A target was refused by a protection rule.
        TRASH_INIT_FAILED: The trash directories could not be created.
    """

    SUCCESS = 0
    FAILURE = 1
    BLOCKED = 2
    TRASH_INIT_FAILED = 3


class Outcome(str, Enum):
    """What actually happened to a target after execution."""

    TRASHED = "trashed"
    DELETED = "deleted"
    CANCELLED = "cancelled"
    BLOCKED = "blocked"
    NOT_FOUND = "not_found"
    RECURSION_REQUIRED = "recursion_required"
    MOVE_FAILED = "move_failed"
    RECORD_FAILED = "record_failed"
    DELETE_FAILED = "delete_failed"

    @property
    def exit_code(self) -> ExitCode:
        if self in (Outcome.TRASHED, Outcome.DELETED):
            return ExitCode.SUCCESS
        if self == Outcome.BLOCKED:
            return ExitCode.BLOCKED
        return ExitCode.FAILURE


@dataclass(frozen=True, slots=True)
class Flags:
    """Invocation flags, fixed for the whole batch.

    Attributes:
        force: Skip prompts and default to the trash.
        recursive: Allow directories to be removed.
        verbose: Print confirmations for successful operations.
    """

    force: bool = False
    recursive: bool = False
    verbose: bool = False

    @property
    def skip_prompts(self) -> bool:
        return self.force


@dataclass(frozen=True, slots=True)
class PathReference:
    """A user-supplied path and its resolved absolute form.

    Attributes:
        raw: The path exactly as given on the command line.
        absolute: Absolute path of the entry itself (symlinks not followed).
    """

    raw: str
    absolute: str


@dataclass(frozen=True, slots=True)
class ClassifiedPath:
    """Result of classifying a single removal target.

    Attributes:
        ref: The path being classified.
        category: Classification, protection first.
        reason: Matched protection rule, None unless protected.
        exists: Whether the entry exists (dangling symlinks exist).
        is_directory: Whether the entry is a real directory.
        is_config: Whether the entry looks like a hidden/config file.
    """

    ref: PathReference
    category: Category
    reason: str | None = None
    exists: bool = True
    is_directory: bool = False
    is_config: bool = False


@dataclass(frozen=True, slots=True)
class Resolution:
    """Decision for a single target, ready for execution.

    Attributes:
        target: The classified target.
        disposition: Action to take.
        needs_recursive: Target is a directory and needs recursive removal.
        recursion_refused: Removal was chosen but the recursive flag is missing.
        prompt_kind: Prompt variant shown to the user, None when not prompted.
    """

    target: ClassifiedPath
    disposition: Disposition
    needs_recursive: bool = False
    recursion_refused: bool = False
    prompt_kind: PromptKind | None = None


@dataclass(frozen=True, slots=True)
class TrashItem:
    """An entry deposited into the trash.

    Attributes:
        stored_name: Name under ``files/`` (possibly counter-suffixed).
        original_path: Absolute path the entry was removed from.
        deletion_date: UTC timestamp, ``YYYY-MM-DDTHH:MM:SS``.
    """

    stored_name: str
    original_path: str
    deletion_date: str


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of processing a single target.

    Attributes:
        path: The path as given by the user.
        outcome: What happened to the target.
        error: Concise failure reason, None on success or cancellation.
        trash_item: Trash entry created for the target, if any.
    """

    path: str
    outcome: Outcome
    error: str | None = None
    trash_item: TrashItem | None = None

    @property
    def success(self) -> bool:
        return self.outcome.exit_code == ExitCode.SUCCESS

    @property
    def exit_code(self) -> ExitCode:
        return self.outcome.exit_code

"""Freedesktop-style trash store.

Payloads are moved into ``<trash>/files/`` and each one gets a metadata
record in ``<trash>/info/<name>.trashinfo``::

    [Trash Info]
    Path=/home/user/notes.txt
    DeletionDate=2025-01-15T10:00:00

The record is only written after the move succeeded, so the store can
end up with a payload lacking a record but never the other way round.
Name conflicts are resolved by appending ``.1``, ``.2``, ... to the base
name. The store assumes a single writer.
"""

import errno
import logging
import os
import shutil
from datetime import UTC, datetime
from pathlib import Path

from rmd.core.paths import (
    TRASH_FILES_DIRNAME,
    TRASH_INFO_DIRNAME,
    ensure_dir,
    get_trash_dir,
)
from rmd.safety.models import TrashItem
from rmd.safety.protected import resolve_absolute_path

logger = logging.getLogger(__name__)

INFO_HEADER = "[Trash Info]"
INFO_SUFFIX = ".trashinfo"
DELETION_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


class TrashError(Exception):
    """Base exception for trash store errors."""


class TrashInitError(TrashError):
    """Raised when the trash directories cannot be created."""


class TrashMoveError(TrashError):
    """Raised when a payload cannot be moved into the trash."""


class TrashInfoError(TrashError):
    """Raised when the payload was moved but its record could not be written."""


class TrashStore:
    """Manages the payload and metadata directories of a trash.

    Storage location: ~/.local/share/Trash (or XDG_DATA_HOME/Trash)

    Attributes:
        trash_dir: Root directory holding ``files/`` and ``info/``.
    """

    def __init__(self, trash_dir: Path | None = None) -> None:
        """Initialize the TrashStore.

        Args:
            trash_dir: Optional override for the trash root.
                      Default: ~/.local/share/Trash
        """
        self._trash_dir = trash_dir if trash_dir is not None else get_trash_dir()

    @property
    def trash_dir(self) -> Path:
        return self._trash_dir

    @property
    def files_dir(self) -> Path:
        return self._trash_dir / TRASH_FILES_DIRNAME

    @property
    def info_dir(self) -> Path:
        return self._trash_dir / TRASH_INFO_DIRNAME

    def info_path(self, stored_name: str) -> Path:
        """Path of the metadata record for a stored payload name."""
        return self.info_dir / f"{stored_name}{INFO_SUFFIX}"

    def ensure(self) -> None:
        """Create the payload and metadata directories.

        Raises:
            TrashInitError: If either directory cannot be created.
        """
        try:
            ensure_dir(self.files_dir, "trash files")
            ensure_dir(self.info_dir, "trash info")
        except RuntimeError as e:
            raise TrashInitError(str(e)) from e

    def available_name(self, name: str) -> str:
        """Find a free stored name for a payload.

        The plain name is used when free, otherwise the first free
        ``<name>.<N>`` counting up from 1. A name is taken when either the
        payload or its metadata record already exists.

        Args:
            name: Base name of the entry being trashed.

        Returns:
            Stored name to use.
        """
        candidate = name
        counter = 1
        while self._is_taken(candidate):
            candidate = f"{name}.{counter}"
            counter += 1
        return candidate

    def deposit(self, source: str, original_path: str | None = None) -> TrashItem:
        """Move an entry into the trash and record where it came from.

        Directories are moved as a whole subtree.

        Args:
            source: Path of the entry to trash.
            original_path: Absolute path to record. Resolved from source
                if not given.

        Returns:
            TrashItem describing the stored entry.

        Raises:
            TrashMoveError: If the entry could not be moved. No record is written.
            TrashInfoError: If the entry was moved but the record could not
                be written. The payload stays in the trash.
        """
        original = original_path or resolve_absolute_path(source)
        name = os.path.basename(original)
        if not name:
            raise TrashMoveError(f"Cannot derive a trash name for '{source}'")

        stored_name = self.available_name(name)
        destination = self.files_dir / stored_name

        self._move(source, destination)

        item = TrashItem(
            stored_name=stored_name,
            original_path=original,
            deletion_date=datetime.now(UTC).strftime(DELETION_DATE_FORMAT),
        )
        self._write_info(item)

        logger.info("Moved %s to trash as %s", original, stored_name)
        return item

    def _move(self, source: str, destination: Path) -> None:
        """Rename the entry into the trash.

        Only a cross-filesystem rename falls back to copy-then-delete. Any
        other rename failure leaves the source untouched.

        Raises:
            TrashMoveError: If the entry could not be moved.
        """
        try:
            os.rename(source, destination)
            return
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise TrashMoveError(f"Failed to move to trash: {e}") from e

        logger.debug("%s is on another filesystem, copying into the trash", source)
        try:
            shutil.move(source, destination)
        except (OSError, shutil.Error) as e:
            raise TrashMoveError(f"Failed to move to trash: {e}") from e

    def _is_taken(self, stored_name: str) -> bool:
        return os.path.lexists(self.files_dir / stored_name) or os.path.lexists(
            self.info_path(stored_name)
        )

    def _write_info(self, item: TrashItem) -> None:
        """Write the metadata record for a deposited payload.

        Raises:
            TrashInfoError: If the record cannot be written.
        """
        content = (
            f"{INFO_HEADER}\nPath={item.original_path}\nDeletionDate={item.deletion_date}\n"
        )
        info_path = self.info_path(item.stored_name)
        try:
            info_path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.warning("Payload %s has no metadata record: %s", item.stored_name, e)
            msg = (
                f"Moved to trash as '{item.stored_name}' "
                f"but could not write metadata record: {e}"
            )
            raise TrashInfoError(msg) from e

"""Execution of resolved dispositions.

Performs the filesystem side of a resolution: trashing through the
:class:`TrashStore`, or permanent removal with ``shutil.rmtree`` and
``Path.unlink``. Failures are isolated per path and returned as results.
"""

import logging
import shutil
from pathlib import Path

from rmd.safety.models import Disposition, Outcome, PathResult, Resolution
from rmd.safety.trash import TrashInfoError, TrashMoveError, TrashStore

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "No such file or directory"
RECURSION_REQUIRED_MESSAGE = "Is a directory (use -r or -R flag to remove directories)"


class ActionExecutor:
    """Carries out resolved dispositions.

    Attributes:
        _store: Trash store receiving trashed entries.
    """

    def __init__(self, store: TrashStore) -> None:
        """Initialize the ActionExecutor.

        Args:
            store: Trash store receiving trashed entries.
        """
        self._store = store

    def execute(self, resolution: Resolution) -> PathResult:
        """Execute a single resolution.

        Blocked, missing, cancelled and recursion-refused targets are never
        touched.

        Args:
            resolution: Decision produced by the resolver.

        Returns:
            PathResult describing the outcome.
        """
        target = resolution.target
        path = target.ref.raw
        disposition = resolution.disposition

        if disposition == Disposition.NOT_FOUND:
            return PathResult(path=path, outcome=Outcome.NOT_FOUND, error=NOT_FOUND_MESSAGE)

        if disposition == Disposition.BLOCKED:
            return PathResult(path=path, outcome=Outcome.BLOCKED, error=target.reason)

        if disposition == Disposition.CANCEL:
            return PathResult(path=path, outcome=Outcome.CANCELLED)

        if resolution.recursion_refused:
            return PathResult(
                path=path,
                outcome=Outcome.RECURSION_REQUIRED,
                error=RECURSION_REQUIRED_MESSAGE,
            )

        if disposition == Disposition.TRASH:
            return self._trash(resolution)

        return self._delete(resolution)

    def _trash(self, resolution: Resolution) -> PathResult:
        """Move the target into the trash store."""
        ref = resolution.target.ref
        try:
            item = self._store.deposit(ref.raw, ref.absolute)
        except TrashMoveError as e:
            return PathResult(path=ref.raw, outcome=Outcome.MOVE_FAILED, error=str(e))
        except TrashInfoError as e:
            return PathResult(path=ref.raw, outcome=Outcome.RECORD_FAILED, error=str(e))
        return PathResult(path=ref.raw, outcome=Outcome.TRASHED, trash_item=item)

    def _delete(self, resolution: Resolution) -> PathResult:
        """Permanently remove the target.

        Directories (already checked for the recursive flag) are removed
        with their contents. Files, symlinks and dead symlinks are
        unlinked; a symlink to a directory removes the link only.
        """
        path = resolution.target.ref.raw
        try:
            if resolution.needs_recursive:
                shutil.rmtree(path)
            else:
                Path(path).unlink()
        except OSError as e:
            kind = "directory" if resolution.needs_recursive else "file"
            return PathResult(
                path=path,
                outcome=Outcome.DELETE_FAILED,
                error=f"Failed to remove {kind}: {e.strerror or e}",
            )

        logger.info("Permanently deleted %s", resolution.target.ref.absolute)
        return PathResult(path=path, outcome=Outcome.DELETED)

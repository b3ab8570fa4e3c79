"""Disposition resolution for classified targets.

Turns a classification plus the invocation flags into a single
:class:`Disposition`, asking the user through an injected prompt
callable when the flags do not already decide it.

Decision order:

1. missing targets are NOT_FOUND;
2. protected targets are BLOCKED;
3. directories are trashed under --force, otherwise the "folder"
   prompt decides, and either way they need recursive removal;
4. other targets are trashed under --force, otherwise the "config" or
   "delete" prompt decides.

A directory that resolves to a removal without --recursive is marked as
refused rather than silently removed or skipped.
"""

import logging
from collections.abc import Callable

from rmd.safety.models import ClassifiedPath, Disposition, Flags, PromptKind, Resolution

logger = logging.getLogger(__name__)

# Receives the prompt variant and the path as typed, returns the raw answer.
Prompter = Callable[[PromptKind, str], str]

TRASH_RESPONSES = frozenset({"y", "yes", ""})
PERMANENT_DELETE_RESPONSE = "D"


def parse_response(response: str) -> Disposition:
    """Map a raw prompt answer to a disposition.

    ``y``/``yes``/empty trash and ``n``/``no`` cancel, case-insensitively.
    Only an uppercase ``D`` deletes permanently. Anything unrecognized
    cancels.

    Args:
        response: Line typed by the user.

    Returns:
        TRASH, PERMANENT_DELETE, or CANCEL.
    """
    answer = response.strip()
    if answer == PERMANENT_DELETE_RESPONSE:
        return Disposition.PERMANENT_DELETE
    if answer.lower() in TRASH_RESPONSES:
        return Disposition.TRASH
    # "n", "no", and unrecognized input all cancel
    return Disposition.CANCEL


def resolve(target: ClassifiedPath, flags: Flags, prompt: Prompter) -> Resolution:
    """Decide what to do with a classified target.

    Args:
        target: Result of classifying the path.
        flags: Invocation flags.
        prompt: Called at most once when the user has to decide.

    Returns:
        Resolution describing the disposition and recursion requirements.
    """
    if not target.exists:
        return Resolution(target=target, disposition=Disposition.NOT_FOUND)

    if target.category.is_protected:
        return Resolution(target=target, disposition=Disposition.BLOCKED)

    prompt_kind: PromptKind | None = None
    if target.is_directory:
        prompt_kind = None if flags.skip_prompts else PromptKind.FOLDER
    elif not flags.skip_prompts:
        prompt_kind = PromptKind.CONFIG if target.is_config else PromptKind.DELETE

    if prompt_kind is None:
        disposition = Disposition.TRASH
    else:
        disposition = parse_response(prompt(prompt_kind, target.ref.raw))

    needs_recursive = target.is_directory
    recursion_refused = needs_recursive and disposition.is_removal and not flags.recursive

    logger.debug(
        "Resolved %s to %s (prompt=%s, recursive_required=%s, refused=%s)",
        target.ref.raw,
        disposition.value,
        prompt_kind.value if prompt_kind else None,
        needs_recursive,
        recursion_refused,
    )
    return Resolution(
        target=target,
        disposition=disposition,
        needs_recursive=needs_recursive,
        recursion_refused=recursion_refused,
        prompt_kind=prompt_kind,
    )

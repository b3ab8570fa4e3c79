"""Interactive confirmation prompts.

The prompt is written to stderr and the answer read as a single line,
so stdout stays clean for verbose output. Pressing Enter answers with an
empty string, which the resolver treats as "move to trash".
"""

import typer

from rmd.safety.models import PromptKind

PROMPT_TEMPLATES: dict[PromptKind, str] = {
    PromptKind.FOLDER: "{path} is a directory, remove (Y/n/D): ",
    PromptKind.CONFIG: (
        "Warning: {path} appears to be a hidden/config file. Continue? (Y/n/D): "
    ),
    PromptKind.DELETE: "Delete {path}? (Y/n/D): ",
}


def format_prompt(kind: PromptKind, path: str) -> str:
    """Build the prompt text for a prompt variant."""
    return PROMPT_TEMPLATES[kind].format(path=path)


def terminal_prompt(kind: PromptKind, path: str) -> str:
    """Ask the user on the terminal and return the raw answer.

    Blocks until a line is entered. End of input or Ctrl-C aborts the
    whole run.

    Args:
        kind: Prompt variant to show.
        path: Path as given on the command line.

    Returns:
        The line typed by the user, empty if they just pressed Enter.
    """
    return typer.prompt(
        format_prompt(kind, path),
        default="",
        show_default=False,
        prompt_suffix="",
        err=True,
    )

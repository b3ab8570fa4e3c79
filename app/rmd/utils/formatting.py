"""Rich consoles and message helpers.

Every message passes through ``rich.markup.escape`` and is printed with
``soft_wrap=True``: messages carry user paths, which must come out
verbatim and unbroken even when they contain brackets.
"""

import sys
from typing import Literal, TextIO

from rich.console import Console
from rich.markup import escape

from rmd.core.theme import get_theme


def _make_console(stream: TextIO, *, stderr: bool) -> Console:
    """Create a themed console for stdout or stderr.

    Terminals get full hex colors. Anything else (pipes, files, test
    runners) gets no color at all.
    """
    color_system: Literal["truecolor"] | None = "truecolor" if stream.isatty() else None
    return Console(theme=get_theme(), stderr=stderr, color_system=color_system, highlight=False)


console = _make_console(sys.stdout, stderr=False)
err_console = _make_console(sys.stderr, stderr=True)


def print_styled(message: str, style: str, *, stderr: bool = False) -> None:
    """Print a plain-text message in one of the theme styles."""
    target = err_console if stderr else console
    target.print(f"[{style}]{escape(message)}[/]", soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a warning to stderr with a ``Warning:`` prefix."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error to stderr with an ``Error:`` prefix."""
    err_console.print(f"[error]Error:[/] {escape(message)}", soft_wrap=True)

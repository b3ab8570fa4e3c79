"""Main CLI application entry point.

Defines the Typer application: a single ``rmd`` command that takes the
flags and target paths, prepares the trash, and hands the paths to the
batch controller.
"""

from typing import Annotated, Any

import click
import typer
from typer.core import TyperCommand

from rmd import __version__
from rmd.cli.display import report_result
from rmd.cli.prompt import terminal_prompt
from rmd.safety.batch import BatchController
from rmd.safety.config import ProtectionConfig, RmdConfigError, load_config
from rmd.safety.models import ExitCode, Flags
from rmd.safety.trash import TrashInitError, TrashStore
from rmd.utils.formatting import print_error, print_styled, print_warning

EPILOG = (
    "Prompts: [bold]Y[/bold] move to trash (default), [bold]n[/bold] cancel, "
    "[bold]D[/bold] permanent delete (bypass trash)."
)


class RmdCommand(TyperCommand):
    """Command whose usage errors exit with 1.

    Exit code 2 is reserved for paths refused by a protection rule.
    """

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: click.Context | None = None,
        **extra: Any,
    ) -> click.Context:
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = ExitCode.FAILURE
            raise


app = typer.Typer(
    name="rmd",
    help="Remove (move to trash) files or directories.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"rmd {__version__}")
        raise typer.Exit()


def _load_protection_config() -> ProtectionConfig:
    """Load user protection rules, falling back to the built-ins on error."""
    try:
        return load_config().protection
    except RmdConfigError as e:
        print_warning(f"{e}. Using built-in protection rules.")
        return ProtectionConfig()


@app.command(cls=RmdCommand, epilog=EPILOG)
def main(
    files: Annotated[
        list[str] | None,
        typer.Argument(help="Files or directories to remove.", show_default=False),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip safety prompts (still uses trash)."),
    ] = False,
    recursive: Annotated[
        bool,
        typer.Option(
            "--recursive",
            "-r",
            "-R",
            help="Remove directories and their contents recursively.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Explain what is being done."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Remove files or directories, moving them to the trash by default.

    System directories and your home directory are never removed.
    Directories, hidden files and config files ask for confirmation
    unless --force is given.
    """
    if not files:
        print_styled("rmd: missing operand", "error", stderr=True)
        print_styled("Try 'rmd --help' for more information.", "muted", stderr=True)
        raise typer.Exit(code=ExitCode.FAILURE)

    protection = _load_protection_config()

    store = TrashStore()
    try:
        store.ensure()
    except TrashInitError as e:
        print_error(f"Failed to create trash directories: {e}")
        raise typer.Exit(code=ExitCode.TRASH_INIT_FAILED) from e

    flags = Flags(force=force, recursive=recursive, verbose=verbose)
    controller = BatchController(flags, terminal_prompt, store=store, config=protection)
    batch = controller.process(files, on_result=lambda r: report_result(r, verbose))

    if batch.exit_code != ExitCode.SUCCESS:
        raise typer.Exit(code=batch.exit_code)


if __name__ == "__main__":
    app()

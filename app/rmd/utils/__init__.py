"""Output helpers shared by the CLI."""

from rmd.utils.formatting import (
    console,
    err_console,
    print_error,
    print_styled,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_styled",
    "print_warning",
]

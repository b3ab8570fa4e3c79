"""CLI package for rmd.

This package contains the Typer application, the terminal prompt and
result reporting.
"""

from rmd.cli.main import app

__all__ = ["app"]

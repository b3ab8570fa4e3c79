"""Per-path result reporting.

Errors are always printed to stderr. Confirmations for trashed, deleted
and cancelled targets only appear in verbose mode.
"""

from rmd.safety.models import Outcome, PathResult
from rmd.utils.formatting import print_styled

VERBOSE_MESSAGES: dict[Outcome, tuple[str, str]] = {
    Outcome.TRASHED: ("Moved '{path}' to trash", "trashed"),
    Outcome.DELETED: ("Permanently deleted '{path}'", "deleted"),
    Outcome.CANCELLED: ("Cancelled deletion of '{path}'", "cancelled"),
}


def format_error(result: PathResult) -> str:
    """Format the error line for a failed result."""
    return f"rmd: cannot remove '{result.path}': {result.error or 'Unknown error'}"


def report_result(result: PathResult, verbose: bool = False) -> None:
    """Print the outcome of a single path.

    Args:
        result: Result to report.
        verbose: Whether to print confirmations for non-error outcomes.
    """
    if result.outcome in VERBOSE_MESSAGES:
        if verbose:
            template, style = VERBOSE_MESSAGES[result.outcome]
            print_styled(template.format(path=result.path), style)
        return

    style = "blocked" if result.outcome == Outcome.BLOCKED else "error"
    print_styled(format_error(result), style, stderr=True)

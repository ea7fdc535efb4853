"""Command handlers for the interactive prompt.

Each handler takes an AppContext and returns (updated_context, should_continue).
"""

from rich.markup import escape

from musicplayer.core.output import log
from musicplayer.domain.reports import Outcome, Report


def show_report(report: Report, label: str = "Info") -> None:
    """Print a report; no-op reports print nothing."""
    if report.outcome is Outcome.NOOP:
        return
    if report.is_error:
        log(f"Error: {escape(report.message)}", "error")
    else:
        log(f"{label}: {escape(report.message)}", "success")

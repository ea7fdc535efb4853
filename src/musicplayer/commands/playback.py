"""
Playback command handlers for musicplayer.

Handles: play, pause, resume, stop, volume, status
"""

from typing import Optional, Tuple

from rich.markup import escape

from musicplayer.commands import show_report
from musicplayer.context import AppContext
from musicplayer.core.output import log
from musicplayer.domain import playback
from musicplayer.domain.playback import PlaybackState
from musicplayer.domain.reports import Outcome, Report
from musicplayer.utils.parsers import parse_index

STATE_STYLES = {
    PlaybackState.PLAYING: ("Playing", "green"),
    PlaybackState.PAUSED: ("Paused", "yellow"),
    PlaybackState.IDLE: ("Stopped", "red"),
}


def handle_play_command(ctx: AppContext, argument: Optional[str]) -> Tuple[AppContext, bool]:
    """Handle play command.

    Args:
        ctx: Application context
        argument: Second token of the input line, if any

    Returns:
        (updated_context, should_continue)
    """
    if argument is None:
        show_report(Report(Outcome.MISSING_ARGUMENT, "Please provide a song index"))
        return ctx, True

    index = parse_index(argument)
    if index is None:
        show_report(Report(Outcome.INVALID_INDEX, "Invalid song index"))
        return ctx, True

    session, report = playback.select_and_play(
        ctx.session, ctx.catalog, ctx.engine, index
    )
    show_report(report, label="Now playing")
    return ctx.with_session(session), True


def handle_pause_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    session, report = playback.pause(ctx.session)
    show_report(report)
    return ctx.with_session(session), True


def handle_resume_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    session, report = playback.resume(ctx.session)
    show_report(report)
    return ctx.with_session(session), True


def handle_stop_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    session, report = playback.stop(ctx.session)
    show_report(report)
    return ctx.with_session(session), True


def handle_volume_command(ctx: AppContext, value: float) -> Tuple[AppContext, bool]:
    """Handle volume command with an already parsed value.

    Args:
        ctx: Application context
        value: Requested gain

    Returns:
        (updated_context, should_continue)
    """
    session, report = playback.set_volume(ctx.session, value)
    show_report(report, label="Success")
    return ctx.with_session(session), True


def format_status(status: playback.SessionStatus) -> list[str]:
    """Render a session status as Rich markup lines."""
    lines = ["", "[bold]Player Status:[/bold]", "[bold]--------------[/bold]"]

    if status.current_track is None:
        lines.append("  [bold]Song[/bold]: No song playing")
    else:
        name, style = STATE_STYLES[status.state]
        lines.append(
            f"  [bold]Song[/bold]: [blue]{escape(status.current_track.display_name)}[/blue]"
        )
        lines.append(f"  [bold]State[/bold]: [{style}]{name}[/{style}]")
        if status.elapsed is not None:
            lines.append(
                f"  [bold]Elapsed[/bold]: [cyan]{int(status.elapsed)}[/cyan] seconds"
            )

    lines.append(f"  [bold]Volume[/bold]: {status.volume:.1f}")
    return lines


def handle_status_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Handle status command - show current track, state, elapsed time and volume."""
    for line in format_status(playback.status(ctx.session)):
        log(line, "info")
    return ctx, True


def handle_exit_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Release the engine handle and stop the command loop."""
    if ctx.session.handle is not None:
        log("Stopping music playback...", "info")
    session = playback.shutdown(ctx.session)
    log("Goodbye!", "info")
    return ctx.with_session(session), False

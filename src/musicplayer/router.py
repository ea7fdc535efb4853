"""
Command routing for musicplayer.

Routes parsed commands to the appropriate handler functions.
"""

from typing import Optional, Tuple

from musicplayer.commands import library, playback, show_report
from musicplayer.context import AppContext
from musicplayer.core.console import safe_print
from musicplayer.domain.reports import Outcome, Report
from musicplayer.utils import parsers

HELP_TEXT = """
[bold]Music Player Usage Instructions:[/bold]
[bold]--------------------------------[/bold]
[bold]Commands[/bold]:
  [green]play[/green] <number>   - Play the track with the given number
  [yellow]pause[/yellow]           - Pause the current track
  [green]resume[/green]          - Resume the paused track
  [red]stop[/red]            - Stop the current playback
  [cyan]volume[/cyan] <0.0-1.0> - Set playback volume
  [blue]status[/blue]          - Show player status
  [cyan]list[/cyan]            - Show available tracks
  [yellow]help[/yellow]            - Show this help message
  [red]exit[/red]            - Exit the program

[bold]Example[/bold]:
  musicplayer --dir /path/to/music/directory
"""


def print_help() -> None:
    """Display help information for available commands."""
    safe_print(HELP_TEXT)


def handle_command(
    ctx: AppContext, command: Optional[parsers.Command]
) -> Tuple[AppContext, bool]:
    """
    Handle a single parsed command with explicit state passing.

    Args:
        ctx: Application context
        command: Parsed command, or None for an empty line

    Returns:
        (updated_context, should_continue) - Updated context and whether to continue
    """
    if command is None:
        # Empty line, do nothing
        return ctx, True

    elif isinstance(command, parsers.Play):
        return playback.handle_play_command(ctx, command.argument)

    elif isinstance(command, parsers.Pause):
        return playback.handle_pause_command(ctx)

    elif isinstance(command, parsers.Resume):
        return playback.handle_resume_command(ctx)

    elif isinstance(command, parsers.Stop):
        return playback.handle_stop_command(ctx)

    elif isinstance(command, parsers.List_):
        return library.handle_list_command(ctx)

    elif isinstance(command, parsers.Volume):
        return playback.handle_volume_command(ctx, command.value)

    elif isinstance(command, parsers.VolumeParseError):
        show_report(Report(Outcome.VOLUME_PARSE_ERROR, command.message))
        return ctx, True

    elif isinstance(command, parsers.Status):
        return playback.handle_status_command(ctx)

    elif isinstance(command, parsers.Help):
        print_help()
        return ctx, True

    elif isinstance(command, parsers.Exit):
        return playback.handle_exit_command(ctx)

    else:
        word = command.word if isinstance(command, parsers.Invalid) else str(command)
        show_report(
            Report(
                Outcome.UNKNOWN_COMMAND,
                f"Invalid command '{word}' - type 'help' for instructions",
            )
        )
        return ctx, True


def dispatch_line(ctx: AppContext, user_input: str) -> Tuple[AppContext, bool]:
    """Parse one line of operator input and route it."""
    return handle_command(ctx, parsers.parse_command(user_input))

"""Rich console shared by the player.

Handlers, the prompt and the log mirror all print through the one Console
returned by get_console(). Syntax highlighting is off so track names and
file paths are shown exactly as they appear on disk.
"""

from rich.console import Console

_console: Console | None = None


def get_console() -> Console:
    """Return the player's console, creating it on first use."""
    global _console
    if _console is None:
        _console = Console(highlight=False)
    return _console


def safe_print(message: str, style: str | None = None) -> None:
    """Print Rich markup to the player's console.

    Args:
        message: Markup to print; callers escape track names and paths
        style: Style applied to the whole line (e.g. "green" for successes)
    """
    console = get_console()
    if style:
        console.print(message, style=style)
    else:
        console.print(message)

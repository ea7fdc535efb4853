"""
musicplayer - interactive command loop
"""

import signal
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from loguru import logger
from rich.markup import escape

from musicplayer import router
from musicplayer.commands import library as library_commands
from musicplayer.context import AppContext
from musicplayer.core.config import Config, get_data_dir
from musicplayer.core.console import get_console
from musicplayer.core.output import setup_loguru
from musicplayer.domain import library, playback
from musicplayer.domain.playback import AudioEngine
from musicplayer.utils import parsers

PROMPT = "[bold cyan]musicplayer> [/bold cyan]"


class StartupError(Exception):
    """Fatal fault before the command loop starts."""


def setup_logging(config: Config) -> Path:
    """Initialize file logging from config and return the log file path."""
    log_file = (
        Path(config.logging.log_file).expanduser()
        if config.logging.log_file
        else get_data_dir() / "musicplayer.log"
    )
    setup_loguru(
        log_file,
        level=config.logging.level,
        rotation=config.logging.rotation,
        retention=config.logging.retention,
    )
    return log_file


def _raise_interrupt(signum, frame) -> None:
    raise KeyboardInterrupt


@contextmanager
def deferred_interrupts():
    """Hold SIGINT and SIGTERM until the enclosed transition has finished.

    A transition swaps engine handles; interrupting it halfway would leave a
    handle the session does not know about. Outside the main thread this is a
    plain passthrough.
    """
    received = []

    def _record(signum, frame) -> None:
        received.append(signum)

    try:
        previous = {
            signum: signal.signal(signum, _record)
            for signum in (signal.SIGINT, signal.SIGTERM)
        }
    except ValueError:
        yield
        return

    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)
    if received:
        raise KeyboardInterrupt


def build_context(
    directory: Path, config: Config, engine: Optional[AudioEngine] = None
) -> AppContext:
    """Validate startup inputs and build the initial context.

    Raises:
        StartupError: If the directory is invalid or no audio engine is available
    """
    try:
        files = library.list_regular_files(directory, config.music.supported_formats)
    except OSError as e:
        raise StartupError(str(e)) from e

    if engine is None:
        if not playback.check_mpv_available(config.player.mpv_path):
            raise StartupError(
                f"Audio engine not available: '{config.player.mpv_path}' could not be run"
            )
        engine = playback.MpvEngine(config.player)

    catalog = library.Catalog.build(files)
    logger.info(f"Catalog built: {len(catalog)} tracks from {directory}")
    return AppContext.create(config, catalog, engine, console=get_console())


def run_loop(ctx: AppContext, read_line=None) -> AppContext:
    """Read, parse, dispatch and report until exit, EOF or interrupt.

    The engine handle is released on every way out of the loop.

    Args:
        ctx: Initial application context
        read_line: Callable returning the next input line (defaults to the prompt)

    Returns:
        Final context, with no engine handle held
    """
    console = ctx.console or get_console()
    if read_line is None:
        def read_line() -> str:
            return console.input(PROMPT)

    try:
        should_continue = True
        while should_continue:
            try:
                user_input = read_line()
            except EOFError:
                console.print()
                ctx, should_continue = router.handle_command(ctx, parsers.Exit())
                break

            logger.debug(f"Command: {user_input!r}")
            with deferred_interrupts():
                ctx, should_continue = router.dispatch_line(ctx, user_input)

    except KeyboardInterrupt:
        console.print("\n[blue]Info[/blue]: Exiting...")
        logger.info("Interrupted by user")
    finally:
        ctx = ctx.with_session(playback.shutdown(ctx.session))

    return ctx


def interactive_mode(directory: Path, config: Config) -> int:
    """Run the player on ``directory``.

    Returns:
        Process exit code (0 on normal exit or interrupt, 1 on startup failure)
    """
    console = get_console()

    try:
        ctx = build_context(directory, config)
    except StartupError as e:
        logger.error(f"Startup failed: {e}")
        console.print(f"[bold red]Error[/bold red]: {escape(str(e))}")
        return 1

    previous_sigterm = signal.signal(signal.SIGTERM, _raise_interrupt)
    try:
        console.print("\n[bold green]Welcome to Music Player![/bold green]")
        console.print(f"Loaded directory: [blue]{escape(str(directory))}[/blue]")
        console.print(f"Found [yellow]{len(ctx.catalog)}[/yellow] songs.\n")
        ctx, _ = library_commands.handle_list_command(ctx)

        run_loop(ctx)
    finally:
        signal.signal(signal.SIGTERM, previous_sigterm)

    return 0


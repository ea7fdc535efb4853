"""
Unified output system using Loguru.
User-facing messages go to the console and to the log file.
"""

from pathlib import Path

from loguru import logger
from rich.markup import escape

from .console import safe_print

LEVEL_STYLES = {
    "debug": "cyan",
    "info": None,
    "success": "green",
    "warning": "yellow",
    "error": "red",
}


def setup_loguru(
    log_file: Path, level: str = "INFO", rotation: str = "10 MB", retention: int = 5
) -> None:
    """
    Configure loguru for file-only logging (the console shows user-facing output).

    Args:
        log_file: Path to log file
        level: Minimum level for file logging (DEBUG, INFO, WARNING, ERROR);
            an unknown name is reported and replaced by INFO
        rotation: Size or interval at which the file rotates
        retention: Number of rotated files to keep
    """
    try:
        logger.level(level)
    except ValueError:
        safe_print(f"Unknown log level '{escape(level)}'. Using INFO.", style="yellow")
        level = "INFO"

    # Remove default stderr handler
    logger.remove()

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        rotation=rotation,
        retention=retention,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,
    )

    logger.info(f"Loguru initialized: {log_file} (level={level})")


def log(message: str, level: str = "info") -> None:
    """
    Write a user-facing message to the log file and print it.

    Args:
        message: User-facing message (may contain Rich markup)
        level: Log level (debug, info, success, warning, error)
    """
    log_func = getattr(logger, level)
    log_func(message)

    safe_print(message, style=LEVEL_STYLES.get(level))

"""
File enumeration for the track catalog.

Lists the regular files of a single directory (no recursion). Entries are
returned in directory-iteration order, which is platform dependent and NOT
sorted; catalog indices follow this order.
"""

import os
from pathlib import Path
from typing import Optional

from loguru import logger


class DirectoryError(OSError):
    """Raised when the music directory is missing or not a directory."""


def is_supported_format(path: Path, supported_formats: list[str]) -> bool:
    """Check if file format is supported (empty list accepts everything)."""
    if not supported_formats:
        return True
    return path.suffix.lower() in supported_formats


def validate_directory(directory: Path) -> Path:
    """Ensure the directory exists and is a directory.

    Raises:
        DirectoryError: If the path is missing or not a directory
    """
    if not directory.exists():
        raise DirectoryError(f"Directory not found: {directory}")
    if not directory.is_dir():
        raise DirectoryError(f"Not a directory: {directory}")
    return directory


def list_regular_files(
    directory: Path, supported_formats: Optional[list[str]] = None
) -> list[Path]:
    """List regular files directly inside ``directory``.

    Args:
        directory: Directory to enumerate
        supported_formats: Optional extension filter (lower-case, with dot)

    Returns:
        Paths in directory-iteration order
    """
    validate_directory(directory)
    formats = supported_formats or []

    files = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if not entry.is_file():
                continue
            path = Path(entry.path)
            if is_supported_format(path, formats):
                files.append(path)
            else:
                logger.debug(f"Skipping unsupported file: {path}")

    logger.info(f"Enumerated {len(files)} files in {directory}")
    return files

"""
Track catalog domain models.
"""

from pathlib import Path
from typing import NamedTuple


class TrackDescriptor(NamedTuple):
    """One playable file and its stable catalog index.

    Indices start at 1 and are never reused within a catalog.
    """

    index: int
    path: Path
    display_name: str

"""
Track catalog: an ordered, read-only index of playable files.
"""

from pathlib import Path
from typing import Iterable, Optional

from .models import TrackDescriptor


class Catalog:
    """Maps stable 1-based indices to track descriptors.

    Built once from a file listing and never mutated afterwards. Ordering is
    the listing order supplied at build time.
    """

    def __init__(self, tracks: Iterable[TrackDescriptor] = ()):
        self._tracks: dict[int, TrackDescriptor] = {}
        for track in tracks:
            if track.index in self._tracks:
                raise ValueError(f"Duplicate catalog index: {track.index}")
            self._tracks[track.index] = track

    @classmethod
    def build(cls, source_listing: Iterable[Path]) -> "Catalog":
        """Assign indices 1..N to the listing, in listing order."""
        return cls(
            TrackDescriptor(index=index, path=Path(path), display_name=Path(path).name)
            for index, path in enumerate(source_listing, start=1)
        )

    def get(self, index: int) -> Optional[TrackDescriptor]:
        """Look up a track; unknown indices return None."""
        return self._tracks.get(index)

    def all(self) -> list[tuple[int, TrackDescriptor]]:
        """All (index, descriptor) pairs in index order."""
        return sorted(self._tracks.items())

    def __len__(self) -> int:
        return len(self._tracks)

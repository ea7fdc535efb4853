"""Shared fixtures: a recording fake audio engine and small catalogs."""

from pathlib import Path

import pytest

from musicplayer.core.config import Config
from musicplayer.context import AppContext
from musicplayer.domain.library import Catalog
from musicplayer.domain.playback import AudioSource, DeviceUnavailableError, SourceError


class FakeHandle:
    """Engine handle that records every call."""

    def __init__(self, engine: "FakeEngine"):
        self.engine = engine
        self.calls: list[tuple] = []
        self.released = False

    def enqueue_and_start(self, source: AudioSource) -> None:
        if source.path.name in self.engine.fail_on_start:
            raise SourceError(f"Cannot decode {source.path.name}")
        self.calls.append(("start", source.path))

    def pause(self) -> None:
        self.calls.append(("pause",))

    def resume(self) -> None:
        self.calls.append(("resume",))

    def stop(self) -> None:
        self.calls.append(("stop",))

    def set_gain(self, value: float) -> None:
        self.calls.append(("gain", value))

    def release(self) -> None:
        assert not self.released, "handle released twice"
        self.released = True
        self.engine.release_count += 1


class FakeEngine:
    """AudioEngine double tracking how many handles are open at once."""

    def __init__(self):
        self.handles: list[FakeHandle] = []
        self.release_count = 0
        self.max_open = 0
        self.device_available = True
        self.unreadable: set[str] = set()
        self.fail_on_start: set[str] = set()

    @property
    def open_handles(self) -> list[FakeHandle]:
        return [h for h in self.handles if not h.released]

    def probe_source(self, path: Path) -> AudioSource:
        if path.name in self.unreadable:
            raise SourceError(f"Cannot open {path.name}")
        return AudioSource(path=path)

    def open_session(self) -> FakeHandle:
        if not self.device_available:
            raise DeviceUnavailableError("Audio device busy")
        handle = FakeHandle(self)
        self.handles.append(handle)
        self.max_open = max(self.max_open, len(self.open_handles))
        return handle


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def catalog() -> Catalog:
    """Catalog with three tracks at indices 1, 2, 3."""
    return Catalog.build(
        [Path("/music/alpha.mp3"), Path("/music/beta.flac"), Path("/music/gamma.ogg")]
    )


@pytest.fixture
def ctx(catalog: Catalog, engine: FakeEngine) -> AppContext:
    return AppContext.create(Config(), catalog, engine)

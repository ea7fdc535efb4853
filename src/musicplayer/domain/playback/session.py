"""
Playback session state machine.

Functional approach with explicit state passing: every transition takes the
current PlaybackSession and returns (updated_session, report). The session
holds at most one engine handle at any time.
"""

import time
from enum import Enum
from typing import NamedTuple, Optional

from loguru import logger

from musicplayer.domain.library.catalog import Catalog
from musicplayer.domain.library.models import TrackDescriptor
from musicplayer.domain.reports import NOOP, Outcome, Report, ok

from .engine import AudioEngine, EngineError, EngineHandle

MIN_VOLUME = 0.0
MAX_VOLUME = 1.0


class PlaybackState(Enum):
    IDLE = "Idle"
    PLAYING = "Playing"
    PAUSED = "Paused"


class PlaybackSession(NamedTuple):
    """Immutable snapshot of the single playback session."""

    state: PlaybackState = PlaybackState.IDLE
    current_track: Optional[TrackDescriptor] = None
    volume: float = 1.0
    started_at: Optional[float] = None  # Unix timestamp of the last track start
    handle: Optional[EngineHandle] = None


class SessionStatus(NamedTuple):
    """Read-only view returned by status()."""

    current_track: Optional[TrackDescriptor]
    state: PlaybackState
    elapsed: Optional[float]
    volume: float


def _release(session: PlaybackSession) -> PlaybackSession:
    """Stop and release the held handle, leaving the session idle."""
    if session.handle is not None:
        session.handle.stop()
        session.handle.release()
        logger.debug("Engine handle released")
    return session._replace(
        state=PlaybackState.IDLE,
        current_track=None,
        started_at=None,
        handle=None,
    )


def select_and_play(
    session: PlaybackSession,
    catalog: Catalog,
    engine: AudioEngine,
    index: int,
    now: Optional[float] = None,
) -> tuple[PlaybackSession, Report]:
    """Start the track at ``index`` from the beginning, from any state.

    An unknown index or an unreadable file leaves the session untouched.
    Otherwise the previous handle is released before a new one is opened.
    If the engine fails after that point the session ends up idle.
    """
    track = catalog.get(index)
    if track is None:
        logger.info(f"select_and_play: no track at index {index}")
        return session, Report(Outcome.INVALID_INDEX, "Invalid song index")

    try:
        source = engine.probe_source(track.path)
    except EngineError as e:
        logger.warning(f"select_and_play: cannot use {track.path}: {e}")
        return session, Report(Outcome.ENGINE_ERROR, str(e))

    session = _release(session)

    handle = None
    try:
        handle = engine.open_session()
        handle.enqueue_and_start(source)
        handle.set_gain(session.volume)
    except EngineError as e:
        logger.error(f"select_and_play: engine failed for {track.path}: {e}")
        if handle is not None:
            handle.release()
        return session, Report(Outcome.ENGINE_ERROR, str(e))

    logger.info(f"Playing track {track.index}: {track.path}")
    return (
        session._replace(
            state=PlaybackState.PLAYING,
            current_track=track,
            started_at=time.time() if now is None else now,
            handle=handle,
        ),
        ok(f"Playing {track.display_name}"),
    )


def pause(session: PlaybackSession) -> tuple[PlaybackSession, Report]:
    """Pause playback. No-op unless playing."""
    if session.state is not PlaybackState.PLAYING:
        return session, NOOP

    session.handle.pause()
    logger.debug("Playback paused")
    return session._replace(state=PlaybackState.PAUSED), ok("Playback paused")


def resume(session: PlaybackSession) -> tuple[PlaybackSession, Report]:
    """Resume playback. No-op unless paused."""
    if session.state is not PlaybackState.PAUSED:
        return session, NOOP

    session.handle.resume()
    logger.debug("Playback resumed")
    return session._replace(state=PlaybackState.PLAYING), ok("Playback resumed")


def stop(session: PlaybackSession) -> tuple[PlaybackSession, Report]:
    """Stop playback and release the handle. No-op when idle."""
    if session.state is PlaybackState.IDLE:
        return session, NOOP

    return _release(session), ok("Playback stopped")


def set_volume(session: PlaybackSession, value: float) -> tuple[PlaybackSession, Report]:
    """Set the gain, applying it immediately if a handle is held.

    Values outside [0.0, 1.0] (including NaN) are rejected unchanged.
    """
    if not MIN_VOLUME <= value <= MAX_VOLUME:
        logger.info(f"set_volume: rejected {value}")
        return session, Report(Outcome.OUT_OF_RANGE, "Volume must be 0.0 to 1.0")

    if session.handle is not None:
        session.handle.set_gain(value)
    return session._replace(volume=value), ok(f"Volume set to {value:.1f}")


def status(session: PlaybackSession, now: Optional[float] = None) -> SessionStatus:
    """Snapshot of the session.

    Elapsed time is measured from the last track start and keeps counting
    while paused.
    """
    elapsed = None
    if session.started_at is not None:
        current = time.time() if now is None else now
        elapsed = max(0.0, current - session.started_at)

    return SessionStatus(
        current_track=session.current_track,
        state=session.state,
        elapsed=elapsed,
        volume=session.volume,
    )


def shutdown(session: PlaybackSession) -> PlaybackSession:
    """Release any held handle before the process exits."""
    if session.handle is None:
        return session
    logger.info("Releasing audio engine before exit")
    return _release(session)

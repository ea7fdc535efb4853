"""Playback domain - audio engine adapter and session state machine.

This domain handles:
- MPV integration via JSON IPC (one process per engine handle)
- Source probing with mutagen before a track reaches the engine
- The single playback session (idle, playing, paused)
"""

# Engine adapter
from .engine import (
    AudioEngine,
    AudioSource,
    DeviceUnavailableError,
    EngineError,
    EngineHandle,
    MpvEngine,
    MpvHandle,
    SourceError,
    check_mpv_available,
    probe_audio_file,
    send_mpv_command,
)

# Session state machine
from .session import (
    PlaybackSession,
    PlaybackState,
    SessionStatus,
    pause,
    resume,
    select_and_play,
    set_volume,
    shutdown,
    status,
    stop,
)

__all__ = [
    # Engine
    "AudioEngine",
    "AudioSource",
    "DeviceUnavailableError",
    "EngineError",
    "EngineHandle",
    "MpvEngine",
    "MpvHandle",
    "SourceError",
    "check_mpv_available",
    "probe_audio_file",
    "send_mpv_command",
    # Session
    "PlaybackSession",
    "PlaybackState",
    "SessionStatus",
    "pause",
    "resume",
    "select_and_play",
    "set_volume",
    "shutdown",
    "status",
    "stop",
]

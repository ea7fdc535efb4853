"""
Audio engine adapter backed by MPV over JSON IPC.

The playback session only sees the AudioEngine / EngineHandle protocols.
MpvEngine spawns one idle MPV process per handle and drives it through its
IPC socket; releasing the handle kills the process and removes the socket.
"""

import itertools
import json
import os
import socket
import subprocess
import tempfile
import time
from pathlib import Path
from typing import Any, NamedTuple, Optional, Protocol

from loguru import logger
from mutagen import File as MutagenFile
from mutagen import MutagenError

from musicplayer.core.config import PlayerConfig


class EngineError(Exception):
    """Base class for audio engine faults."""


class DeviceUnavailableError(EngineError):
    """The engine could not acquire an output session."""


class SourceError(EngineError):
    """A track could not be opened or decoded."""


class AudioSource(NamedTuple):
    """A probed, playable audio file."""

    path: Path


class EngineHandle(Protocol):
    """Live output session for one track."""

    def enqueue_and_start(self, source: AudioSource) -> None: ...

    def pause(self) -> None: ...

    def resume(self) -> None: ...

    def stop(self) -> None: ...

    def set_gain(self, value: float) -> None: ...

    def release(self) -> None: ...


class AudioEngine(Protocol):
    """Factory for engine handles."""

    def probe_source(self, path: Path) -> AudioSource: ...

    def open_session(self) -> EngineHandle: ...


def check_mpv_available(mpv_path: str = "mpv") -> bool:
    """Check if MPV is available on the system."""
    try:
        result = subprocess.run(
            [mpv_path, "--version"], capture_output=True, text=True, timeout=5
        )
        return result.returncode == 0
    except (subprocess.SubprocessError, FileNotFoundError, OSError):
        return False


def send_mpv_command(socket_path: Optional[str], command: dict[str, Any]) -> bool:
    """Send JSON IPC command to MPV."""
    if not socket_path or not os.path.exists(socket_path):
        return False

    try:
        with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
            sock.settimeout(2.0)
            sock.connect(socket_path)
            sock.sendall((json.dumps(command) + "\n").encode("utf-8"))
            response = sock.recv(4096).decode("utf-8").strip()

        if not response:
            return True

        # MPV may interleave events; the reply is the line carrying "error"
        for line in response.splitlines():
            try:
                data = json.loads(line)
            except json.JSONDecodeError:
                continue
            if "error" in data:
                return data["error"] == "success"
        return False

    except (socket.error, OSError):
        return False


def probe_audio_file(path: Path) -> AudioSource:
    """Check that a file is readable and in a format mutagen recognizes.

    Raises:
        SourceError: If the file cannot be read or is not recognizable audio
    """
    try:
        with open(path, "rb") as f:
            f.read(1)
    except OSError as e:
        raise SourceError(f"Cannot open {path.name}: {e.strerror or e}") from e

    try:
        audio = MutagenFile(path)
    except MutagenError as e:
        raise SourceError(f"Cannot decode {path.name}: {e}") from e

    if audio is None:
        raise SourceError(f"Unsupported audio format: {path.name}")

    return AudioSource(path=path)


class MpvHandle:
    """One MPV process with its IPC socket."""

    def __init__(self, process: subprocess.Popen, socket_path: str):
        self.process = process
        self.socket_path = socket_path
        self._released = False

    def _command(self, *args: Any) -> bool:
        success = send_mpv_command(self.socket_path, {"command": list(args)})
        if not success:
            logger.warning(f"MPV command failed: {args[0]}")
        return success

    def is_running(self) -> bool:
        """Check if the MPV process is still alive and its socket exists."""
        if self._released or self.process.poll() is not None:
            return False
        return os.path.exists(self.socket_path)

    def enqueue_and_start(self, source: AudioSource) -> None:
        if not self.is_running():
            raise DeviceUnavailableError("Audio engine is not running")
        if not self._command("loadfile", str(source.path), "replace"):
            raise SourceError(f"Engine rejected {source.path.name}")
        self._command("set_property", "pause", False)
        logger.info(f"MPV playing: {source.path}")

    def pause(self) -> None:
        self._command("set_property", "pause", True)

    def resume(self) -> None:
        self._command("set_property", "pause", False)

    def stop(self) -> None:
        self._command("stop")

    def set_gain(self, value: float) -> None:
        # MPV volume is a percentage
        self._command("set_property", "volume", round(value * 100))

    def release(self) -> None:
        """Stop MPV process and cleanup. Safe to call more than once."""
        if self._released:
            return
        self._released = True

        try:
            self.process.kill()
            self.process.wait(timeout=2.0)
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.warning(f"MPV did not exit cleanly: {e}")

        if os.path.exists(self.socket_path):
            try:
                os.unlink(self.socket_path)
            except OSError:
                pass
        logger.debug(f"MPV handle released: {self.socket_path}")


class MpvEngine:
    """AudioEngine that spawns an MPV process per session."""

    _counter = itertools.count(1)

    def __init__(self, config: PlayerConfig):
        self.config = config

    def _socket_path(self) -> str:
        socket_dir = (
            Path(self.config.mpv_socket_dir)
            if self.config.mpv_socket_dir
            else Path(tempfile.gettempdir())
        )
        return str(socket_dir / f"musicplayer-mpv-{os.getpid()}-{next(self._counter)}")

    def probe_source(self, path: Path) -> AudioSource:
        return probe_audio_file(path)

    def open_session(self) -> MpvHandle:
        """Start MPV with JSON IPC and return a handle.

        Raises:
            DeviceUnavailableError: If MPV cannot be started or does not answer
        """
        socket_path = self._socket_path()
        logger.info(f"Starting MPV with socket: {socket_path}")

        if os.path.exists(socket_path):
            os.unlink(socket_path)

        cmd = [
            self.config.mpv_path,
            "--idle=yes",
            "--no-video",
            "--no-terminal",
            f"--input-ipc-server={socket_path}",
            "--keep-open=no",
            "--load-scripts=no",
        ]

        try:
            process = subprocess.Popen(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                stdin=subprocess.DEVNULL,
            )
        except (subprocess.SubprocessError, OSError) as e:
            raise DeviceUnavailableError(f"Failed to start MPV: {e}") from e

        handle = MpvHandle(process, socket_path)

        # Wait for socket to be created
        deadline = time.monotonic() + self.config.startup_timeout
        while not os.path.exists(socket_path):
            if process.poll() is not None or time.monotonic() > deadline:
                handle.release()
                raise DeviceUnavailableError(
                    f"MPV socket not ready after {self.config.startup_timeout}s"
                )
            time.sleep(0.05)

        if not send_mpv_command(socket_path, {"command": ["get_property", "idle-active"]}):
            handle.release()
            raise DeviceUnavailableError("MPV socket connection test failed")

        logger.info("MPV started successfully")
        return handle

"""Tests for the MPV engine adapter with the IPC layer mocked."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from musicplayer.core.config import PlayerConfig
from musicplayer.domain.playback import engine as engine_module
from musicplayer.domain.playback.engine import (
    AudioSource,
    DeviceUnavailableError,
    MpvEngine,
    MpvHandle,
    SourceError,
    check_mpv_available,
    probe_audio_file,
    send_mpv_command,
)


@pytest.fixture
def handle(tmp_path: Path) -> MpvHandle:
    """Handle around a fake live process with an existing socket file."""
    socket_path = tmp_path / "mpv.sock"
    socket_path.touch()
    process = MagicMock()
    process.poll.return_value = None
    return MpvHandle(process, str(socket_path))


class TestProbeAudioFile:

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceError):
            probe_audio_file(tmp_path / "gone.mp3")

    def test_unrecognized_format(self, tmp_path):
        junk = tmp_path / "notes.txt"
        junk.write_text("not audio at all")
        with pytest.raises(SourceError, match="Unsupported audio format"):
            probe_audio_file(junk)

    def test_recognized_format(self, tmp_path):
        track = tmp_path / "song.mp3"
        track.write_bytes(b"\x00" * 16)
        with patch.object(engine_module, "MutagenFile", return_value=MagicMock()):
            source = probe_audio_file(track)
        assert source.path == track


class TestMpvHandle:

    def test_enqueue_and_start_loads_and_unpauses(self, handle):
        with patch.object(engine_module, "send_mpv_command", return_value=True) as send:
            handle.enqueue_and_start(AudioSource(Path("/m/a.mp3")))
        commands = [call.args[1]["command"] for call in send.call_args_list]
        assert commands == [
            ["loadfile", "/m/a.mp3", "replace"],
            ["set_property", "pause", False],
        ]

    def test_enqueue_rejected(self, handle):
        with patch.object(engine_module, "send_mpv_command", return_value=False):
            with pytest.raises(SourceError):
                handle.enqueue_and_start(AudioSource(Path("/m/a.mp3")))

    def test_enqueue_on_dead_process(self, handle):
        handle.process.poll.return_value = 1
        with pytest.raises(DeviceUnavailableError):
            handle.enqueue_and_start(AudioSource(Path("/m/a.mp3")))

    def test_set_gain_scales_to_percent(self, handle):
        with patch.object(engine_module, "send_mpv_command", return_value=True) as send:
            handle.set_gain(0.35)
        assert send.call_args.args[1] == {"command": ["set_property", "volume", 35]}

    def test_pause_resume_stop(self, handle):
        with patch.object(engine_module, "send_mpv_command", return_value=True) as send:
            handle.pause()
            handle.resume()
            handle.stop()
        commands = [call.args[1]["command"] for call in send.call_args_list]
        assert commands == [
            ["set_property", "pause", True],
            ["set_property", "pause", False],
            ["stop"],
        ]

    def test_release_kills_and_removes_socket(self, handle):
        handle.release()
        handle.process.kill.assert_called_once()
        assert not Path(handle.socket_path).exists()
        assert not handle.is_running()

    def test_release_twice_is_harmless(self, handle):
        handle.release()
        handle.release()
        handle.process.kill.assert_called_once()


class TestMpvEngine:

    def test_missing_binary_is_device_error(self, tmp_path):
        config = PlayerConfig(mpv_path=str(tmp_path / "no-mpv"), mpv_socket_dir=str(tmp_path))
        with pytest.raises(DeviceUnavailableError):
            MpvEngine(config).open_session()

    def test_process_exits_before_socket(self, tmp_path):
        process = MagicMock()
        process.poll.return_value = 1
        config = PlayerConfig(mpv_socket_dir=str(tmp_path), startup_timeout=0.2)
        with patch.object(engine_module.subprocess, "Popen", return_value=process):
            with pytest.raises(DeviceUnavailableError):
                MpvEngine(config).open_session()
        process.kill.assert_called_once()

    def test_socket_paths_are_unique(self, tmp_path):
        engine = MpvEngine(PlayerConfig(mpv_socket_dir=str(tmp_path)))
        assert engine._socket_path() != engine._socket_path()


class TestIpcHelpers:

    def test_send_without_socket(self, tmp_path):
        assert send_mpv_command(str(tmp_path / "absent.sock"), {"command": ["stop"]}) is False
        assert send_mpv_command(None, {"command": ["stop"]}) is False

    def test_check_mpv_available_missing_binary(self, tmp_path):
        assert check_mpv_available(str(tmp_path / "no-mpv")) is False

"""Tests for the command-line entry point."""

from unittest.mock import patch

import pytest

from musicplayer import cli


class TestMain:

    def test_how_to_prints_usage_and_exits_zero(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["--how-to"])
        assert exc.value.code == 0
        assert "Music Player Usage Instructions" in capsys.readouterr().out

    def test_directory_is_required(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main([])
        assert exc.value.code != 0
        assert "--dir" in capsys.readouterr().err

    def test_missing_directory_exits_non_zero(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        monkeypatch.chdir(tmp_path)
        with patch("musicplayer.main.setup_logging"):
            with pytest.raises(SystemExit) as exc:
                cli.main(["--dir", str(tmp_path / "missing")])
        assert exc.value.code == 1

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["--version"])
        assert exc.value.code == 0
        assert "0.1.0" in capsys.readouterr().out

    @pytest.mark.parametrize("source", ["flag", "env"])
    def test_unknown_log_level_falls_back_to_info(
        self, tmp_path, monkeypatch, capsys, source
    ):
        from loguru import logger

        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
        monkeypatch.chdir(tmp_path)
        argv = ["--dir", str(tmp_path)]
        if source == "flag":
            argv += ["--log-level", "nope"]
        else:
            monkeypatch.setenv("MUSICPLAYER_LOG_LEVEL", "nope")

        try:
            with patch("musicplayer.main.interactive_mode", return_value=0) as run:
                with pytest.raises(SystemExit) as exc:
                    cli.main(argv)
        finally:
            logger.remove()

        assert exc.value.code == 0
        run.assert_called_once()
        assert "Unknown log level 'NOPE'. Using INFO." in capsys.readouterr().out
        assert (tmp_path / "data" / "musicplayer" / "musicplayer.log").exists()

"""Tests for command-line parsing at the interactive prompt."""

import math

import pytest

from musicplayer.utils.parsers import (
    Exit,
    Help,
    Invalid,
    List_,
    Pause,
    Play,
    Resume,
    Status,
    Stop,
    Volume,
    VolumeParseError,
    parse_command,
    parse_index,
    split_command,
)


class TestSplitCommand:

    def test_lowercases_command_only(self):
        assert split_command("  PLAY Foo  ") == ("play", ["Foo"])

    def test_empty(self):
        assert split_command("   ") == ("", [])


class TestParseCommand:

    @pytest.mark.parametrize("line", ["", "   ", "\t"])
    def test_empty_line_is_none(self, line):
        assert parse_command(line) is None

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("pause", Pause()),
            ("RESUME", Resume()),
            ("stop", Stop()),
            ("list", List_()),
            ("Status", Status()),
            ("help", Help()),
            ("exit", Exit()),
        ],
    )
    def test_simple_commands(self, line, expected):
        assert parse_command(line) == expected

    def test_simple_commands_ignore_argument(self):
        assert parse_command("pause 3") == Pause()

    def test_play_captures_lowercased_argument(self):
        assert parse_command("play 2") == Play("2")
        assert parse_command("Play ABC") == Play("abc")

    def test_play_without_argument(self):
        assert parse_command("play") == Play(None)

    def test_extra_tokens_ignored(self):
        assert parse_command("play 2 3 4") == Play("2")

    def test_volume_parses_float(self):
        assert parse_command("volume 0.5") == Volume(0.5)
        assert parse_command("VOLUME 1") == Volume(1.0)

    def test_volume_out_of_range_still_parses(self):
        assert parse_command("volume 1.5") == Volume(1.5)

    def test_volume_nan_parses(self):
        command = parse_command("volume nan")
        assert isinstance(command, Volume)
        assert math.isnan(command.value)

    def test_volume_missing_value(self):
        assert parse_command("volume") == VolumeParseError("Missing volume value")

    def test_volume_not_a_number(self):
        assert parse_command("volume loud") == VolumeParseError("Invalid volume value")

    def test_volume_digit_separator_rejected(self):
        assert parse_command("volume 0_5") == VolumeParseError("Invalid volume value")

    def test_unknown_word(self):
        assert parse_command("dance now") == Invalid("dance")


class TestParseIndex:

    @pytest.mark.parametrize("argument, expected", [("2", 2), ("-1", -1), ("007", 7)])
    def test_integers(self, argument, expected):
        assert parse_index(argument) == expected

    @pytest.mark.parametrize("argument", [None, "two", "2.5", ""])
    def test_not_integers(self, argument):
        assert parse_index(argument) is None

    @pytest.mark.parametrize("argument", ["0_2", "1_0", "_1"])
    def test_digit_separators_rejected(self, argument):
        assert parse_index(argument) is None

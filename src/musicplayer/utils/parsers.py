"""
Command parsing for the interactive prompt.

Turns one line of operator input into a typed command. The first token picks
the command (case-insensitive); the second token, when present, is carried
on the command as its argument. Further tokens are ignored.
"""

from dataclasses import dataclass
from typing import List, Optional, Union


@dataclass(frozen=True)
class Play:
    # Lower-cased second token, resolved to a catalog index by the handler
    argument: Optional[str] = None


@dataclass(frozen=True)
class Pause:
    pass


@dataclass(frozen=True)
class Resume:
    pass


@dataclass(frozen=True)
class Stop:
    pass


@dataclass(frozen=True)
class List_:
    pass


@dataclass(frozen=True)
class Status:
    pass


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class Exit:
    pass


@dataclass(frozen=True)
class Volume:
    value: float


@dataclass(frozen=True)
class VolumeParseError:
    """``volume`` with a missing or non-numeric value."""

    message: str


@dataclass(frozen=True)
class Invalid:
    word: str


Command = Union[
    Play, Pause, Resume, Stop, List_, Status, Help, Exit, Volume, VolumeParseError, Invalid
]

SIMPLE_COMMANDS = {
    "pause": Pause,
    "resume": Resume,
    "stop": Stop,
    "list": List_,
    "status": Status,
    "help": Help,
    "exit": Exit,
}


def split_command(user_input: str) -> tuple[str, List[str]]:
    """
    Parse user input into command word and arguments.

    Args:
        user_input: Raw user input string

    Returns:
        Tuple of (command, args) where command is lowercase and args is a list
    """
    parts = user_input.strip().split()
    if not parts:
        return "", []

    command = parts[0].lower()
    args = parts[1:] if len(parts) > 1 else []
    return command, args


def parse_volume(token: Optional[str]) -> Union[Volume, VolumeParseError]:
    """Parse the volume argument as a float; range is checked by the session."""
    if token is None:
        return VolumeParseError("Missing volume value")
    if "_" in token:
        return VolumeParseError("Invalid volume value")
    try:
        return Volume(float(token))
    except ValueError:
        return VolumeParseError("Invalid volume value")


def parse_command(user_input: str) -> Optional[Command]:
    """
    Parse one input line into a Command.

    Args:
        user_input: Raw user input string

    Returns:
        The parsed command, or None for an empty line
    """
    word, args = split_command(user_input)
    if not word:
        return None

    argument = args[0] if args else None

    if word == "play":
        return Play(argument.lower() if argument is not None else None)
    if word == "volume":
        return parse_volume(argument)
    if word in SIMPLE_COMMANDS:
        return SIMPLE_COMMANDS[word]()
    return Invalid(word)


def parse_index(argument: Optional[str]) -> Optional[int]:
    """Parse a play argument as an integer index, or None if it is not one.

    Digit separators (``1_0``) are not accepted.
    """
    if argument is None or "_" in argument:
        return None
    try:
        return int(argument)
    except ValueError:
        return None


__all__ = [
    "Command",
    "Play",
    "Pause",
    "Resume",
    "Stop",
    "List_",
    "Status",
    "Help",
    "Exit",
    "Volume",
    "VolumeParseError",
    "Invalid",
    "split_command",
    "parse_command",
    "parse_volume",
    "parse_index",
]

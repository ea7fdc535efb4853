"""musicplayer - interactive command-line player for a directory of audio files."""

__version__ = "0.1.0"

"""
Cross-cutting utilities for musicplayer.

Contains:
- parsers: Command line parsing for the interactive prompt
"""

from .parsers import *

__all__ = [
    'Command',
    'split_command',
    'parse_command',
    'parse_volume',
    'parse_index',
]

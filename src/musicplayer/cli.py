"""
musicplayer - command-line entry point

Parses startup flags, loads configuration and logging, then hands over to
the interactive command loop.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from musicplayer import __version__


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the musicplayer command."""
    parser = argparse.ArgumentParser(
        prog="musicplayer",
        description="Command-line music player",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '-d', '--dir',
        dest='music_dir',
        metavar='DIRECTORY',
        help='Sets the music directory'
    )
    parser.add_argument(
        '--how-to',
        action='store_true',
        help='Shows operation commands and how to use the application.'
    )
    parser.add_argument(
        '--config',
        metavar='PATH',
        help='Path to config.toml (default: ./config.toml or ~/.config/musicplayer/config.toml)'
    )
    parser.add_argument(
        '--log-level',
        metavar='LEVEL',
        help='Log level for the log file (DEBUG, INFO, WARNING, ERROR)'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the musicplayer command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.how_to:
        from musicplayer.router import print_help
        print_help()
        sys.exit(0)

    if not args.music_dir:
        parser.error("the following arguments are required: -d/--dir")

    from musicplayer.core.config import load_config
    from musicplayer.main import interactive_mode, setup_logging

    config = load_config(Path(args.config) if args.config else None)
    if args.log_level:
        config.logging.level = args.log_level.upper()
    setup_logging(config)

    sys.exit(interactive_mode(Path(args.music_dir).expanduser(), config))


if __name__ == "__main__":
    main()

"""Core infrastructure layer - no playback logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging and user-facing output (Loguru)
- Console management (Rich)
"""

from .config import (
    Config,
    ConfigError,
    get_config_dir,
    get_config_path,
    get_data_dir,
    load_config,
)
from .console import get_console, safe_print
from .output import log, setup_loguru

__all__ = [
    # Config
    "Config",
    "ConfigError",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "load_config",
    # Console
    "get_console",
    "safe_print",
    # Output
    "log",
    "setup_loguru",
]

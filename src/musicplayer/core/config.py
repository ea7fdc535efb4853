"""
Configuration management for musicplayer
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


class ConfigError(ValueError):
    """Raised when a configuration value is invalid."""


@dataclass
class MusicConfig:
    """Configuration for track discovery."""

    # Empty list keeps every regular file in the directory
    supported_formats: List[str] = field(default_factory=list)


@dataclass
class PlayerConfig:
    """Configuration for the audio engine and session defaults."""

    mpv_path: str = "mpv"
    mpv_socket_dir: Optional[str] = None
    volume: float = 1.0
    startup_timeout: float = 5.0

    def validate(self) -> None:
        """Validate player configuration values.

        Raises:
            ConfigError: If configuration values are invalid
        """
        if not 0.0 <= self.volume <= 1.0:
            raise ConfigError(
                f"Invalid player volume: {self.volume}. Must be 0.0 to 1.0"
            )
        if self.startup_timeout <= 0:
            raise ConfigError(
                f"Invalid startup_timeout: {self.startup_timeout}. Must be positive"
            )


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = None  # default: ~/.local/share/musicplayer/musicplayer.log
    rotation: str = "10 MB"
    retention: int = 5


@dataclass
class Config:
    """Main configuration object."""

    music: MusicConfig = field(default_factory=MusicConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "musicplayer"
    return Path.home() / ".config" / "musicplayer"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "musicplayer"
    return Path.home() / ".local" / "share" / "musicplayer"


def get_config_path(explicit: Optional[Path] = None) -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Explicit path (--config)
    2. Current working directory
    3. XDG_CONFIG_HOME/musicplayer (or ~/.config/musicplayer)
    """
    if explicit is not None:
        return explicit

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def _normalize_formats(formats: List[str]) -> List[str]:
    normalized = []
    for ext in formats:
        ext = ext.strip().lower()
        if ext and not ext.startswith("."):
            ext = "." + ext
        if ext:
            normalized.append(ext)
    return normalized


def _apply_env_overrides(config: Config) -> None:
    mpv_path = os.environ.get("MUSICPLAYER_MPV_PATH")
    log_level = os.environ.get("MUSICPLAYER_LOG_LEVEL")

    if mpv_path:
        config.player.mpv_path = mpv_path
    if log_level:
        config.logging.level = log_level.upper()


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, falling back to defaults.

    Environment variables override TOML values:
    - MUSICPLAYER_MPV_PATH
    - MUSICPLAYER_LOG_LEVEL

    A missing file is not an error. Unreadable TOML is reported and the
    defaults are used. An out-of-range player volume is reported and reset.
    """
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = get_config_path(config_path)
    config = Config()

    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                toml_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            print(f"Error loading configuration from {config_path}: {e}")
            print("Using default configuration.")
            toml_data = {}

        if "music" in toml_data:
            music_data = toml_data["music"]
            config.music = MusicConfig(
                supported_formats=_normalize_formats(
                    music_data.get("supported_formats", config.music.supported_formats)
                ),
            )

        if "player" in toml_data:
            player_data = toml_data["player"]
            try:
                config.player = PlayerConfig(
                    mpv_path=player_data.get("mpv_path", config.player.mpv_path),
                    mpv_socket_dir=player_data.get("mpv_socket_dir"),
                    volume=float(player_data.get("volume", config.player.volume)),
                    startup_timeout=float(
                        player_data.get("startup_timeout", config.player.startup_timeout)
                    ),
                )
            except (TypeError, ValueError) as e:
                print(f"Configuration error in {config_path}: {e}")
                print("Using default player settings.")
                config.player = PlayerConfig(
                    mpv_path=player_data.get("mpv_path", config.player.mpv_path)
                )

        if "logging" in toml_data:
            logging_data = toml_data["logging"]
            config.logging = LoggingConfig(
                level=str(logging_data.get("level", config.logging.level)).upper(),
                log_file=logging_data.get("log_file"),
                rotation=logging_data.get("rotation", config.logging.rotation),
                retention=logging_data.get("retention", config.logging.retention),
            )

    _apply_env_overrides(config)

    try:
        config.player.validate()
    except ConfigError as e:
        print(f"Configuration error in {config_path}: {e}")
        print("Using default player settings.")
        config.player = PlayerConfig(mpv_path=config.player.mpv_path)

    return config

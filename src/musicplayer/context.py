"""Application context for explicit state passing.

AppContext bundles everything a command handler needs. Handlers return an
updated context rather than mutating shared state.
"""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console

from musicplayer.core.config import Config
from musicplayer.domain.library.catalog import Catalog
from musicplayer.domain.playback.engine import AudioEngine
from musicplayer.domain.playback.session import PlaybackSession


@dataclass(frozen=True)
class AppContext:
    """Immutable application context passed to all command handlers.

    Attributes:
        config: Application configuration
        catalog: Read-only track catalog built at startup
        engine: Audio engine used to open handles
        session: Current playback session
        console: Rich Console for formatted output
    """

    config: Config
    catalog: Catalog
    engine: AudioEngine
    session: PlaybackSession
    console: Optional[Console] = None

    @classmethod
    def create(
        cls,
        config: Config,
        catalog: Catalog,
        engine: AudioEngine,
        console: Optional[Console] = None,
    ) -> 'AppContext':
        """Create initial application context with an idle session.

        Args:
            config: Application configuration
            catalog: Track catalog
            engine: Audio engine adapter
            console: Optional Rich Console instance

        Returns:
            New AppContext with the configured initial volume
        """
        return cls(
            config=config,
            catalog=catalog,
            engine=engine,
            session=PlaybackSession(volume=config.player.volume),
            console=console,
        )

    def with_session(self, session: PlaybackSession) -> 'AppContext':
        """Return new context with updated session.

        Args:
            session: New playback session

        Returns:
            New AppContext with updated session, other fields unchanged
        """
        return AppContext(
            config=self.config,
            catalog=self.catalog,
            engine=self.engine,
            session=session,
            console=self.console,
        )

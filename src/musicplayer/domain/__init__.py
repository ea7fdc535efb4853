"""Domain layer: track catalog and playback session."""

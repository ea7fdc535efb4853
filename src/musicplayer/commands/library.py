"""
Library command handlers for musicplayer.

Handles: list
"""

from typing import Optional, Tuple

from rich.markup import escape

from musicplayer.context import AppContext
from musicplayer.core.output import log
from musicplayer.domain.library import Catalog, TrackDescriptor


def format_listing(catalog: Catalog, current: Optional[TrackDescriptor] = None) -> list[str]:
    """Render one line per catalog entry, marking the current track.

    Args:
        catalog: Track catalog
        current: Currently selected track, if any

    Returns:
        Rich markup lines, one per track, in catalog order
    """
    rows = []
    for index, track in catalog.all():
        name = escape(track.display_name)
        if current is not None and track.index == current.index:
            rows.append(f"[green]{index:<6} {name} ▶[/green]")
        else:
            rows.append(f"{index:<6} {name}")
    return rows


def handle_list_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Handle list command - print every track with its index."""
    log("", "info")
    log("[bold green]Available Songs:[/bold green]", "info")
    log("[green]-------------------------------[/green]", "info")
    log(f"[bold]{'Index':<6} Filename[/bold]", "info")
    for row in format_listing(ctx.catalog, ctx.session.current_track):
        log(row, "info")
    log("", "info")
    return ctx, True

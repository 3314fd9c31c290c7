"""Input adapters that read the roster and stats documents."""

from .sources import (
    SourceError,
    fetch_sources,
    is_url,
    load_dynamic_stats,
    load_static_players,
    parse_dynamic_stats,
    parse_static_players,
)

__all__ = [
    "SourceError",
    "fetch_sources",
    "is_url",
    "load_dynamic_stats",
    "load_static_players",
    "parse_dynamic_stats",
    "parse_static_players",
]

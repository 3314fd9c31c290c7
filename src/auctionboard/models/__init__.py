"""Player data models."""

from .player import (
    ZERO_STATS,
    CombinedPlayer,
    DisplayPlayer,
    DynamicStats,
    StaticPlayer,
    coerce_number,
)

__all__ = [
    "CombinedPlayer",
    "DisplayPlayer",
    "DynamicStats",
    "StaticPlayer",
    "ZERO_STATS",
    "coerce_number",
]

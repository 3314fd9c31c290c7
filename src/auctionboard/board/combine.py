"""Join dynamic stats onto the static roster."""

from __future__ import annotations

from typing import List, Mapping, Sequence

from auctionboard.models import ZERO_STATS, CombinedPlayer, DynamicStats, StaticPlayer


def combine_player(player: StaticPlayer, stats: DynamicStats) -> CombinedPlayer:
    return CombinedPlayer(
        **player.model_dump(),
        runs=stats.runs,
        wickets=stats.wickets,
    )


def combine_players(
    static_players: Sequence[StaticPlayer],
    dynamic_stats: Mapping[str, DynamicStats],
) -> List[CombinedPlayer]:
    """Left-join ``dynamic_stats`` onto ``static_players`` by exact name.

    Output order and length match ``static_players``. Players without an entry
    get zero runs and wickets.
    """

    return [
        combine_player(player, dynamic_stats.get(player.name, ZERO_STATS))
        for player in static_players
    ]


__all__ = ["combine_player", "combine_players"]

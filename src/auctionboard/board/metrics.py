"""Per-price performance metrics."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from auctionboard.models import CombinedPlayer, DisplayPlayer, coerce_number


LAKHS_PER_CRORE_UNIT = 10


def per_lakh(stat: Any, price_cr: Any) -> Optional[float]:
    """Return ``stat`` per lakh of price, rounded to 2 places, or ``None``.

    ``None`` means the ratio is not displayable (no price or no stat), which is
    distinct from a genuine zero.
    """

    price_lakhs = (coerce_number(price_cr) or 0.0) * LAKHS_PER_CRORE_UNIT
    value = coerce_number(stat) or 0.0
    if price_lakhs > 0 and value > 0:
        return round(value / price_lakhs, 2)
    return None


def calculate_metrics(player: CombinedPlayer) -> DisplayPlayer:
    return DisplayPlayer(
        **player.model_dump(),
        runs_per_lakh=per_lakh(player.runs, player.price_cr),
        wickets_per_lakh=per_lakh(player.wickets, player.price_cr),
    )


def calculate_all(players: Iterable[CombinedPlayer]) -> List[DisplayPlayer]:
    return [calculate_metrics(player) for player in players]


__all__ = ["LAKHS_PER_CRORE_UNIT", "calculate_all", "calculate_metrics", "per_lakh"]

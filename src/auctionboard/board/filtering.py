"""Team filtering and single-key sorting for the player board."""

from __future__ import annotations

from typing import Any, Iterable, List, Literal, Sequence, Tuple, TypeVar

from auctionboard.models import CombinedPlayer, coerce_number


ALL_TEAMS = "all"

SortDirection = Literal["asc", "desc"]

SORT_KEYS: Tuple[str, ...] = (
    "name",
    "team",
    "priceCr",
    "runs",
    "wickets",
    "runsPerLakh",
    "wicketsPerLakh",
)
NUMERIC_SORT_KEYS = frozenset({"priceCr", "runs", "wickets", "runsPerLakh", "wicketsPerLakh"})

_SORT_KEY_ALIASES = {
    "runsPerMetric": "runsPerLakh",
    "wicketsPerMetric": "wicketsPerLakh",
}

# Wire name -> model attribute.
_SORT_ATTRIBUTES = {
    "name": "name",
    "team": "team",
    "priceCr": "price_cr",
    "runs": "runs",
    "wickets": "wickets",
    "runsPerLakh": "runs_per_lakh",
    "wicketsPerLakh": "wickets_per_lakh",
}

P = TypeVar("P", bound=CombinedPlayer)


def normalize_sort_key(key: str) -> str:
    """Resolve aliases and reject unknown sort keys with ``ValueError``."""

    resolved = _SORT_KEY_ALIASES.get(key, key)
    if resolved not in _SORT_ATTRIBUTES:
        raise ValueError(f"Unknown sort key {key!r}; expected one of {', '.join(SORT_KEYS)}")
    return resolved


def default_direction(key: str) -> SortDirection:
    """Names read A-Z; every other key shows the biggest values first."""

    return "asc" if normalize_sort_key(key) == "name" else "desc"


def toggle_sort(current_key: str, current_direction: SortDirection, selected_key: str) -> tuple[str, SortDirection]:
    selected = normalize_sort_key(selected_key)
    if selected == normalize_sort_key(current_key):
        return selected, "desc" if current_direction == "asc" else "asc"
    return selected, default_direction(selected)


def filter_by_team(players: Iterable[P], team: str) -> List[P]:
    if team == ALL_TEAMS:
        return list(players)
    return [player for player in players if player.team == team]


def team_options(players: Iterable[CombinedPlayer]) -> List[str]:
    return sorted({player.team for player in players if player.team})


def _numeric_value(value: Any) -> float:
    return coerce_number(value) or 0.0


def _text_value(value: Any) -> str:
    if value is None:
        return ""
    return str(value).lower()


def sort_players(players: Sequence[P], key: str, direction: SortDirection = "asc") -> List[P]:
    """Return ``players`` stably sorted by one key.

    Numeric keys treat missing or non-numeric values as 0; text keys compare
    case-insensitively with missing values as the empty string. Players that
    compare equal keep their input order in both directions.
    """

    if direction not in ("asc", "desc"):
        raise ValueError(f"Unknown sort direction {direction!r}; expected 'asc' or 'desc'")
    resolved = normalize_sort_key(key)
    attribute = _SORT_ATTRIBUTES[resolved]
    coerce = _numeric_value if resolved in NUMERIC_SORT_KEYS else _text_value
    return sorted(
        players,
        key=lambda player: coerce(getattr(player, attribute, None)),
        reverse=direction == "desc",
    )


__all__ = [
    "ALL_TEAMS",
    "NUMERIC_SORT_KEYS",
    "SORT_KEYS",
    "SortDirection",
    "default_direction",
    "filter_by_team",
    "normalize_sort_key",
    "sort_players",
    "team_options",
    "toggle_sort",
]

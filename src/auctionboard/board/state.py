"""Board state, pure transitions and the derived view."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional, Sequence, Tuple

from auctionboard.models import CombinedPlayer, DisplayPlayer

from .filtering import ALL_TEAMS, SortDirection, filter_by_team, sort_players, team_options, toggle_sort
from .metrics import calculate_all


PAGE_SIZE = 10
DEFAULT_SORT_KEY = "name"
DEFAULT_SORT_DIRECTION: SortDirection = "asc"

EMPTY_MESSAGE = "No players found matching your criteria."
LOADING_MESSAGE = "Loading player data..."


@dataclass(frozen=True)
class BoardState:
    """Everything the board needs to render, held as one immutable value."""

    players: Tuple[CombinedPlayer, ...] = ()
    team: str = ALL_TEAMS
    sort_key: str = DEFAULT_SORT_KEY
    sort_direction: SortDirection = DEFAULT_SORT_DIRECTION
    visible_count: int = PAGE_SIZE
    teams: Tuple[str, ...] = ()
    loaded: bool = False
    error: Optional[str] = None
    last_updated: Optional[datetime] = None


@dataclass(frozen=True)
class BoardView:
    """Filtered, sorted and paginated slice of a :class:`BoardState`."""

    visible: Tuple[DisplayPlayer, ...]
    total: int
    show_load_more: bool
    team: str
    teams: Tuple[str, ...]
    sort_key: str
    sort_direction: SortDirection
    message: Optional[str] = None
    is_error: bool = False
    last_updated: Optional[datetime] = None
    warnings: Tuple[str, ...] = field(default_factory=tuple)


def with_players(state: BoardState, players: Sequence[CombinedPlayer], *, now: datetime) -> BoardState:
    """Replace the data snapshot; filter, sort and cursor are kept."""

    teams = state.teams
    if not teams and players:
        teams = tuple(team_options(players))
    return replace(
        state,
        players=tuple(players),
        teams=teams,
        loaded=True,
        error=None,
        last_updated=now,
    )


def with_error(state: BoardState, message: str) -> BoardState:
    return replace(state, error=message)


def with_team(state: BoardState, team: str) -> BoardState:
    return replace(state, team=team, visible_count=PAGE_SIZE)


def with_sort(state: BoardState, key: str) -> BoardState:
    sort_key, direction = toggle_sort(state.sort_key, state.sort_direction, key)
    return replace(state, sort_key=sort_key, sort_direction=direction, visible_count=PAGE_SIZE)


def load_more(state: BoardState) -> BoardState:
    return replace(state, visible_count=state.visible_count + PAGE_SIZE)


def sorted_filtered(state: BoardState) -> list[DisplayPlayer]:
    filtered = filter_by_team(state.players, state.team)
    return sort_players(calculate_all(filtered), state.sort_key, state.sort_direction)


def build_view(state: BoardState) -> BoardView:
    """Derive what to show for ``state``.

    A refresh error replaces the list only while nothing is displayed; with
    stale cards on screen it is surfaced as a warning and "load more" stays
    hidden until the next successful refresh.
    """

    players = sorted_filtered(state)
    visible = tuple(players[: state.visible_count])
    total = len(players)
    message: Optional[str] = None
    is_error = False
    warnings: Tuple[str, ...] = ()

    if state.error and not visible:
        message = f"Could not load player data: {state.error}"
        is_error = True
    elif state.error:
        warnings = (state.error,)
    elif not state.loaded:
        message = LOADING_MESSAGE
    elif not visible:
        message = EMPTY_MESSAGE

    return BoardView(
        visible=visible,
        total=total,
        show_load_more=state.error is None and state.visible_count < total,
        team=state.team,
        teams=state.teams,
        sort_key=state.sort_key,
        sort_direction=state.sort_direction,
        message=message,
        is_error=is_error,
        last_updated=state.last_updated,
        warnings=warnings,
    )


__all__ = [
    "BoardState",
    "BoardView",
    "DEFAULT_SORT_DIRECTION",
    "DEFAULT_SORT_KEY",
    "EMPTY_MESSAGE",
    "LOADING_MESSAGE",
    "PAGE_SIZE",
    "build_view",
    "load_more",
    "sorted_filtered",
    "with_error",
    "with_players",
    "with_sort",
    "with_team",
]

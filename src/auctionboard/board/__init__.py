"""Combine, rank and render the auction player board."""

from .combine import combine_player, combine_players
from .controller import Board, HtmlFileWriter
from .filtering import (
    ALL_TEAMS,
    SORT_KEYS,
    filter_by_team,
    sort_players,
    team_options,
    toggle_sort,
)
from .metrics import calculate_all, calculate_metrics, per_lakh
from .render import card_from_player, render_board, render_page, to_html
from .state import (
    PAGE_SIZE,
    BoardState,
    BoardView,
    build_view,
    load_more,
    with_error,
    with_players,
    with_sort,
    with_team,
)

__all__ = [
    "ALL_TEAMS",
    "Board",
    "BoardState",
    "BoardView",
    "HtmlFileWriter",
    "PAGE_SIZE",
    "SORT_KEYS",
    "build_view",
    "calculate_all",
    "calculate_metrics",
    "card_from_player",
    "combine_player",
    "combine_players",
    "filter_by_team",
    "load_more",
    "per_lakh",
    "render_board",
    "render_page",
    "sort_players",
    "team_options",
    "to_html",
    "toggle_sort",
    "with_error",
    "with_players",
    "with_sort",
    "with_team",
]

from datetime import datetime, timezone

from auctionboard.board import (
    PAGE_SIZE,
    BoardState,
    build_view,
    load_more,
    with_error,
    with_players,
    with_sort,
    with_team,
)
from auctionboard.board.state import EMPTY_MESSAGE, LOADING_MESSAGE
from auctionboard.models import CombinedPlayer


NOW = datetime(2026, 4, 1, 12, 0, tzinfo=timezone.utc)


def _players(count: int, *, team: str = "MI") -> list[CombinedPlayer]:
    return [
        CombinedPlayer(name=f"Player {index:02d}", team=team, price_cr=1, runs=index * 10, wickets=0)
        for index in range(count)
    ]


def _loaded(players) -> BoardState:
    return with_players(BoardState(), players, now=NOW)


def test_initial_state_shows_loading_message():
    view = build_view(BoardState())
    assert view.message == LOADING_MESSAGE
    assert view.visible == ()
    assert not view.show_load_more


def test_pagination_cursor_and_load_more_visibility():
    state = _loaded(_players(25))
    view = build_view(state)
    assert len(view.visible) == PAGE_SIZE
    assert view.total == 25
    assert view.show_load_more

    state = load_more(state)
    assert state.visible_count == 20
    assert build_view(state).show_load_more

    state = load_more(state)
    view = build_view(state)
    assert len(view.visible) == 25
    assert not view.show_load_more


def test_exact_page_boundary_hides_load_more():
    view = build_view(_loaded(_players(10)))
    assert len(view.visible) == 10
    assert not view.show_load_more


def test_filter_and_sort_changes_reset_cursor():
    state = load_more(load_more(_loaded(_players(30))))
    assert state.visible_count == 30

    state = with_team(state, "MI")
    assert state.visible_count == PAGE_SIZE

    state = with_sort(load_more(state), "runs")
    assert state.visible_count == PAGE_SIZE
    assert (state.sort_key, state.sort_direction) == ("runs", "desc")
    assert build_view(state).visible[0].name == "Player 29"

    state = with_sort(state, "runs")
    assert state.sort_direction == "asc"
    assert build_view(state).visible[0].name == "Player 00"


def test_view_ranks_follow_filtered_sorted_order():
    roster = _players(3, team="MI") + _players(2, team="CSK")
    state = with_team(_loaded(roster), "CSK")
    view = build_view(state)
    assert view.total == 2
    assert all(player.team == "CSK" for player in view.visible)


def test_filter_with_no_match_takes_empty_path():
    view = build_view(with_team(_loaded(_players(5)), "Gujarat Titans"))
    assert view.visible == ()
    assert view.total == 0
    assert view.message == EMPTY_MESSAGE
    assert not view.is_error
    assert not view.show_load_more


def test_teams_populated_once_from_first_load():
    state = _loaded(_players(2, team="MI") + _players(1, team="CSK"))
    assert state.teams == ("CSK", "MI")

    state = with_players(state, _players(1, team="RR"), now=NOW)
    assert state.teams == ("CSK", "MI")


def test_error_without_cards_replaces_list():
    view = build_view(with_error(BoardState(), "Failed to load players-static.json: file not found"))
    assert view.is_error
    assert view.message.startswith("Could not load player data")
    assert not view.show_load_more


def test_error_with_stale_cards_keeps_them_and_hides_load_more():
    state = with_error(_loaded(_players(15)), "timeout")
    view = build_view(state)
    assert len(view.visible) == PAGE_SIZE
    assert view.message is None
    assert view.warnings == ("timeout",)
    assert not view.show_load_more

    recovered = build_view(with_players(state, _players(15), now=NOW))
    assert recovered.show_load_more
    assert recovered.warnings == ()


def test_refresh_keeps_filter_sort_and_cursor():
    state = load_more(with_sort(with_team(_loaded(_players(25)), "MI"), "runs"))
    refreshed = with_players(state, _players(25), now=NOW)
    assert (refreshed.team, refreshed.sort_key, refreshed.visible_count) == ("MI", "runs", 20)

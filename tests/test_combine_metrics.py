import pytest

from auctionboard.board import calculate_all, calculate_metrics, combine_players, per_lakh
from auctionboard.models import CombinedPlayer, DynamicStats, StaticPlayer


def _static(name: str, price, team: str = "X") -> StaticPlayer:
    return StaticPlayer.model_validate({"name": name, "priceCr": price, "team": team})


def test_combine_matches_example_roster():
    static = [_static("A", 1, "X"), _static("B", 2, "Y")]
    dynamic = {"A": DynamicStats(runs=50, wickets=0)}

    combined = combine_players(static, dynamic)

    assert [player.name for player in combined] == ["A", "B"]
    assert (combined[0].runs, combined[0].wickets) == (50, 0)
    assert (combined[1].runs, combined[1].wickets) == (0, 0)

    display = calculate_all(combined)
    assert display[0].runs_per_lakh == pytest.approx(5.0)
    assert display[0].wickets_per_lakh is None
    assert display[1].runs_per_lakh is None
    assert display[1].wickets_per_lakh is None


def test_combine_preserves_order_length_and_static_fields():
    static = [_static(name, index + 1) for index, name in enumerate(["Zed", "Amy", "Zed", "Kim"])]
    dynamic = {"Zed": DynamicStats(runs=10, wickets=2), "Nobody": DynamicStats(runs=99, wickets=9)}

    combined = combine_players(static, dynamic)

    assert [player.name for player in combined] == ["Zed", "Amy", "Zed", "Kim"]
    assert [player.price_cr for player in combined] == [1, 2, 3, 4]
    # Duplicate names share the same stats entry.
    assert combined[0].runs == combined[2].runs == 10
    assert combined[1].runs == 0


def test_combine_with_empty_mapping_yields_zero_stats():
    combined = combine_players([_static("A", 1)], {})
    assert (combined[0].runs, combined[0].wickets) == (0, 0)


def test_combine_is_case_sensitive():
    combined = combine_players([_static("Virat Kohli", 21)], {"virat kohli": DynamicStats(runs=5, wickets=0)})
    assert combined[0].runs == 0


def test_combine_keeps_missing_counter_from_present_entry():
    combined = combine_players([_static("A", 1)], {"A": DynamicStats(runs=12)})
    assert combined[0].runs == 12
    assert combined[0].wickets is None


@pytest.mark.parametrize(
    ("stat", "price", "expected"),
    [
        (50, 1, 5.0),
        (657, 21, 3.13),
        (18, 18, 0.1),
        (0, 5, None),
        (10, 0, None),
        (10, None, None),
        (10, "bad", None),
        (-4, 2, None),
        (None, 2, None),
    ],
)
def test_per_lakh(stat, price, expected):
    result = per_lakh(stat, price)
    if expected is None:
        assert result is None
    else:
        assert result == pytest.approx(expected)


def test_per_lakh_tiny_ratio_rounds_to_zero_not_none():
    assert per_lakh(1, 300) == 0.0


def test_calculate_metrics_keeps_combined_fields():
    player = CombinedPlayer(name="B", team="MI", price_cr=2, runs=30, wickets=4)
    display = calculate_metrics(player)

    assert display.name == "B"
    assert display.runs_per_lakh == pytest.approx(1.5)
    assert display.wickets_per_lakh == pytest.approx(0.2)
    assert display.to_wire()["runsPerLakh"] == pytest.approx(1.5)

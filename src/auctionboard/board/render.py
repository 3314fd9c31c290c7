"""Card view-models and an escaped HTML render tree for the board."""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from typing import Mapping, Optional, Sequence, Tuple, Union

from auctionboard.models import DisplayPlayer

from .filtering import ALL_TEAMS, SORT_KEYS
from .state import LOADING_MESSAGE, BoardView


PLACEHOLDER = "--"
PLACEHOLDER_PHOTO = "https://via.placeholder.com/300x200/cccccc/ffffff.png?text=Image+Not+Found"
UNKNOWN_TEAM = "Unknown Team"
NO_PRICE = "N/A"

SORT_LABELS: Mapping[str, str] = {
    "name": "Name",
    "team": "Team",
    "priceCr": "Price",
    "runs": "Runs",
    "wickets": "Wickets",
    "runsPerLakh": "Runs / 10 Lakhs",
    "wicketsPerLakh": "Wickets / 10 Lakhs",
}

_VOID_TAGS = frozenset({"img", "hr", "meta", "br", "input"})


@dataclass(frozen=True)
class Element:
    tag: str
    attrs: Mapping[str, Optional[str]] = field(default_factory=dict)
    children: Tuple[Union["Element", str], ...] = ()


def h(tag: str, attrs: Optional[Mapping[str, Optional[str]]] = None, *children: Union[Element, str, None]) -> Element:
    return Element(tag, dict(attrs or {}), tuple(child for child in children if child is not None))


def to_html(node: Union[Element, str]) -> str:
    """Serialize a render tree; text and attribute values are always escaped."""

    if isinstance(node, str):
        return escape(node, quote=False)
    attrs = "".join(
        f" {name}" if value is None else f' {name}="{escape(value)}"'
        for name, value in node.attrs.items()
    )
    if node.tag in _VOID_TAGS:
        return f"<{node.tag}{attrs}>"
    inner = "".join(to_html(child) for child in node.children)
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


def _format_number(value: Union[int, float]) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class PlayerCard:
    """Display strings for one card; placeholders already substituted."""

    rank: int
    player_id: str
    name: str
    team: str
    team_attr: str
    photo_url: str
    price: str
    runs: str
    wickets: str
    runs_metric: str
    wickets_metric: str


def card_from_player(player: DisplayPlayer, rank: int) -> PlayerCard:
    def stat(value: Optional[Union[int, float]]) -> str:
        return PLACEHOLDER if value is None else _format_number(value)

    def ratio(value: Optional[float]) -> str:
        return PLACEHOLDER if value is None else f"{value:.2f}"

    return PlayerCard(
        rank=rank,
        player_id="" if player.id is None else str(player.id),
        name=player.name,
        team=player.team or UNKNOWN_TEAM,
        team_attr=player.team or "",
        photo_url=player.photo_url or PLACEHOLDER_PHOTO,
        price=f"{_format_number(player.price_cr)} Cr" if player.price_cr else NO_PRICE,
        runs=stat(player.runs),
        wickets=stat(player.wickets),
        runs_metric=ratio(player.runs_per_lakh),
        wickets_metric=ratio(player.wickets_per_lakh),
    )


def _value(css_class: str, text: str) -> Element:
    attrs: dict[str, Optional[str]] = {"class": css_class}
    if text == PLACEHOLDER:
        attrs["data-placeholder"] = "true"
    return h("span", attrs, text)


def render_card(card: PlayerCard) -> Element:
    photo = h(
        "div",
        {"class": "player-photo-container"},
        h("div", {"class": "player-rank"}, str(card.rank)),
        h(
            "img",
            {
                "src": card.photo_url,
                "alt": card.name,
                "class": "player-photo",
                "onerror": f"this.onerror=null;this.src='{PLACEHOLDER_PHOTO}';",
            },
        ),
    )
    stats = h(
        "div",
        {"class": "player-stats"},
        h("p", {"class": "stat-line price-line"}, "Auction Price: ", h("span", {"class": "value price-value"}, card.price)),
        h("hr", {"class": "stat-divider"}),
        h(
            "div",
            {"class": "core-stats"},
            h("p", {"class": "stat-line"}, "Runs: ", _value("value runs-value", card.runs)),
            h("p", {"class": "stat-line"}, "Wickets: ", _value("value wickets-value", card.wickets)),
        ),
        h("hr", {"class": "stat-divider"}),
        h(
            "div",
            {"class": "performance-metrics"},
            h("p", {"class": "performance-sentence"}, _value("metric-value runs-metric", card.runs_metric), " Runs per 10 Lakhs"),
            h("p", {"class": "performance-sentence"}, _value("metric-value wickets-metric", card.wickets_metric), " Wickets per 10 Lakhs"),
        ),
    )
    return h(
        "div",
        {"class": "player-card", "data-player-id": card.player_id, "data-team": card.team_attr},
        photo,
        h(
            "div",
            {"class": "player-info"},
            h("h2", {"class": "player-name"}, card.name),
            h("p", {"class": "player-team"}, card.team),
            stats,
        ),
    )


def render_cards(players: Sequence[DisplayPlayer]) -> list[Element]:
    return [render_card(card_from_player(player, rank)) for rank, player in enumerate(players, start=1)]


def render_team_filter(view: BoardView) -> Element:
    options = [h("option", {"value": ALL_TEAMS, **({"selected": None} if view.team == ALL_TEAMS else {})}, "All Teams")]
    for team in view.teams:
        attrs: dict[str, Optional[str]] = {"value": team}
        if team == view.team:
            attrs["selected"] = None
        options.append(h("option", attrs, team))
    return h("select", {"id": "teamFilter", "name": "team"}, *options)


def render_sort_buttons(view: BoardView) -> Element:
    buttons = []
    for key in SORT_KEYS:
        active = key == view.sort_key
        attrs: dict[str, Optional[str]] = {
            "class": "sort-btn active" if active else "sort-btn",
            "data-sort-key": key,
        }
        if active:
            attrs["data-sort-direction"] = view.sort_direction
        buttons.append(h("button", attrs, SORT_LABELS[key]))
    return h("div", {"class": "sort-buttons"}, *buttons)


def render_player_list(view: BoardView) -> Element:
    if view.message is not None and not view.visible:
        css_class = "loading-message" if view.message == LOADING_MESSAGE else "error-message"
        return h("div", {"id": "playerListContainer"}, h("p", {"class": css_class}, view.message))
    return h("div", {"id": "playerListContainer"}, *render_cards(view.visible))


def render_board(view: BoardView) -> Element:
    children: list[Union[Element, str, None]] = [
        h("div", {"class": "controls"}, render_team_filter(view), render_sort_buttons(view)),
    ]
    for warning in view.warnings:
        children.append(h("p", {"class": "notice warning"}, f"Showing cached data; refresh failed: {warning}"))
    children.append(render_player_list(view))
    if view.show_load_more:
        children.append(
            h("button", {"id": "loadMoreBtn", "data-visible": str(len(view.visible)), "data-total": str(view.total)}, "Load More")
        )
    if view.last_updated is not None:
        children.append(h("p", {"class": "updated"}, f"Last updated {view.last_updated.strftime('%Y-%m-%d %H:%M:%S')}"))
    return h("main", None, *children)


_STYLE = """
body { font-family: Arial, sans-serif; margin: 2rem; background: #f5f7fa; }
main { background: #fff; padding: 2rem; border-radius: 12px; box-shadow: 0 2px 6px rgba(0,0,0,0.08); }
.controls { display: flex; gap: 1rem; flex-wrap: wrap; margin-bottom: 1.5rem; }
.controls select { padding: 0.4rem; border-radius: 6px; border: 1px solid #cbd5e1; }
.sort-btn { padding: 0.5rem 1rem; border-radius: 6px; border: none; background: #475569; color: #fff; cursor: pointer; }
.sort-btn.active { background: #2563eb; }
#playerListContainer { display: grid; grid-template-columns: repeat(auto-fill, minmax(260px, 1fr)); gap: 1rem; }
.player-card { border: 1px solid #e2e8f0; border-radius: 8px; overflow: hidden; background: #f8fafc; }
.player-photo-container { position: relative; }
.player-photo { width: 100%; height: 200px; object-fit: cover; }
.player-rank { position: absolute; top: 0.5rem; left: 0.5rem; background: #2563eb; color: #fff; border-radius: 999px; padding: 0.2rem 0.6rem; font-weight: 600; }
.player-info { padding: 1rem; }
.player-team { color: #475569; margin-top: 0; }
.stat-divider { border: none; border-top: 1px solid #e2e8f0; }
[data-placeholder="true"] { color: #94a3b8; }
.error-message, .loading-message { grid-column: 1 / -1; color: #b91c1c; }
.loading-message { color: #475569; }
.notice.warning { background: #fffbeb; color: #92400e; padding: 0.75rem 1rem; border-radius: 6px; }
#loadMoreBtn { display: block; margin: 1.5rem auto 0; padding: 0.6rem 1.2rem; border-radius: 6px; border: none; background: #2563eb; color: #fff; cursor: pointer; }
.updated { color: #64748b; font-size: 0.85rem; margin-top: 1rem; }
"""


def render_page(view: BoardView, *, title: str = "Auction Player Board") -> str:
    body = to_html(render_board(view))
    return f"""<!DOCTYPE html>
<html lang=\"en\">
<head>
    <meta charset=\"utf-8\">
    <title>{escape(title)}</title>
    <style>{_STYLE}</style>
</head>
<body>
    <h1>{escape(title)}</h1>
    {body}
</body>
</html>"""


__all__ = [
    "Element",
    "NO_PRICE",
    "PLACEHOLDER",
    "PLACEHOLDER_PHOTO",
    "PlayerCard",
    "UNKNOWN_TEAM",
    "card_from_player",
    "h",
    "render_board",
    "render_card",
    "render_cards",
    "render_page",
    "to_html",
]

"""Refresh cycle and event wiring for the player board."""

from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional

import httpx

from auctionboard.ingest import SourceError, fetch_sources
from auctionboard.ingest.sources import DEFAULT_FETCH_TIMEOUT, Location

from .combine import combine_players
from .render import render_page
from .state import BoardState, BoardView, build_view, load_more, with_error, with_players, with_sort, with_team


logger = logging.getLogger(__name__)

DEFAULT_CLIENT_REFRESH_SECONDS = 60.0

Subscriber = Callable[[BoardState, BoardView], None]


class Board:
    """Holds the current :class:`BoardState` and notifies subscribers on change."""

    def __init__(
        self,
        static_location: Location,
        dynamic_location: Location,
        *,
        state: Optional[BoardState] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
    ) -> None:
        self.static_location = static_location
        self.dynamic_location = dynamic_location
        self.state = state or BoardState()
        self._client = client
        self._timeout = timeout
        self._subscribers: List[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback``; returns a function that removes it again."""

        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def view(self) -> BoardView:
        return build_view(self.state)

    def _apply(self, state: BoardState) -> BoardState:
        self.state = state
        view = build_view(state)
        for callback in list(self._subscribers):
            callback(state, view)
        return state

    async def refresh(self) -> bool:
        """Fetch both sources, recombine and publish; returns ``False`` on failure."""

        try:
            static_players, dynamic_stats = await fetch_sources(
                self.static_location,
                self.dynamic_location,
                client=self._client,
                timeout=self._timeout,
            )
        except SourceError as exc:
            if self.state.players:
                logger.warning("Failed to update player data; keeping %s cached players: %s", len(self.state.players), exc)
            else:
                logger.error("Error fetching player data: %s", exc)
            self._apply(with_error(self.state, str(exc)))
            return False

        combined = combine_players(static_players, dynamic_stats)
        self._apply(with_players(self.state, combined, now=datetime.now(timezone.utc)))
        logger.info("Player board updated (%s players)", len(combined))
        return True

    def select_team(self, team: str) -> BoardState:
        return self._apply(with_team(self.state, team))

    def select_sort(self, key: str) -> BoardState:
        return self._apply(with_sort(self.state, key))

    def load_more(self) -> BoardState:
        return self._apply(load_more(self.state))

    async def run(self, interval: float = DEFAULT_CLIENT_REFRESH_SECONDS) -> None:
        """Refresh now and then every ``interval`` seconds until cancelled."""

        while True:
            await self.refresh()
            await asyncio.sleep(interval)


class HtmlFileWriter:
    """Subscriber that rewrites an HTML page every time the board changes."""

    def __init__(self, path: Path, *, title: str = "Auction Player Board") -> None:
        self.path = Path(path)
        self.title = title

    def __call__(self, state: BoardState, view: BoardView) -> None:
        content = render_page(view, title=self.title)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(content)
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote %s cards to %s", len(view.visible), self.path)


__all__ = ["Board", "DEFAULT_CLIENT_REFRESH_SECONDS", "HtmlFileWriter", "Subscriber"]

"""In-memory snapshot of the combined roster served by the API."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from auctionboard.board.combine import combine_players
from auctionboard.ingest import SourceError, load_dynamic_stats, load_static_players
from auctionboard.ingest.sources import Location
from auctionboard.models import CombinedPlayer, DynamicStats, StaticPlayer


logger = logging.getLogger("uvicorn.error")


@dataclass(frozen=True)
class Snapshot:
    players: Tuple[CombinedPlayer, ...]
    updated_at: datetime


class PlayerStore:
    """Single-writer holder of the latest combined snapshot.

    :meth:`reload` builds a complete new :class:`Snapshot` before publishing it
    with one reference assignment, so readers see either the old or the new
    roster and never a partial combine.
    """

    def __init__(self, static_path: Location, dynamic_path: Location) -> None:
        self.static_path = Path(static_path)
        self.dynamic_path = Path(dynamic_path)
        self._snapshot: Optional[Snapshot] = None

    @property
    def snapshot(self) -> Optional[Snapshot]:
        return self._snapshot

    @property
    def players(self) -> Tuple[CombinedPlayer, ...]:
        snapshot = self._snapshot
        return snapshot.players if snapshot else ()

    def _load_static(self) -> List[StaticPlayer]:
        try:
            return load_static_players(self.static_path)
        except SourceError as exc:
            logger.error("Error loading static player data: %s", exc)
            return []

    def _load_dynamic(self) -> Dict[str, DynamicStats]:
        if not self.dynamic_path.exists():
            logger.warning("%s not found; dynamic stats will be 0", self.dynamic_path)
            return {}
        try:
            return load_dynamic_stats(self.dynamic_path)
        except SourceError as exc:
            logger.error("Error loading dynamic player data: %s", exc)
            return {}

    def reload(self) -> Snapshot:
        """Re-read both files and swap in a freshly combined snapshot."""

        static_players = self._load_static()
        dynamic_stats = self._load_dynamic()
        if not static_players:
            logger.error("Cannot combine data: static data not loaded")

        snapshot = Snapshot(
            players=tuple(combine_players(static_players, dynamic_stats)),
            updated_at=datetime.now(timezone.utc),
        )
        self._snapshot = snapshot
        logger.info(
            "Player data combined (%s players). Last updated: %s",
            len(snapshot.players),
            snapshot.updated_at.isoformat(),
        )
        return snapshot

    async def run_periodic(self, interval: float) -> None:
        """Reload every ``interval`` seconds in a worker thread until cancelled."""

        while True:
            await asyncio.sleep(interval)
            logger.info("Updating player data in background...")
            try:
                await asyncio.to_thread(self.reload)
            except Exception:  # pragma: no cover - keep the refresh loop alive
                logger.exception("Background player data refresh failed")


__all__ = ["PlayerStore", "Snapshot"]

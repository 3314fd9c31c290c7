"""Helpers to load the static roster and dynamic stats documents."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import httpx

from auctionboard.models import DynamicStats, StaticPlayer


logger = logging.getLogger(__name__)

Location = Union[str, Path]

DEFAULT_FETCH_TIMEOUT = 10.0


class SourceError(RuntimeError):
    """Raised when a data source cannot be read or decoded."""

    def __init__(self, location: Location, reason: str) -> None:
        super().__init__(f"Failed to load {location}: {reason}")
        self.location = str(location)
        self.reason = reason


def is_url(location: Location) -> bool:
    return isinstance(location, str) and location.lower().startswith(("http://", "https://"))


def parse_static_players(payload: Any, *, location: Location = "<static>") -> List[StaticPlayer]:
    """Validate a decoded roster document (a JSON array of player objects)."""

    if not isinstance(payload, list):
        raise SourceError(location, f"expected a JSON array, got {type(payload).__name__}")

    players: List[StaticPlayer] = []
    for index, entry in enumerate(payload):
        if not isinstance(entry, dict):
            logger.warning("Skipping roster entry %s in %s: not an object", index, location)
            continue
        players.append(StaticPlayer.model_validate(entry))
    return players


def parse_dynamic_stats(payload: Any, *, location: Location = "<dynamic>") -> Dict[str, DynamicStats]:
    """Validate a decoded stats document (a JSON object keyed by player name)."""

    if not isinstance(payload, dict):
        raise SourceError(location, f"expected a JSON object, got {type(payload).__name__}")

    stats: Dict[str, DynamicStats] = {}
    for name, entry in payload.items():
        if not isinstance(entry, dict):
            logger.warning("Skipping stats for %r in %s: not an object", name, location)
            continue
        stats[name] = DynamicStats.model_validate(entry)
    return stats


def _read_json(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SourceError(path, "file not found") from exc
    except UnicodeDecodeError as exc:
        raise SourceError(path, f"invalid UTF-8 ({exc})") from exc
    except OSError as exc:
        raise SourceError(path, str(exc)) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SourceError(path, f"invalid JSON ({exc})") from exc


def load_static_players(path: Location) -> List[StaticPlayer]:
    path = Path(path)
    players = parse_static_players(_read_json(path), location=path)
    logger.info("Static player data loaded (%s players) from %s", len(players), path)
    return players


def load_dynamic_stats(path: Location) -> Dict[str, DynamicStats]:
    path = Path(path)
    stats = parse_dynamic_stats(_read_json(path), location=path)
    logger.info("Dynamic player data loaded (%s entries) from %s", len(stats), path)
    return stats


async def _fetch_json(client: httpx.AsyncClient, url: str) -> Any:
    try:
        response = await client.get(url)
    except httpx.HTTPError as exc:
        raise SourceError(url, str(exc) or exc.__class__.__name__) from exc
    if response.is_error:
        raise SourceError(url, f"{response.status_code} {response.reason_phrase}")
    try:
        return response.json()
    except ValueError as exc:
        raise SourceError(url, f"invalid JSON ({exc})") from exc


async def _load_document(location: Location, client: Optional[httpx.AsyncClient]) -> Any:
    if is_url(location):
        if client is None:
            raise SourceError(location, "no HTTP client available")
        return await _fetch_json(client, str(location))
    return await asyncio.to_thread(_read_json, Path(location))


async def fetch_sources(
    static_location: Location,
    dynamic_location: Location,
    *,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
) -> tuple[List[StaticPlayer], Dict[str, DynamicStats]]:
    """Load both documents concurrently and return the parsed roster and stats.

    Locations may be filesystem paths or ``http(s)://`` URLs. Both requests are
    issued together and both must succeed; the first failure is raised as a
    :class:`SourceError`.
    """

    owns_client = client is None and (is_url(static_location) or is_url(dynamic_location))
    if owns_client:
        client = httpx.AsyncClient(timeout=timeout)
    try:
        static_payload, dynamic_payload = await asyncio.gather(
            _load_document(static_location, client),
            _load_document(dynamic_location, client),
        )
    finally:
        if owns_client and client is not None:
            await client.aclose()

    players = parse_static_players(static_payload, location=static_location)
    stats = parse_dynamic_stats(dynamic_payload, location=dynamic_location)
    logger.debug(
        "Fetched %s players and %s stat entries from %s / %s",
        len(players),
        len(stats),
        static_location,
        dynamic_location,
    )
    return players, stats

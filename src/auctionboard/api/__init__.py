"""REST API serving the combined auction roster."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from auctionboard.api.schemas import CombinedPlayerResponse, UnavailableResponse
from auctionboard.config import Settings
from auctionboard.store import PlayerStore


logger = logging.getLogger("uvicorn.error")

UNAVAILABLE_MESSAGE = "Player data is currently unavailable or being processed. Please try again shortly."


def create_app(settings: Settings | None = None, *, store: PlayerStore | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    store = store or PlayerStore(settings.static_path, settings.dynamic_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        refresh_task: asyncio.Task[None] | None = None
        if settings.refresh_on_startup:
            await asyncio.to_thread(store.reload)
            refresh_task = asyncio.create_task(store.run_periodic(settings.refresh_seconds))
            logger.info("Refreshing player data every %s seconds", settings.refresh_seconds)
        try:
            yield
        finally:
            if refresh_task is not None:
                refresh_task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await refresh_task

    app = FastAPI(title="auctionboard", lifespan=lifespan)
    app.state.player_store = store
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get(
        "/api/players",
        response_model=list[CombinedPlayerResponse],
        responses={503: {"model": UnavailableResponse}},
    )
    async def list_players():
        players = store.players
        if not players:
            return JSONResponse(
                status_code=503,
                content=UnavailableResponse(message=UNAVAILABLE_MESSAGE).model_dump(),
            )
        return [CombinedPlayerResponse.model_validate(player.to_wire()) for player in players]

    return app


__all__ = ["UNAVAILABLE_MESSAGE", "create_app"]

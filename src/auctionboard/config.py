"""Environment-driven settings for the board and the API server."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger(__name__)

_STATIC_PATH_ENV = "AUCTIONBOARD_STATIC_PATH"
_DYNAMIC_PATH_ENV = "AUCTIONBOARD_DYNAMIC_PATH"
_REFRESH_ENV = "AUCTIONBOARD_REFRESH_SECONDS"
_CLIENT_REFRESH_ENV = "AUCTIONBOARD_CLIENT_REFRESH_SECONDS"
_HOST_ENV = "AUCTIONBOARD_HOST"
_PORT_ENV = "PORT"
_FETCH_TIMEOUT_ENV = "AUCTIONBOARD_FETCH_TIMEOUT"

DEFAULT_STATIC_PATH = "players-static.json"
DEFAULT_DYNAMIC_PATH = "players-dynamic.json"
DEFAULT_REFRESH_SECONDS = 300
DEFAULT_CLIENT_REFRESH_SECONDS = 60
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_FETCH_TIMEOUT = 10.0


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


@dataclass(frozen=True)
class Settings:
    static_path: str = DEFAULT_STATIC_PATH
    dynamic_path: str = DEFAULT_DYNAMIC_PATH
    refresh_seconds: int = DEFAULT_REFRESH_SECONDS
    client_refresh_seconds: int = DEFAULT_CLIENT_REFRESH_SECONDS
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    refresh_on_startup: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``AUCTIONBOARD_*`` variables, falling back to defaults."""

        return cls(
            static_path=os.getenv(_STATIC_PATH_ENV, DEFAULT_STATIC_PATH),
            dynamic_path=os.getenv(_DYNAMIC_PATH_ENV, DEFAULT_DYNAMIC_PATH),
            refresh_seconds=_env_int(_REFRESH_ENV, DEFAULT_REFRESH_SECONDS, min_value=1),
            client_refresh_seconds=_env_int(_CLIENT_REFRESH_ENV, DEFAULT_CLIENT_REFRESH_SECONDS, min_value=1),
            host=os.getenv(_HOST_ENV, DEFAULT_HOST),
            port=_env_int(_PORT_ENV, DEFAULT_PORT, min_value=1),
            fetch_timeout=_env_float(_FETCH_TIMEOUT_ENV, DEFAULT_FETCH_TIMEOUT, clamp_min=0.1),
        )


__all__ = ["Settings"]

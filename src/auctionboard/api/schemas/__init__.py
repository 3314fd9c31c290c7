"""Pydantic models for API I/O."""

from .player import CombinedPlayerResponse, UnavailableResponse

__all__ = [
    "CombinedPlayerResponse",
    "UnavailableResponse",
]

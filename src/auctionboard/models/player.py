"""Canonical player models shared across the loader, board and API layers."""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


def coerce_number(value: Any) -> Optional[float]:
    """Return ``value`` as a float, or ``None`` when it is not numeric."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _lenient_number(value: Any) -> Optional[float | int]:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    number = coerce_number(value)
    if number is None:
        return None
    return int(number) if number.is_integer() else number


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        """Dump using the camelCase keys found in the JSON sources."""

        return self.model_dump(by_alias=True)


class StaticPlayer(_WireModel):
    """Roster attributes: identity, team, auction price and photo."""

    id: Optional[int | str] = None
    name: str = ""
    team: Optional[str] = None
    price_cr: Optional[int | float] = Field(default=None, alias="priceCr")
    photo_url: Optional[str] = Field(default=None, alias="photoUrl")

    @field_validator("id", mode="before")
    @classmethod
    def _identifier(cls, value: Any) -> Optional[int | str]:
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, str)):
            return value
        return _optional_text(value)

    @field_validator("team", "photo_url", mode="before")
    @classmethod
    def _text_or_none(cls, value: Any) -> Optional[str]:
        return _optional_text(value)

    @field_validator("name", mode="before")
    @classmethod
    def _name_text(cls, value: Any) -> str:
        return _optional_text(value) or ""

    @field_validator("price_cr", mode="before")
    @classmethod
    def _price_number(cls, value: Any) -> Optional[int | float]:
        return _lenient_number(value)


class DynamicStats(_WireModel):
    """Performance counters for one player, keyed by name in the source file."""

    runs: Optional[int | float] = None
    wickets: Optional[int | float] = None

    @field_validator("runs", "wickets", mode="before")
    @classmethod
    def _stat_number(cls, value: Any) -> Optional[int | float]:
        return _lenient_number(value)


ZERO_STATS = DynamicStats(runs=0, wickets=0)


class CombinedPlayer(StaticPlayer):
    """Static record joined with its dynamic stats."""

    runs: Optional[int | float] = 0
    wickets: Optional[int | float] = 0

    @field_validator("runs", "wickets", mode="before")
    @classmethod
    def _stat_number(cls, value: Any) -> Optional[int | float]:
        return _lenient_number(value)


class DisplayPlayer(CombinedPlayer):
    """Combined player with derived per-price ratios (``None`` when not displayable)."""

    runs_per_lakh: Optional[float] = Field(default=None, alias="runsPerLakh")
    wickets_per_lakh: Optional[float] = Field(default=None, alias="wicketsPerLakh")


__all__ = [
    "CombinedPlayer",
    "DisplayPlayer",
    "DynamicStats",
    "StaticPlayer",
    "ZERO_STATS",
    "coerce_number",
]

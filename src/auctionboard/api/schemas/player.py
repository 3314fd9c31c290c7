from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CombinedPlayerResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int | str | None = None
    name: str
    team: str | None = None
    price_cr: int | float | None = Field(default=None, alias="priceCr")
    photo_url: str | None = Field(default=None, alias="photoUrl")
    runs: int | float | None = 0
    wickets: int | float | None = 0


class UnavailableResponse(BaseModel):
    message: str

"""Location queries, fetch result envelopes and daily forecast summaries."""
from __future__ import annotations

import datetime as dt
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

DataKind = Literal["weather", "forecast"]


class ZipQuery(BaseModel):
    kind: Literal["zip"] = "zip"
    zip: str


class CoordsQuery(BaseModel):
    """Lat/lon pair. Strings are coerced to float on construction."""

    kind: Literal["coords"] = "coords"
    lat: float
    lon: float


LocationQuery = Annotated[Union[ZipQuery, CoordsQuery], Field(discriminator="kind")]


def cache_key(kind: DataKind, query: ZipQuery | CoordsQuery) -> str:
    """Derive the cache key for *kind* and *query*.

    Coordinates are embedded with Python's float repr, so 34.09 and
    34.0900001 are different keys.
    """
    if isinstance(query, CoordsQuery):
        return f"{kind}_{query.lat}_{query.lon}"
    return f"{kind}_{query.zip}"


def upstream_params(query: ZipQuery | CoordsQuery) -> dict[str, Any]:
    if isinstance(query, CoordsQuery):
        return {"lat": query.lat, "lon": query.lon}
    return {"q": query.zip}


class FetchSuccess(BaseModel):
    data: Any
    from_cache: bool


class FetchFailure(BaseModel):
    error: str


FetchResult = Union[FetchSuccess, FetchFailure]


class DailySummary(BaseModel):
    date: dt.date
    temp_avg: float | None = None
    temp_high: float | None = None
    temp_low: float | None = None
    icon: str | None = None
    description: str | None = None

"""Cache-aside fetcher for current weather and forecasts."""
from __future__ import annotations

import asyncio
import logging

from weatherapp.cache import CacheStore
from weatherapp.models import (
    CoordsQuery,
    DataKind,
    FetchFailure,
    FetchResult,
    FetchSuccess,
    ZipQuery,
    cache_key,
    upstream_params,
)
from weatherapp.services.openweather import FORECAST, WEATHER, OpenWeatherClient

log = logging.getLogger(__name__)

DEFAULT_TTL = 30 * 60

ERRORS: dict[str, str] = {
    "weather": "Failed to retrieve weather data.",
    "forecast": "Failed to retrieve forecast data.",
}

_ENDPOINTS: dict[str, str] = {"weather": WEATHER, "forecast": FORECAST}


class WeatherService:
    """Check the cache, else call OpenWeather and populate the cache.

    Holds no state between calls beyond its collaborators. Cache calls
    run in a worker thread since store clients (redis) are blocking.
    Concurrent misses for one key each hit upstream; nothing
    de-duplicates them.
    """

    def __init__(self, api: OpenWeatherClient, cache: CacheStore, ttl: int = DEFAULT_TTL) -> None:
        self.api = api
        self.cache = cache
        self.ttl = ttl

    async def fetch(self, kind: DataKind, query: ZipQuery | CoordsQuery) -> FetchResult:
        key = cache_key(kind, query)

        try:
            cached = await asyncio.to_thread(self.cache.get, key)
        except Exception as e:
            log.warning("Cache read %s failed, treating as miss: %s", key, e)
            cached = None
        if cached:
            log.debug("Cache hit %s", key)
            return FetchSuccess(data=cached, from_cache=True)

        log.debug("Cache miss %s", key)
        resp = await self.api.get(_ENDPOINTS[kind], upstream_params(query))
        if not resp.ok:
            return FetchFailure(error=ERRORS[kind])

        try:
            await asyncio.to_thread(self.cache.set, key, resp.data, self.ttl)
        except Exception as e:
            log.warning("Cache write %s failed: %s", key, e)
        return FetchSuccess(data=resp.data, from_cache=False)

    async def weather_by_zip(self, zip_code: str) -> FetchResult:
        return await self.fetch("weather", ZipQuery(zip=str(zip_code)))

    async def weather_by_coords(self, lat: float | str, lon: float | str) -> FetchResult:
        return await self.fetch("weather", CoordsQuery(lat=lat, lon=lon))

    async def forecast_by_zip(self, zip_code: str) -> FetchResult:
        return await self.fetch("forecast", ZipQuery(zip=str(zip_code)))

    async def forecast_by_coords(self, lat: float | str, lon: float | str) -> FetchResult:
        return await self.fetch("forecast", CoordsQuery(lat=lat, lon=lon))

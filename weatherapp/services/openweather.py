"""OpenWeatherMap 2.5 client (current weather + 5 day / 3 hour forecast)."""
from __future__ import annotations

import logging
from typing import Any, NamedTuple

import httpx

log = logging.getLogger(__name__)

WEATHER = "/weather"
FORECAST = "/forecast"


class ApiResponse(NamedTuple):
    ok: bool
    data: dict | None = None


class OpenWeatherClient:
    """One GET per call, no retries. Failures come back as ``ok=False``."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        api_key: str,
        base_url: str,
        units: str = "imperial",
    ) -> None:
        self._http = http
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._units = units

    async def get(self, endpoint: str, params: dict[str, Any]) -> ApiResponse:
        query = {**params, "appid": self._api_key, "units": self._units}
        try:
            resp = await self._http.get(f"{self._base_url}{endpoint}", params=query)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            log.warning("OpenWeather %s returned %s", endpoint, e.response.status_code)
            return ApiResponse(ok=False)
        except httpx.HTTPError as e:
            log.warning("OpenWeather %s request failed: %s", endpoint, e)
            return ApiResponse(ok=False)
        except ValueError:
            log.warning("OpenWeather %s returned a non-JSON body", endpoint)
            return ApiResponse(ok=False)

        if not isinstance(data, dict):
            log.warning("OpenWeather %s returned %s, expected an object", endpoint, type(data).__name__)
            return ApiResponse(ok=False)
        return ApiResponse(ok=True, data=data)

    async def current(self, params: dict[str, Any]) -> ApiResponse:
        return await self.get(WEATHER, params)

    async def forecast(self, params: dict[str, Any]) -> ApiResponse:
        return await self.get(FORECAST, params)

"""
Shared fixtures for the weather service tests.

Upstream OpenWeather is faked with httpx.MockTransport; nothing here
touches the network or a real Redis.
"""

import json
import os
from typing import Any, Callable

import httpx
import pytest
import pytest_asyncio

os.environ.setdefault("OPENWEATHER_API_KEY", "test-key")
os.environ.setdefault("TZ", "UTC")

from weatherapp.cache import MemoryCache
from weatherapp.services.openweather import OpenWeatherClient
from weatherapp.services.weather import WeatherService

BASE_URL = "http://owm.test/data/2.5"


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class Upstream:
    """Records requests and answers with a canned status + body."""

    def __init__(self, status: int = 200, body: Any = None) -> None:
        self.status = status
        self.body = body if body is not None else {}
        self.requests: list[httpx.Request] = []
        self.error: Exception | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status, content=self.body)
        return httpx.Response(self.status, content=json.dumps(self.body))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock) -> MemoryCache:
    return MemoryCache(clock=clock)


@pytest.fixture
def upstream() -> Upstream:
    return Upstream()


@pytest_asyncio.fixture
async def http(upstream):
    client = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
    yield client
    await client.aclose()


@pytest.fixture
def api(http) -> OpenWeatherClient:
    return OpenWeatherClient(http, api_key="test-key", base_url=BASE_URL, units="imperial")


@pytest.fixture
def service(api, cache) -> WeatherService:
    return WeatherService(api, cache)


@pytest.fixture
def sample() -> Callable[..., dict]:
    """Build one forecast sample."""

    def _make(ts: int, temp=None, temp_max=None, temp_min=None, weather=None) -> dict:
        main = {}
        if temp is not None:
            main["temp"] = temp
        if temp_max is not None:
            main["temp_max"] = temp_max
        if temp_min is not None:
            main["temp_min"] = temp_min
        out: dict = {"dt": ts, "main": main}
        if weather is not None:
            out["weather"] = weather
        return out

    return _make

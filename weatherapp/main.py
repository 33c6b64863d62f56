"""Weather lookup API: cache-aside OpenWeatherMap fetcher."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from weatherapp.cache import build_cache
from weatherapp.config import Settings, settings
from weatherapp.routes import health
from weatherapp.routes import weather as weather_routes
from weatherapp.services.openweather import OpenWeatherClient
from weatherapp.services.weather import WeatherService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("weatherapp")


@asynccontextmanager
async def lifespan(app: FastAPI):
    client = httpx.AsyncClient(timeout=httpx.Timeout(settings.HTTP_TIMEOUT))
    cache = build_cache(settings.REDIS_URL)
    api = OpenWeatherClient(
        client,
        api_key=settings.OPENWEATHER_API_KEY,
        base_url=settings.OPENWEATHER_BASE_URL,
        units=settings.OPENWEATHER_UNITS,
    )
    app.state.http = client
    app.state.weather_service = WeatherService(api, cache)

    Settings.validate()

    log.info(
        "Weather API started, %s cache, ttl %ss, port %s",
        cache.name,
        app.state.weather_service.ttl,
        settings.PORT,
    )
    yield

    await client.aclose()
    log.info("Weather API shutdown complete")


app = FastAPI(
    title="Weather",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(weather_routes.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "weatherapp.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level="info",
    )

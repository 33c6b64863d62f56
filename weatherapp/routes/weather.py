from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Query, Request

from weatherapp.models import FetchFailure
from weatherapp.services.forecast import summarize_forecast
from weatherapp.services.render import flatten_rows
from weatherapp.services.weather import WeatherService

router = APIRouter(prefix="/api")

# Geographic centre of the contiguous US, used before any search
DEFAULT_CENTER = (39.8283, -98.5795)


@router.get("/weather")
async def get_weather(
    request: Request,
    zip_code: str | None = Query(default=None),
    lat: float | None = Query(default=None),
    lng: float | None = Query(default=None),
) -> dict[str, Any]:
    service: WeatherService = request.app.state.weather_service

    if lat is not None and lng is not None:
        result = await service.weather_by_coords(lat, lng)
        forecast_result = await service.forecast_by_coords(lat, lng)
    elif zip_code and zip_code.strip():
        zip_code = zip_code.strip()
        result = await service.weather_by_zip(zip_code)
        forecast_result = await service.forecast_by_zip(zip_code)
    else:
        latitude, longitude = DEFAULT_CENTER
        return {
            "latitude": latitude,
            "longitude": longitude,
            "alerts": [],
            "weather": None,
            "forecast": None,
        }

    body: dict[str, Any] = {
        "latitude": None,
        "longitude": None,
        "alerts": [],
        "weather": None,
        "forecast": None,
    }
    if isinstance(result, FetchFailure):
        body["alerts"].append(result.error)
        return body

    coord = result.data.get("coord") if isinstance(result.data, dict) else None
    if not isinstance(coord, dict):
        coord = {}
    body["latitude"] = coord.get("lat")
    body["longitude"] = coord.get("lon")
    body["weather"] = {
        "data": result.data,
        "from_cache": result.from_cache,
        "rows": [{"key": k, "value": v} for k, v in flatten_rows(result.data)],
    }

    if isinstance(forecast_result, FetchFailure):
        body["alerts"].append(forecast_result.error)
    else:
        body["forecast"] = {
            "data": forecast_result.data,
            "from_cache": forecast_result.from_cache,
            "daily": [d.model_dump(mode="json") for d in summarize_forecast(forecast_result.data)],
        }
    return body

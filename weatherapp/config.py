from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

log = logging.getLogger(__name__)


def _env(primary: str, *fallbacks: str, default: str = "") -> str:
    """Read env var with fallback aliases."""
    val = os.getenv(primary)
    if val is not None:
        return val
    for fb in fallbacks:
        val = os.getenv(fb)
        if val is not None:
            return val
    return default


class Settings:
    # --- Server ---
    HOST: str = os.getenv("WEATHER_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("WEATHER_PORT", "8100"))

    # --- OpenWeatherMap ---
    OPENWEATHER_API_KEY: str = _env("OPENWEATHER_API_KEY", "OWM_API_KEY")
    OPENWEATHER_BASE_URL: str = os.getenv(
        "OPENWEATHER_BASE_URL", "http://api.openweathermap.org/data/2.5"
    )
    OPENWEATHER_UNITS: str = os.getenv("OPENWEATHER_UNITS", "imperial")
    HTTP_TIMEOUT: float = float(os.getenv("WEATHER_HTTP_TIMEOUT", "5.0"))

    # --- Cache ---
    REDIS_URL: str = _env("WEATHER_REDIS_URL", "REDIS_URL")

    # Forecast samples are bucketed into days in this zone
    TZ: str = os.getenv("TZ", "America/New_York")

    _REQUIRED = {
        "OPENWEATHER_API_KEY": "every upstream call will be rejected and return an error result",
    }

    @classmethod
    def validate(cls) -> None:
        """Log warnings for missing required env vars."""
        for var, hint in cls._REQUIRED.items():
            if not getattr(cls, var):
                log.warning("Missing env var %s, %s", var, hint)


settings = Settings()

from __future__ import annotations

import time

from fastapi import APIRouter, Request

router = APIRouter()

_start_time = time.time()
_VERSION = "0.1.0"


@router.get("/healthz")
async def healthz(request: Request):
    cache = request.app.state.weather_service.cache
    return {
        "status": "ok",
        "version": _VERSION,
        "uptime_seconds": round(time.time() - _start_time),
        "cache_backend": getattr(cache, "name", type(cache).__name__),
        # Only the in-process store can enumerate its entries
        "cache_keys": cache.keys() if hasattr(cache, "keys") else [],
        "cache_timestamps": cache.timestamps() if hasattr(cache, "timestamps") else {},
    }

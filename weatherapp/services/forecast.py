"""Bucket 3-hour forecast samples into per-day summaries."""
from __future__ import annotations

import datetime as dt
from typing import Any
from zoneinfo import ZoneInfo

from weatherapp.config import settings
from weatherapp.models import DailySummary


def _num(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _main(sample: dict, field: str) -> float | None:
    main = sample.get("main")
    if not isinstance(main, dict):
        return None
    return _num(main.get(field))


def _text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if _num(value) is not None:
        return str(value)
    return None


def _condition(samples: list[dict]) -> dict:
    """First weather condition of the first sample that has one."""
    for s in samples:
        conditions = s.get("weather")
        if isinstance(conditions, list) and conditions and isinstance(conditions[0], dict):
            return conditions[0]
    return {}


def summarize_forecast(
    forecast: dict | None,
    tz: str | dt.tzinfo | None = None,
) -> list[DailySummary]:
    """Group ``forecast["list"]`` by local calendar day.

    Samples without a usable ``dt`` (missing or out of range) are
    skipped, as are missing temperature fields within the per-day
    aggregates.
    """
    if not forecast:
        return []
    entries = forecast.get("list") or []

    zone = tz or settings.TZ
    if isinstance(zone, str):
        zone = ZoneInfo(zone)

    by_day: dict[dt.date, list[dict]] = {}
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        ts = _num(entry.get("dt"))
        if ts is None:
            continue
        try:
            day = dt.datetime.fromtimestamp(ts, tz=zone).date()
        except (OverflowError, OSError, ValueError):
            continue
        by_day.setdefault(day, []).append(entry)

    summaries = []
    for day, items in sorted(by_day.items()):
        temps = [t for t in (_main(i, "temp") for i in items) if t is not None]
        highs = [t for t in (_main(i, "temp_max") for i in items) if t is not None]
        lows = [t for t in (_main(i, "temp_min") for i in items) if t is not None]
        condition = _condition(items)

        summaries.append(
            DailySummary(
                date=day,
                temp_avg=sum(temps) / len(temps) if temps else None,
                temp_high=max(highs) if highs else None,
                temp_low=min(lows) if lows else None,
                icon=_text(condition.get("icon")),
                description=_text(condition.get("description")),
            )
        )
    return summaries

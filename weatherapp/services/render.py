"""Flatten a weather payload into key/value rows for table display."""
from __future__ import annotations

from typing import Any


def format_scalar(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return value
    if value is None:
        return "null"
    return str(value)


def flatten_rows(data: Any, parent_key: str | None = None) -> list[tuple[str | None, Any]]:
    """Return ``[(key, value), ...]`` with nested keys joined by ``.``.

    List items become ``key[i]``; an empty list is a single ``"[]"`` row.
    """
    if parent_key is None and not data:
        return []

    if isinstance(data, dict):
        rows: list[tuple[str | None, Any]] = []
        for k, v in data.items():
            label = f"{parent_key}.{k}" if parent_key else str(k)
            rows.extend(flatten_rows(v, label))
        return rows

    if isinstance(data, list):
        if not data:
            return [(parent_key, "[]")]
        rows = []
        for idx, v in enumerate(data):
            label = f"{parent_key}[{idx}]" if parent_key else f"[{idx}]"
            rows.extend(flatten_rows(v, label))
        return rows

    return [(parent_key, format_scalar(data))]

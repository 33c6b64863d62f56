from __future__ import annotations

import json
import logging
import time
from typing import Any, Callable, Protocol

import redis
from pydantic import BaseModel

log = logging.getLogger(__name__)


class CacheStore(Protocol):
    """Key/value store with per-entry expiry. Values are opaque JSON."""

    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any, ttl: int) -> None: ...

    def delete(self, key: str) -> None: ...


class CacheEntry(BaseModel):
    """Typed snapshot for a single cache key."""

    data: Any = None
    updated_at: float
    expires_at: float


class MemoryCache:
    """In-process cache for a single-worker app.

    Expired entries read as absent and are dropped on the read that
    notices them; nothing sweeps in the background.
    """

    name = "memory"

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._store: dict[str, CacheEntry] = {}
        self._clock = clock

    def get(self, key: str) -> Any | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            del self._store[key]
            return None
        return entry.data

    def set(self, key: str, value: Any, ttl: int) -> None:
        now = self._clock()
        self._store[key] = CacheEntry(data=value, updated_at=now, expires_at=now + ttl)

    def delete(self, key: str) -> None:
        self._store.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._store.keys())

    def timestamps(self) -> dict[str, float]:
        """Return {key: updated_at} for every stored entry."""
        return {k: v.updated_at for k, v in self._store.items()}


class RedisCache:
    """Redis-backed store; values are JSON strings written with EX.

    The client is the blocking one; async callers go through
    ``asyncio.to_thread``.
    """

    name = "redis"

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> RedisCache:
        return cls(redis.Redis.from_url(url, decode_responses=True))

    def get(self, key: str) -> Any | None:
        raw = self._client.get(key)
        if not raw:
            return None
        return json.loads(raw)

    def set(self, key: str, value: Any, ttl: int) -> None:
        self._client.set(key, json.dumps(value, separators=(",", ":")), ex=ttl)

    def delete(self, key: str) -> None:
        self._client.delete(key)


def build_cache(redis_url: str = "") -> MemoryCache | RedisCache:
    if redis_url:
        log.info("Using Redis cache store")
        return RedisCache.from_url(redis_url)
    return MemoryCache()

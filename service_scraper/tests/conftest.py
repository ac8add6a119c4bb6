"""
Shared fixtures for Scraper Service tests.
"""

from datetime import timedelta
from typing import Dict, Optional, Tuple

import pytest

from service_scraper.app.cache import RedisStore


class FakeClock:
    """Manually advanced clock, in seconds."""

    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class FakeRedis:
    """In-memory async double for the redis commands the store uses."""

    def __init__(self, clock: FakeClock):
        self._clock = clock
        self._data: Dict[str, Tuple[str, Optional[float]]] = {}

    def _alive(self, key: str) -> bool:
        entry = self._data.get(key)
        if entry is None:
            return False
        _, expires_at = entry
        if expires_at is not None and self._clock() >= expires_at:
            del self._data[key]
            return False
        return True

    async def get(self, key):
        return self._data[key][0] if self._alive(key) else None

    async def set(self, key, value, px=None):
        if isinstance(px, timedelta):
            px = int(px.total_seconds() * 1000)
        expires_at = self._clock() + px / 1000 if px else None
        self._data[key] = (value, expires_at)
        return True

    async def delete(self, *keys):
        removed = 0
        for key in keys:
            if self._alive(key):
                del self._data[key]
                removed += 1
        return removed

    async def flushall(self):
        self._data.clear()
        return True

    async def ping(self):
        return True

    async def aclose(self):
        return None


@pytest.fixture(autouse=True)
def clean_cache_env(monkeypatch):
    """Keep the host environment out of config and TTL tests."""
    for name in ("REDIS_URL", "REDIS_ADDR", "REDIS_PASSWORD", "REDIS_DB", "CACHE_TTL_CHARACTER", "DEBUG_MODE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_redis(clock):
    return FakeRedis(clock)


@pytest.fixture
def store(fake_redis):
    """RedisStore backed by the in-memory double."""
    return RedisStore(fake_redis)

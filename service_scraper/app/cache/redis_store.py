"""
Redis store client for the Scraper Service cache.
"""

from datetime import timedelta
from typing import Any, Optional, Protocol, Tuple, Union

import redis.asyncio as redis
from pydantic_core import to_json
from redis.exceptions import RedisError

from shared.errors import CacheMissError, ConfigurationError, ConnectivityError, DeserializationError
from shared.logging import get_logger

DEFAULT_PORT = 6379

# Applied to every client; bounds each round trip
CLIENT_OPTIONS = {
    "encoding": "utf-8",
    "decode_responses": True,
    "socket_connect_timeout": 5,
    "socket_timeout": 5,
    "health_check_interval": 30,
}

TTL = Union[timedelta, int, float]


class CacheStore(Protocol):
    """Surface shared by the Redis store and its disabled stand-in."""

    enabled: bool

    async def get(self, key: str) -> str: ...

    async def set(self, key: str, value: Any, ttl: TTL) -> None: ...

    async def delete(self, key: str) -> int: ...

    async def flush_all(self) -> None: ...

    async def ping(self) -> bool: ...

    async def close(self) -> None: ...


class RedisStore:
    """Redis-backed cache store.

    Holds one client for the life of the process. The client is safe for
    concurrent use, so a single instance can be shared by every handler.
    Each operation is a single round trip; redis failures are raised as
    ``ConnectivityError`` without retrying.
    """

    enabled = True

    def __init__(self, client: redis.Redis):
        self.client = client
        self.logger = get_logger("scraper.cache.redis")

    async def get(self, key: str) -> str:
        """Return the stored payload.

        Raises ``CacheMissError`` if absent and ``DeserializationError`` if the
        stored bytes are not UTF-8.
        """
        try:
            cached_data = await self.client.get(key)
            if isinstance(cached_data, bytes):
                cached_data = cached_data.decode("utf-8")
        except RedisError as e:
            raise ConnectivityError("GET", str(e)) from e
        except UnicodeDecodeError as e:
            raise DeserializationError(key, "Cached payload is not valid UTF-8") from e

        if cached_data is None:
            raise CacheMissError(key)
        return cached_data

    async def set(self, key: str, value: Any, ttl: TTL) -> None:
        """Store ``value`` as JSON with an expiry of ``ttl`` from now."""
        expiry = _as_timedelta(ttl)
        payload = to_json(value).decode("utf-8")
        try:
            await self.client.set(key, payload, px=expiry)
        except RedisError as e:
            raise ConnectivityError("SET", str(e)) from e

        self.logger.debug("Cached value", key=key, ttl=expiry.total_seconds())

    async def delete(self, key: str) -> int:
        try:
            return await self.client.delete(key)
        except RedisError as e:
            raise ConnectivityError("DEL", str(e)) from e

    async def flush_all(self) -> None:
        """Remove every key in every database of the server."""
        try:
            await self.client.flushall()
        except RedisError as e:
            raise ConnectivityError("FLUSHALL", str(e)) from e

        self.logger.warning("Cache flushed")

    async def ping(self) -> bool:
        """Check Redis health."""
        try:
            return bool(await self.client.ping())
        except RedisError as e:
            self.logger.warning("Redis ping failed", error=str(e))
            return False

    async def close(self) -> None:
        await self.client.aclose()
        self.logger.info("Redis cache stopped")


class DisabledStore:
    """Store used when no cache is configured.

    Every lookup is a miss and every write is dropped.
    """

    enabled = False

    async def get(self, key: str) -> str:
        raise CacheMissError(key)

    async def set(self, key: str, value: Any, ttl: TTL) -> None:
        _as_timedelta(ttl)

    async def delete(self, key: str) -> int:
        return 0

    async def flush_all(self) -> None:
        return None

    async def ping(self) -> bool:
        return False

    async def close(self) -> None:
        return None


def setup_with_url(redis_url: str) -> RedisStore:
    """Create a store from a connection URL such as ``redis://:pw@host:6379/0``.

    Raises ``ConfigurationError`` when the URL cannot be parsed; no client is
    created in that case. Reachability is not checked here.
    """
    if not redis_url or not redis_url.strip():
        raise ConfigurationError("Redis URL is empty")

    try:
        client = redis.from_url(redis_url.strip(), **CLIENT_OPTIONS)
    except ValueError as e:
        raise ConfigurationError(f"Invalid Redis URL: {e}") from e

    return RedisStore(client)


def setup(addr: str, password: Optional[str] = None, db: int = 0) -> RedisStore:
    """Create a store from a ``host:port`` address, password and database index.

    Never fails; connection problems surface on the first operation.
    """
    host, port = _split_addr(addr)
    client = redis.Redis(
        host=host,
        port=port,
        password=password or None,
        db=db,
        **CLIENT_OPTIONS
    )
    return RedisStore(client)


def _split_addr(addr: str) -> Tuple[str, int]:
    host, sep, port = (addr or "").strip().rpartition(":")
    if not sep:
        return (port or "localhost"), DEFAULT_PORT

    host = host.strip("[]") or "localhost"
    if not port.isdigit():
        get_logger("scraper.cache.redis").warning(
            "Invalid Redis port, using default", addr=addr, port=DEFAULT_PORT
        )
        return host, DEFAULT_PORT
    return host, int(port)


def _as_timedelta(ttl: TTL) -> timedelta:
    expiry = ttl if isinstance(ttl, timedelta) else timedelta(seconds=ttl)
    if expiry <= timedelta(0):
        raise ValueError(f"TTL must be positive, got {ttl!r}")
    return expiry

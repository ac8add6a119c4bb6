"""
Cache package for the Scraper Service.

Provides a Redis-backed store with a no-op stand-in for the disabled state,
a cache-aside lookup that deserializes into a requested type, and the
per-category TTL policy.
"""

from .redis_store import CacheStore, RedisStore, DisabledStore, setup, setup_with_url
from .cache_aside import CacheResult, get_cached, cached_fetch
from .ttl import resolve_ttl
from .keys import make_key

__all__ = [
    "CacheStore",
    "RedisStore",
    "DisabledStore",
    "setup",
    "setup_with_url",
    "CacheResult",
    "get_cached",
    "cached_fetch",
    "resolve_ttl",
    "make_key",
]

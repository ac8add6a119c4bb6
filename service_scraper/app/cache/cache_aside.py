"""
Cache-aside helpers: look up, decode, and on a miss compute and write back.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Awaitable, Callable, Generic, Optional, Type, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from shared.errors import CacheError, CacheMissError, ConnectivityError, DeserializationError
from shared.logging import get_logger
from shared.metrics import MetricsCollector

from .redis_store import CacheStore
from .ttl import resolve_ttl

T = TypeVar("T")

logger = get_logger("scraper.cache")


@dataclass(frozen=True)
class CacheResult(Generic[T]):
    """Outcome of a cache lookup.

    ``hit`` is False both when caching is disabled and on a clean miss; in
    those cases ``error`` is None. A failed read or an undecodable payload is
    also a miss, with ``error`` set.
    """

    hit: bool
    value: Optional[T] = None
    error: Optional[CacheError] = None

    def __bool__(self) -> bool:
        return self.hit


@lru_cache(maxsize=256)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


def _category_of(key: str) -> str:
    return key.split(":", 1)[0]


async def get_cached(
    store: CacheStore,
    key: str,
    model: Type[T],
    *,
    category: Optional[str] = None,
    metrics: Optional[MetricsCollector] = None
) -> CacheResult[T]:
    """Look up ``key`` and decode the stored JSON as ``model``.

    Never raises for store or payload problems; see ``CacheResult``.
    """
    if not store.enabled:
        return CacheResult(hit=False)

    category = category or _category_of(key)

    try:
        cached_data = await store.get(key)
    except CacheMissError:
        if metrics:
            metrics.record_cache_miss(category)
        return CacheResult(hit=False)
    except (ConnectivityError, DeserializationError) as e:
        logger.warning("Cache lookup failed", key=key, error=str(e))
        if metrics:
            metrics.record_cache_error(category, e.code)
        return CacheResult(hit=False, error=e)

    try:
        value = _adapter(model).validate_json(cached_data, strict=True)
    except ValidationError as e:
        error = DeserializationError(key, details={"errors": e.error_count()})
        logger.warning("Cached payload does not match requested type", key=key, errors=e.error_count())
        if metrics:
            metrics.record_cache_error(category, error.code)
        return CacheResult(hit=False, error=error)

    if metrics:
        metrics.record_cache_hit(category)
    logger.debug("Cache hit", key=key)
    return CacheResult(hit=True, value=value)


async def cached_fetch(
    store: CacheStore,
    key: str,
    model: Type[T],
    category: str,
    fetch: Callable[[], Awaitable[T]],
    *,
    metrics: Optional[MetricsCollector] = None
) -> T:
    """Return the cached value for ``key`` or compute it with ``fetch``.

    On any non-hit the fresh value is written back with the category TTL.
    Cache failures are logged and swallowed; errors from ``fetch`` propagate.
    """
    result = await get_cached(store, key, model, category=category, metrics=metrics)
    if result.hit:
        return result.value

    value = await fetch()

    if store.enabled:
        try:
            await store.set(key, value, resolve_ttl(category))
        except (CacheError, PydanticSerializationError) as e:
            logger.warning("Cache write-back failed", key=key, error=str(e))
            if metrics:
                metrics.record_cache_error(category, getattr(e, "code", type(e).__name__))

    return value

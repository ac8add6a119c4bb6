"""
Startup wiring for the Scraper Service cache.
"""

from typing import NamedTuple, Optional

from prometheus_client import REGISTRY, CollectorRegistry

from shared.config import CacheConfig, get_config
from shared.errors import ConfigurationError
from shared.logging import configure_logging, get_logger
from shared.metrics import MetricsCollector, get_metrics_collector

from .cache import CacheStore, DisabledStore, setup, setup_with_url

logger = get_logger("scraper.bootstrap")


class CacheContext(NamedTuple):
    """What request handlers need to use the cache."""

    store: CacheStore
    metrics: MetricsCollector


def init_cache(config: Optional[CacheConfig] = None) -> CacheStore:
    """Build the cache store from configuration.

    ``REDIS_URL`` wins over ``REDIS_ADDR``/``REDIS_PASSWORD``/``REDIS_DB``.
    A bad URL or no configuration at all yields a ``DisabledStore``; the
    service keeps running either way.
    """
    config = config or get_config()

    if config.redis_url:
        try:
            store = setup_with_url(config.redis_url)
        except ConfigurationError as e:
            logger.warning("Failed to setup Redis cache with URL", error=e.message)
            return DisabledStore()
        logger.info("Redis cache initialized successfully with URL")
        return store

    if config.redis_addr:
        store = setup(config.redis_addr, config.redis_password, config.redis_db)
        logger.info("Redis cache initialized successfully", addr=config.redis_addr, db=config.redis_db)
        return store

    logger.info("Redis cache not configured - running without cache")
    return DisabledStore()


def bootstrap(
    service_name: str = "scraper",
    config: Optional[CacheConfig] = None,
    registry: Optional[CollectorRegistry] = None
) -> CacheContext:
    """Configure logging, the cache and its metrics. Call once before serving requests.

    Metrics go to the default Prometheus registry unless ``registry`` is given.
    Pass the returned store and metrics to ``get_cached`` / ``cached_fetch``.
    """
    config = config or get_config()
    configure_logging(service_name, config.effective_log_level)
    logger.info("Scraper service initializing", env=config.env, debug_mode=config.debug_mode)

    store = init_cache(config)
    metrics = get_metrics_collector(service_name, registry if registry is not None else REGISTRY)
    logger.info("Cache status", enabled=store.enabled)
    return CacheContext(store=store, metrics=metrics)

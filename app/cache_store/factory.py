"""Factory for choosing the forecast cache backend at startup."""

from __future__ import annotations

import redis
from redis.exceptions import RedisError

from app import config
from app.cache_store.base import CacheStore
from app.cache_store.memory import InMemoryCacheStore
from app.cache_store.redis import RedisCacheStore
from utils.logging_utils import get_tagged_logger, mask_url

logger = get_tagged_logger(__name__, tag="cache_store/factory")


def build_cache_store(settings: config.Settings | None = None) -> CacheStore:
    """Instantiate the configured cache store.

    With ``cache_redis_url`` set, the Redis store is used even when the startup
    ping fails: requests then run uncached until Redis becomes reachable.
    """
    settings = settings or config.settings
    url = settings.cache_redis_url

    if not url:
        logger.info("No cache_redis_url configured; using InMemoryCacheStore")
        return InMemoryCacheStore()

    timeout = settings.cache_socket_timeout_seconds
    client = redis.Redis.from_url(
        url,
        socket_timeout=timeout,
        socket_connect_timeout=timeout,
    )
    try:
        client.ping()
        logger.info("Using RedisCacheStore", extra={"redis_url": mask_url(url)})
    except RedisError as exc:
        logger.warning(
            "Redis not reachable at startup; forecasts will be fetched uncached until it is",
            extra={"redis_url": mask_url(url), "error": str(exc)},
        )
    return RedisCacheStore(client)

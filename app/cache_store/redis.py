"""Redis-backed forecast cache. Entries are JSON documents written with SETEX."""

import json
from typing import Optional

from redis.exceptions import RedisError

from app.cache_store.base import CacheStore
from app.errors import CacheUnavailableError
from app.models import Forecast
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="cache_store/redis_cache_store")


class RedisCacheStore(CacheStore):
    """Forecast cache on top of a ``redis.Redis`` client; Redis enforces the TTL."""

    def __init__(self, client) -> None:
        logger.debug("Initializing RedisCacheStore")
        self.client = client

    @staticmethod
    def _dump(forecast: Forecast) -> bytes:
        """Serialize a forecast to JSON bytes."""
        try:
            return json.dumps(forecast.to_dict()).encode("utf-8")
        except (TypeError, ValueError) as exc:
            logger.error("Failed to serialize forecast: %s", exc)
            raise CacheUnavailableError("Failed to serialize forecast for cache") from exc

    @staticmethod
    def _load(raw: bytes | str) -> Forecast:
        """Deserialize JSON bytes into a forecast."""
        try:
            if isinstance(raw, bytes):
                raw = raw.decode("utf-8")
            return Forecast.from_dict(json.loads(raw))
        except (UnicodeDecodeError, KeyError, TypeError, ValueError) as exc:
            logger.error("Failed to deserialize cached forecast: %s", exc)
            raise CacheUnavailableError("Cached forecast payload is malformed") from exc

    def get(self, key: str) -> Optional[Forecast]:
        """Fetch and decode the forecast under ``key``; None when absent or expired."""
        try:
            raw = self.client.get(key)
        except RedisError as exc:
            logger.error("Redis GET failed: %s", exc, extra={"key": key})
            raise CacheUnavailableError("Failed to read from cache") from exc
        if raw is None:
            return None
        return self._load(raw)

    def set(self, key: str, forecast: Forecast, ttl_seconds: int) -> None:
        """Write the forecast under ``key`` with an expiry of ``ttl_seconds``."""
        payload = self._dump(forecast)
        try:
            self.client.setex(key, ttl_seconds, payload)
        except RedisError as exc:
            logger.error("Redis SETEX failed: %s", exc, extra={"key": key})
            raise CacheUnavailableError("Failed to write to cache") from exc

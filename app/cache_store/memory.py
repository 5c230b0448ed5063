"""In-memory forecast cache with TTL, used when no Redis URL is configured."""

import threading
import time
from typing import Callable, Optional

from app.cache_store.base import CacheStore
from app.models import Forecast
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="cache_store/in_memory_cache_store")


class InMemoryCacheStore(CacheStore):
    """Thread-safe, TTL-aware in-memory store (single process only)."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        logger.debug("Initializing InMemoryCacheStore")
        self._clock = clock
        self._entries: dict[str, tuple[float, Forecast]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Forecast]:
        """Return the stored forecast, dropping it first if it has expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, forecast = entry
            if expires_at <= self._clock():
                self._entries.pop(key, None)
                return None
            return forecast

    def set(self, key: str, forecast: Forecast, ttl_seconds: int) -> None:
        """Store (or overwrite) a forecast with a fresh expiry."""
        with self._lock:
            self._entries[key] = (self._clock() + ttl_seconds, forecast)

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()

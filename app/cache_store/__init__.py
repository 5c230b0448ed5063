"""Forecast cache backends."""

from .base import CacheStore
from .factory import build_cache_store
from .memory import InMemoryCacheStore
from .redis import RedisCacheStore

__all__ = [
    "CacheStore",
    "build_cache_store",
    "InMemoryCacheStore",
    "RedisCacheStore",
]

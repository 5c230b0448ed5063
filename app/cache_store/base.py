"""Shared protocol for forecast cache backends."""

from typing import Optional, Protocol

from app.models import Forecast


class CacheStore(Protocol):
    """Key-value store with per-entry expiry.

    Implementations raise ``CacheUnavailableError`` when the backend cannot be
    reached or a payload cannot be (de)serialized. Expired entries are reported
    as absent, never returned.
    """

    def get(self, key: str) -> Optional[Forecast]:
        """Return the fresh forecast stored under ``key``, or None."""

    def set(self, key: str, forecast: Forecast, ttl_seconds: int) -> None:
        """Store ``forecast`` under ``key`` for ``ttl_seconds``, replacing any entry."""

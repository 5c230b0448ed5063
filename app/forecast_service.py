"""Cache-aside retrieval of hourly forecasts by city name."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from app import config
from app.cache_keys import derive_cache_key
from app.cache_store import CacheStore, build_cache_store
from app.data_sources import CoordinateResolver, ForecastFetcher, OpenMeteoClient
from app.errors import CacheUnavailableError
from app.models import Forecast
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="app/forecast_service")


class CacheStatus(enum.Enum):
    HIT = "hit"
    MISS = "miss"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class CacheLookup:
    """Outcome of a cache read; ``forecast`` is set only on a hit."""
    status: CacheStatus
    forecast: Optional[Forecast] = None


class ForecastService:
    """
    Serve forecasts for a city, using the cache as an optional accelerator.

    The cache never decides whether a request succeeds: a failed read is
    handled as a miss and a failed write only loses the caching side effect.
    Geocoding and forecast errors have no fallback and propagate unchanged.
    """

    def __init__(
        self,
        settings: config.Settings,
        resolver: CoordinateResolver,
        fetcher: ForecastFetcher,
        cache: CacheStore,
    ) -> None:
        self.settings = settings
        self.resolver = resolver
        self.fetcher = fetcher
        self.cache = cache

    def _lookup(self, key: str) -> CacheLookup:
        """Read ``key`` from the cache, folding backend failures into a status."""
        try:
            forecast = self.cache.get(key)
        except CacheUnavailableError:
            # the store has already logged the underlying error
            return CacheLookup(CacheStatus.UNAVAILABLE)
        if forecast is None:
            return CacheLookup(CacheStatus.MISS)
        return CacheLookup(CacheStatus.HIT, forecast)

    def _store(self, key: str, forecast: Forecast) -> None:
        """Write the forecast back; a failure costs only the cache entry."""
        try:
            self.cache.set(key, forecast, self.settings.cache_ttl_seconds)
        except CacheUnavailableError as exc:
            logger.warning("Cache write failed; returning uncached forecast", extra={"key": key, "error": str(exc)})

    def get_forecast_by_city(self, city_name: str) -> Forecast:
        """Return the hourly forecast for an already-normalized city name."""
        key = derive_cache_key(city_name, self.settings.cache_key_namespace)

        lookup = self._lookup(key)
        if lookup.status is CacheStatus.HIT:
            logger.info(f"[Cache] HIT for city: {city_name}")
            return lookup.forecast
        if lookup.status is CacheStatus.UNAVAILABLE:
            logger.warning(f"Cache read failed for city: {city_name}; fetching from API")
        else:
            logger.info(f"[Cache] MISS for city: {city_name}. Fetching from API.")

        coordinates = self.resolver.resolve(city_name)
        forecast = self.fetcher.fetch_hourly(coordinates.latitude, coordinates.longitude)

        self._store(key, forecast)
        return forecast


def build_forecast_service(settings: config.Settings | None = None) -> ForecastService:
    """Wire the Open-Meteo client and the configured cache store."""
    settings = settings or config.settings
    client = OpenMeteoClient(settings)
    return ForecastService(
        settings,
        resolver=client,
        fetcher=client,
        cache=build_cache_store(settings),
    )

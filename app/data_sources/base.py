"""Interfaces for the upstream location and forecast providers."""

from __future__ import annotations

from typing import Protocol

from app.models import Coordinates, Forecast


class CoordinateResolver(Protocol):
    """Anything that can turn a city name into coordinates."""

    def resolve(self, city_name: str) -> Coordinates:
        """Return coordinates, or raise CityNotFoundError / UpstreamUnavailableError."""
        ...


class ForecastFetcher(Protocol):
    """Anything that can provide an hourly temperature forecast."""

    def fetch_hourly(self, latitude: float, longitude: float) -> Forecast:
        """Return the forecast, or raise UpstreamUnavailableError."""
        ...

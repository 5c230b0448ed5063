"""Upstream providers for coordinates and forecasts."""

from .base import CoordinateResolver, ForecastFetcher
from .open_meteo_client import OpenMeteoClient

__all__ = [
    "CoordinateResolver",
    "ForecastFetcher",
    "OpenMeteoClient",
]

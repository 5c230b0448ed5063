"""Client for the Open-Meteo geocoding and forecast APIs."""
from __future__ import annotations

from typing import Any, Dict

import requests

from app import config
from app.errors import CityNotFoundError, UpstreamUnavailableError
from app.models import Coordinates, Forecast
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="open_meteo_client")

session = requests.Session()

HOURLY_VARIABLE = "temperature_2m"


class OpenMeteoClient:
    """Resolve city names and fetch hourly temperature forecasts.

    Both calls are single attempts with the configured timeout. Transport
    errors, non-2xx statuses and unusable bodies all surface as
    ``UpstreamUnavailableError``; only an empty geocoding result becomes
    ``CityNotFoundError``.
    """

    def __init__(self, settings: config.Settings, http: requests.Session | None = None) -> None:
        self.settings = settings
        self.http = http or session

    def _get_json(self, url: str, params: Dict[str, Any], *, context: str) -> Any:
        """GET ``url`` and decode the JSON body, mapping failures to UpstreamUnavailableError."""
        try:
            resp = self.http.get(url, params=params, timeout=self.settings.request_timeout_seconds)
            resp.raise_for_status()
            return resp.json()
        except requests.RequestException as exc:
            logger.error("Open-Meteo request failed", extra={"context": context, "error": str(exc)})
            raise UpstreamUnavailableError(f"Failed to fetch {context} data") from exc
        except ValueError as exc:
            logger.error("Open-Meteo returned invalid JSON", extra={"context": context, "error": str(exc)})
            raise UpstreamUnavailableError(f"Malformed {context} response") from exc

    def resolve(self, city_name: str) -> Coordinates:
        """Look up the best geocoding match for ``city_name``."""
        data = self._get_json(
            self.settings.geocoding_url,
            {"name": city_name, "count": 1},
            context="geocoding",
        )
        if not isinstance(data, dict):
            raise UpstreamUnavailableError("Malformed geocoding response")

        results = data.get("results")
        if not results:
            logger.info("Geocoding returned no match", extra={"city": city_name})
            raise CityNotFoundError(city_name)

        try:
            best = results[0]
            coords = Coordinates(
                latitude=float(best["latitude"]),
                longitude=float(best["longitude"]),
                name=str(best.get("name") or city_name),
            )
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as exc:
            logger.error("Unexpected geocoding result shape", extra={"city": city_name, "error": str(exc)})
            raise UpstreamUnavailableError("Malformed geocoding response") from exc

        logger.debug(
            "Resolved city",
            extra={"city": city_name, "latitude": coords.latitude, "longitude": coords.longitude},
        )
        return coords

    def fetch_hourly(self, latitude: float, longitude: float) -> Forecast:
        """Fetch the hourly temperature series for the given coordinates."""
        data = self._get_json(
            self.settings.forecast_url,
            {"latitude": latitude, "longitude": longitude, "hourly": HOURLY_VARIABLE},
            context="weather",
        )
        try:
            forecast = Forecast.from_dict(data)
        except (KeyError, TypeError, ValueError) as exc:
            logger.error(
                "Unexpected forecast response shape",
                extra={"latitude": latitude, "longitude": longitude, "error": str(exc)},
            )
            raise UpstreamUnavailableError("Malformed weather response") from exc

        logger.debug("Fetched hourly forecast", extra={"hours": len(forecast)})
        return forecast

"""HTTP API serving city forecasts as an HTML page or a PNG chart."""

from typing import Optional

from fastapi import APIRouter, Query, status
from fastapi.responses import HTMLResponse, JSONResponse, Response

from .cache_keys import normalize_city_name
from .charts import format_hour_labels, render_temperature_chart
from .config import settings
from .errors import CacheUnavailableError, CityNotFoundError, UpstreamUnavailableError
from .forecast_service import build_forecast_service
from .pages import render_bad_request_page, render_weather_page
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="app/api")

router = APIRouter()
FORECAST_SERVICE = build_forecast_service(settings)

SERVICE_UNAVAILABLE_MESSAGE = "A required external service is currently unavailable."


def _validated_city(city: Optional[str]) -> Optional[str]:
    """Return the normalized city, or None when the parameter is missing/blank."""
    if city is None or not city.strip():
        return None
    return normalize_city_name(city)


def _json_error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


@router.get("/weather", response_class=HTMLResponse)
def get_weather_page(city: Optional[str] = Query(default=None)):
    """Serve the HTML page that embeds the temperature chart."""
    normalized = _validated_city(city)
    if normalized is None:
        return HTMLResponse(render_bad_request_page(), status_code=status.HTTP_400_BAD_REQUEST)
    return HTMLResponse(render_weather_page(normalized))


@router.get("/weather/graph")
def get_weather_graph(city: Optional[str] = Query(default=None)):
    """Render the next hours of temperature for ``city`` as a PNG."""
    normalized = _validated_city(city)
    if normalized is None:
        return _json_error(status.HTTP_400_BAD_REQUEST, "City parameter is required")

    try:
        forecast = FORECAST_SERVICE.get_forecast_by_city(normalized)
    except CityNotFoundError as exc:
        logger.info(f"City not found: {normalized}")
        return _json_error(status.HTTP_404_NOT_FOUND, str(exc))
    except (UpstreamUnavailableError, CacheUnavailableError) as exc:
        logger.error(f"[Error] for city \"{normalized}\": {exc}")
        return _json_error(status.HTTP_503_SERVICE_UNAVAILABLE, SERVICE_UNAVAILABLE_MESSAGE)

    window = forecast.first_hours(settings.chart_hours)
    png = render_temperature_chart(format_hour_labels(window.times), window.temperatures)
    return Response(content=png, media_type="image/png")

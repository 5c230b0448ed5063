"""Error types shared by the upstream clients, cache stores and HTTP layer."""


class WeatherServiceError(Exception):
    """Base class for operational errors raised by the forecast service."""


class CityNotFoundError(WeatherServiceError):
    """Geocoding answered successfully but had no match for the city."""

    def __init__(self, city: str) -> None:
        super().__init__(f"City not found: {city}")
        self.city = city


class UpstreamUnavailableError(WeatherServiceError):
    """Geocoding or forecast endpoint failed or returned an unusable body."""

    def __init__(self, message: str = "External API is unavailable") -> None:
        super().__init__(message)


class CacheUnavailableError(WeatherServiceError):
    """Cache backend unreachable, or a payload could not be (de)serialized."""

    def __init__(self, message: str = "Cache service is unavailable") -> None:
        super().__init__(message)

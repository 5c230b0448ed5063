"""Application configuration pulled from environment variables via pydantic."""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.logging_utils import get_tagged_logger, mask_url
logger = get_tagged_logger(__name__, tag="config")


class Settings(BaseSettings):
    """Environment-driven configuration for the city weather service."""
    model_config = SettingsConfigDict(env_prefix="WEATHER_", extra="ignore")

    cache_ttl_seconds: int = Field(default=900, gt=0)
    cache_key_namespace: str = "weather"
    cache_redis_url: str | None = None  # unset -> in-memory cache
    cache_socket_timeout_seconds: float = 1.0
    geocoding_url: str = "https://geocoding-api.open-meteo.com/v1/search"
    forecast_url: str = "https://api.open-meteo.com/v1/forecast"
    request_timeout_seconds: float = 10.0
    chart_hours: int = Field(default=24, gt=0)
    log_level: str = "INFO"

    @field_validator("geocoding_url", "forecast_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs to avoid double slashes."""
        return str(v).rstrip("/")


settings = Settings()


if __name__ == "__main__":
    logger.setLevel("DEBUG")
    dumped = settings.model_dump()
    if dumped["cache_redis_url"]:
        dumped["cache_redis_url"] = mask_url(dumped["cache_redis_url"])
    logger.debug(f"Loaded settings: {dumped}")

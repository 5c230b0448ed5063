"""Cache key derivation for per-city forecasts."""
import re

DEFAULT_NAMESPACE = "weather"

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_city_name(city_name: str) -> str:
    """Return the canonical form of a city name (trimmed, lower-cased)."""
    return city_name.strip().lower()


def derive_cache_key(city_name: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    """Map a city name to its cache key, e.g. " New  York " -> "weather:new-york"."""
    slug = _WHITESPACE_RUN.sub("-", normalize_city_name(city_name))
    return f"{namespace}:{slug}"

"""Domain types passed between the upstream clients, the cache and the API."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple


@dataclass(frozen=True)
class Coordinates:
    """Location resolved by geocoding, with the provider's display name."""
    latitude: float
    longitude: float
    name: str


@dataclass(frozen=True)
class Forecast:
    """Hourly temperature series for one location.

    ``times`` and ``temperatures`` are index-aligned: ``temperatures[i]`` is the
    reading for ``times[i]``. Timestamps are kept as the ISO-like strings
    Open-Meteo returns (local time, no offset).
    """
    latitude: float
    longitude: float
    times: Tuple[str, ...]
    temperatures: Tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.times) != len(self.temperatures):
            raise ValueError(
                f"times and temperatures must be the same length "
                f"({len(self.times)} != {len(self.temperatures)})"
            )

    @classmethod
    def from_series(
        cls,
        latitude: float,
        longitude: float,
        times: Sequence[str],
        temperatures: Sequence[float],
    ) -> "Forecast":
        """Build a forecast from any pair of sequences."""
        return cls(
            latitude=float(latitude),
            longitude=float(longitude),
            times=tuple(str(t) for t in times),
            temperatures=tuple(float(v) for v in temperatures),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Forecast":
        """Parse an Open-Meteo shaped document.

        Raises KeyError, TypeError or ValueError when the document is malformed;
        callers translate those into their own error types.
        """
        hourly = data["hourly"]
        return cls.from_series(
            data["latitude"],
            data["longitude"],
            hourly["time"],
            hourly["temperature_2m"],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the same document shape ``from_dict`` accepts."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "hourly": {
                "time": list(self.times),
                "temperature_2m": list(self.temperatures),
            },
        }

    def first_hours(self, count: int) -> "Forecast":
        """Return a forecast trimmed to the leading ``count`` hours."""
        return Forecast(
            latitude=self.latitude,
            longitude=self.longitude,
            times=self.times[:count],
            temperatures=self.temperatures[:count],
        )

    def __len__(self) -> int:
        return len(self.times)

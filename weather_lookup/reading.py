"""Weather lookup data structures.

This module defines the lookup query and the reading projected from a
provider response. Provider bodies are validated explicitly: every
required path is checked before a reading is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import WeatherLookupInvalidInput, WeatherLookupMalformedResponse

HOT_THRESHOLD = 25.0
COLD_THRESHOLD = 15.0


class TemperatureCategory(Enum):
    """Styling category derived from temperature."""

    HOT = "hot"
    COLD = "cold"
    MODERATE = "moderate"

    @classmethod
    def for_temperature(cls, temperature: float) -> TemperatureCategory:
        """Classify a temperature (both thresholds inclusive)."""
        if temperature >= HOT_THRESHOLD:
            return cls.HOT
        if temperature <= COLD_THRESHOLD:
            return cls.COLD
        return cls.MODERATE


@dataclass(frozen=True)
class LookupQuery:
    """A user-supplied location to look up."""

    location_name: str

    def __post_init__(self) -> None:
        trimmed = self.location_name.strip()
        if not trimmed:
            raise WeatherLookupInvalidInput()
        object.__setattr__(self, "location_name", trimmed)

    @classmethod
    def parse(cls, text: str | None) -> LookupQuery:
        """Build a query from raw input text."""
        return cls(text or "")


@dataclass(frozen=True)
class WeatherReading:
    """Current weather for one location.

    Attributes:
        location_label: Location name as reported by the provider.
        temperature: Temperature in the configured unit system.
        condition_description: Provider condition text (e.g., "light rain").
        condition_icon_code: Provider icon code (e.g., "10d").
        humidity_percent: Relative humidity, 0-100.
        wind_speed: Wind speed in the configured unit system.
    """

    location_label: str
    temperature: float
    condition_description: str
    condition_icon_code: str
    humidity_percent: float
    wind_speed: float

    @property
    def category(self) -> TemperatureCategory:
        """Temperature-derived styling category."""
        return TemperatureCategory.for_temperature(self.temperature)

    @classmethod
    def from_payload(cls, data: Any) -> WeatherReading:
        """Create a WeatherReading from a provider JSON body.

        Args:
            data: Decoded JSON body.

        Returns:
            WeatherReading populated from the body.

        Raises:
            WeatherLookupMalformedResponse: A required field is missing or
                has the wrong type.
        """
        root = _require_mapping(data, "response")
        weather = root.get("weather")
        if not isinstance(weather, list) or not weather:
            raise WeatherLookupMalformedResponse(
                "Missing or empty field: weather"
            )
        condition = _require_mapping(weather[0], "weather[0]")
        main = _require_mapping(root.get("main"), "main")
        wind = _require_mapping(root.get("wind"), "wind")

        return cls(
            location_label=_require_str(root, "name", "name"),
            temperature=_require_number(main, "temp", "main.temp"),
            condition_description=_require_str(
                condition, "description", "weather[0].description"
            ),
            condition_icon_code=_require_str(condition, "icon", "weather[0].icon"),
            humidity_percent=_require_number(main, "humidity", "main.humidity"),
            wind_speed=_require_number(wind, "speed", "wind.speed"),
        )


def _require_mapping(value: Any, path: str) -> dict[str, Any]:
    if value is None:
        raise WeatherLookupMalformedResponse(f"Missing field: {path}")
    if not isinstance(value, dict):
        raise WeatherLookupMalformedResponse(f"Expected an object at {path}")
    return value


def _require_str(container: dict[str, Any], key: str, path: str) -> str:
    value = container.get(key)
    if value is None:
        raise WeatherLookupMalformedResponse(f"Missing field: {path}")
    if not isinstance(value, str):
        raise WeatherLookupMalformedResponse(f"Expected a string at {path}")
    return value


def _require_number(container: dict[str, Any], key: str, path: str) -> float:
    value = container.get(key)
    if value is None:
        raise WeatherLookupMalformedResponse(f"Missing field: {path}")
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise WeatherLookupMalformedResponse(f"Expected a number at {path}")
    return value

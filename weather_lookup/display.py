"""Display formatting for successful lookups."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .config import DEFAULT_ICON_URL_TEMPLATE
from .reading import TemperatureCategory, WeatherReading

WIND_SPEED_UNIT = "m/s"


@dataclass(frozen=True)
class WeatherDisplay:
    """Rendered strings for a WeatherReading.

    Attributes:
        location: Location label.
        temperature: Temperature rounded to one fractional digit.
        description: Condition text with the first character upper-cased.
        humidity: Humidity percentage (e.g., "82%").
        wind_speed: Wind speed with unit suffix (e.g., "3.6 m/s").
        icon_url: 2x icon asset URL.
        icon_alt: Raw condition text for the icon's alternate text.
        category: Temperature styling category.
    """

    location: str
    temperature: str
    description: str
    humidity: str
    wind_speed: str
    icon_url: str
    icon_alt: str
    category: TemperatureCategory

    @classmethod
    def from_reading(
        cls,
        reading: WeatherReading,
        icon_url_template: str = DEFAULT_ICON_URL_TEMPLATE,
    ) -> WeatherDisplay:
        """Apply the display formatting rules to a reading."""
        return cls(
            location=reading.location_label,
            temperature=format_temperature(reading.temperature),
            description=capitalize_first(reading.condition_description),
            humidity=f"{_format_number(reading.humidity_percent)}%",
            wind_speed=f"{_format_number(reading.wind_speed)} {WIND_SPEED_UNIT}",
            icon_url=icon_url(reading.condition_icon_code, icon_url_template),
            icon_alt=reading.condition_description,
            category=reading.category,
        )


def format_temperature(temperature: float) -> str:
    """Format temperature with one fractional digit.

    Ties round away from zero (20.25 -> "20.3", -20.25 -> "-20.3").
    """
    rounded = Decimal(temperature).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return str(rounded)


def capitalize_first(text: str) -> str:
    """Upper-case the first character, leaving the rest unchanged."""
    return text[:1].upper() + text[1:]


def icon_url(icon_code: str, template: str = DEFAULT_ICON_URL_TEMPLATE) -> str:
    """Resolve a provider icon code to an image URL."""
    return template.format(icon=icon_code)


def _format_number(value: float) -> str:
    # Integral floats print without a trailing ".0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)

"""Tests for display formatting."""

from __future__ import annotations

from weather_lookup.display import (
    WeatherDisplay,
    capitalize_first,
    format_temperature,
    icon_url,
)
from weather_lookup.reading import TemperatureCategory, WeatherReading


def _reading(**overrides: object) -> WeatherReading:
    values: dict[str, object] = {
        "location_label": "Nairobi",
        "temperature": 25.04,
        "condition_description": "light rain",
        "condition_icon_code": "10d",
        "humidity_percent": 82,
        "wind_speed": 3.6,
    }
    values.update(overrides)
    return WeatherReading(**values)  # type: ignore[arg-type]


class TestFormatting:
    """Tests for individual formatting rules."""

    def test_temperature_one_fractional_digit(self) -> None:
        assert format_temperature(25.04) == "25.0"
        assert format_temperature(20) == "20.0"
        assert format_temperature(-3.26) == "-3.3"

    def test_temperature_ties_round_away_from_zero(self) -> None:
        """Exact ties round up in magnitude, not to the even digit."""
        assert format_temperature(20.25) == "20.3"
        assert format_temperature(0.25) == "0.3"
        assert format_temperature(22.75) == "22.8"
        assert format_temperature(-20.25) == "-20.3"

    def test_capitalize_first_only(self) -> None:
        """First character upper-cased, remainder unchanged."""
        assert capitalize_first("light rain") == "Light rain"
        assert capitalize_first("overcast CLOUDS") == "Overcast CLOUDS"
        assert capitalize_first("") == ""

    def test_icon_url_2x_asset(self) -> None:
        assert icon_url("10d") == "https://openweathermap.org/img/wn/10d@2x.png"

    def test_icon_url_custom_template(self) -> None:
        assert icon_url("01n", "https://icons.local/{icon}.svg") == (
            "https://icons.local/01n.svg"
        )


class TestWeatherDisplay:
    """Tests for WeatherDisplay.from_reading()."""

    def test_all_fields(self) -> None:
        display = WeatherDisplay.from_reading(_reading())

        assert display.location == "Nairobi"
        assert display.temperature == "25.0"
        assert display.description == "Light rain"
        assert display.humidity == "82%"
        assert display.wind_speed == "3.6 m/s"
        assert display.icon_url == "https://openweathermap.org/img/wn/10d@2x.png"
        assert display.icon_alt == "light rain"
        assert display.category is TemperatureCategory.HOT

    def test_integral_values_print_without_fraction(self) -> None:
        display = WeatherDisplay.from_reading(
            _reading(humidity_percent=64.0, wind_speed=5.0)
        )

        assert display.humidity == "64%"
        assert display.wind_speed == "5 m/s"

    def test_category_follows_temperature(self) -> None:
        assert (
            WeatherDisplay.from_reading(_reading(temperature=15.0)).category
            is TemperatureCategory.COLD
        )
        assert (
            WeatherDisplay.from_reading(_reading(temperature=20.0)).category
            is TemperatureCategory.MODERATE
        )

"""Tests for WeatherPanel rendering."""

from __future__ import annotations

from weather_lookup.display import WeatherDisplay
from weather_lookup.panel import WeatherPanel
from weather_lookup.reading import WeatherReading

from .conftest import weather_payload


def _render(panel: WeatherPanel, temp: float, description: str = "clear sky") -> None:
    reading = WeatherReading.from_payload(
        weather_payload(temp=temp, description=description, icon="01d")
    )
    panel.render_success(reading, WeatherDisplay.from_reading(reading))


class TestWeatherPanel:
    def test_initially_hidden(self) -> None:
        panel = WeatherPanel()

        assert not panel.result_visible
        assert panel.category_class is None

    def test_loading_hides_info_and_error(self) -> None:
        panel = WeatherPanel()
        panel.render_error("City not found: Atlantis")

        panel.render_loading()

        assert panel.result_visible
        assert panel.loading_visible
        assert not panel.info_visible
        assert not panel.error_visible

    def test_success_fills_info(self) -> None:
        panel = WeatherPanel()
        panel.render_loading()

        _render(panel, 25.04, "light rain")

        assert not panel.loading_visible
        assert panel.info_visible
        assert not panel.error_visible
        assert panel.city_name == "Nairobi"
        assert panel.temperature == "25.0"
        assert panel.description == "Light rain"
        assert panel.humidity == "64%"
        assert panel.wind_speed == "3.6 m/s"
        assert panel.icon_src == "https://openweathermap.org/img/wn/01d@2x.png"
        assert panel.icon_alt == "light rain"
        assert panel.result_classes == {"hot"}

    def test_category_class_replaced(self) -> None:
        """Exactly one temperature class is applied at a time."""
        panel = WeatherPanel()
        panel.result_classes.add("card")

        _render(panel, 30.0)
        _render(panel, 15.0)
        assert panel.result_classes == {"card", "cold"}

        _render(panel, 20.0)
        assert panel.result_classes == {"card", "moderate"}
        assert panel.category_class == "moderate"

    def test_error_shows_prefixed_message(self) -> None:
        panel = WeatherPanel()
        panel.render_loading()

        panel.render_error("Please enter a city name")

        assert panel.result_visible
        assert not panel.loading_visible
        assert not panel.info_visible
        assert panel.error_visible
        assert panel.error_text == "❌ Error: Please enter a city name"

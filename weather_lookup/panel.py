"""Toolkit-agnostic weather panel.

WeatherPanel models the lookup page (result region with loading, info and
error sections) as plain attributes. It implements WeatherRenderer, so a
UI toolkit only has to mirror these attributes onto its widgets.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .display import WeatherDisplay
from .reading import TemperatureCategory, WeatherReading

ERROR_PREFIX = "❌ Error: "


@dataclass
class WeatherPanel:
    """Page regions and their current content."""

    # Region visibility
    result_visible: bool = False
    loading_visible: bool = False
    info_visible: bool = False
    error_visible: bool = False

    # Info texts
    city_name: str = ""
    temperature: str = ""
    description: str = ""
    humidity: str = ""
    wind_speed: str = ""
    icon_src: str = ""
    icon_alt: str = ""

    error_text: str = ""

    # Style classes on the result region
    result_classes: set[str] = field(default_factory=lambda: set[str]())

    @property
    def category_class(self) -> str | None:
        """The temperature class currently applied, if any."""
        for category in TemperatureCategory:
            if category.value in self.result_classes:
                return category.value
        return None

    def render_loading(self) -> None:
        self.result_visible = True
        self.loading_visible = True
        self.info_visible = False
        self.error_visible = False

    def render_success(self, reading: WeatherReading, display: WeatherDisplay) -> None:
        self.result_visible = True
        self.loading_visible = False
        self.info_visible = True
        self.error_visible = False

        self.city_name = display.location
        self.temperature = display.temperature
        self.description = display.description
        self.humidity = display.humidity
        self.wind_speed = display.wind_speed
        self.icon_src = display.icon_url
        self.icon_alt = display.icon_alt

        self.result_classes -= {category.value for category in TemperatureCategory}
        self.result_classes.add(display.category.value)

    def render_error(self, message: str) -> None:
        self.result_visible = True
        self.loading_visible = False
        self.info_visible = False
        self.error_visible = True
        self.error_text = f"{ERROR_PREFIX}{message}"

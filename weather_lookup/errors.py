"""Error types for weather lookups."""

from __future__ import annotations

INVALID_INPUT_MESSAGE = "Please enter a city name"


class WeatherLookupError(Exception):
    """Base error for weather lookup failures."""


class WeatherLookupInvalidInput(WeatherLookupError):
    """Lookup query was empty after trimming."""

    def __init__(self, message: str = INVALID_INPUT_MESSAGE) -> None:
        super().__init__(message)


class WeatherLookupNotFound(WeatherLookupError):
    """Provider answered with a non-2xx status."""

    def __init__(self, status: int, location: str) -> None:
        super().__init__(f"City not found: {location}")
        self.status = status
        self.location = location


class WeatherLookupTimeout(WeatherLookupError):
    """Timeout while waiting for the provider."""


class WeatherLookupConnectionError(WeatherLookupError):
    """Network connection to the provider failed."""


class WeatherLookupMalformedResponse(WeatherLookupError):
    """Provider response was not the expected JSON shape."""


class WeatherLookupConfigError(WeatherLookupError):
    """Configuration could not be loaded."""

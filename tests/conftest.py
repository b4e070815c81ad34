"""Pytest configuration and fixtures for weather_lookup tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from weather_lookup import WeatherLookupConfig


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    import aiohttp

    return MagicMock(spec=aiohttp.ClientSession)


@pytest.fixture
def config() -> WeatherLookupConfig:
    """Config with a test credential."""
    return WeatherLookupConfig(api_key="test-key")


def weather_payload(
    name: str = "Nairobi",
    temp: float = 21.37,
    description: str = "scattered clouds",
    icon: str = "03d",
    humidity: float = 64,
    wind_speed: float = 3.6,
) -> dict[str, Any]:
    """Build a provider body with the fields a reading needs."""
    return {
        "name": name,
        "weather": [{"id": 802, "main": "Clouds", "description": description, "icon": icon}],
        "main": {"temp": temp, "feels_like": temp, "humidity": humidity},
        "wind": {"speed": wind_speed, "deg": 90},
    }


def create_mock_response(
    status: int = 200,
    json_data: Any = None,
    json_error: Exception | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        json_data: Data to return from json() call
        json_error: Exception raised by json() call

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status

    if json_error is not None:
        response.json.side_effect = json_error
    elif json_data is not None:
        response.json.return_value = json_data

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response

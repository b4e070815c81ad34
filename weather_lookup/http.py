"""HTTP client for the provider's current-weather endpoint."""

from __future__ import annotations

import logging
from typing import Protocol

import aiohttp

from .config import WeatherLookupConfig
from .errors import (
    WeatherLookupConnectionError,
    WeatherLookupMalformedResponse,
    WeatherLookupNotFound,
    WeatherLookupTimeout,
)
from .reading import LookupQuery, WeatherReading

_LOGGER = logging.getLogger(__name__)


class WeatherFetcher(Protocol):
    """Anything that can resolve a query to a reading."""

    async def fetch_weather(self, query: LookupQuery | str) -> WeatherReading:
        """Fetch current weather for a query."""
        ...


class WeatherHttpClient:
    """HTTP client wrapper for the current-weather endpoint."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        config: WeatherLookupConfig,
    ) -> None:
        self._session = session
        self._config = config

    @property
    def units(self) -> str:
        """Unit system used for every request."""
        return self._config.units

    def _params(self, query: LookupQuery) -> dict[str, str]:
        return {
            "q": query.location_name,
            "appid": self._config.api_key,
            "units": self.units,
        }

    async def fetch_weather(self, query: LookupQuery | str) -> WeatherReading:
        """Fetch current weather for a location.

        Issues exactly one GET; there are no retries.

        Args:
            query: Lookup query, or raw location text.

        Returns:
            WeatherReading projected from the response body.

        Raises:
            WeatherLookupInvalidInput: Location is empty (no request is made).
            WeatherLookupNotFound: Provider returned a non-2xx status.
            WeatherLookupMalformedResponse: Body is not the expected JSON.
            WeatherLookupTimeout: Request timed out.
            WeatherLookupConnectionError: Network request failed.
        """
        if not isinstance(query, LookupQuery):
            query = LookupQuery.parse(query)

        location = query.location_name
        _LOGGER.debug(
            "[%s] Fetching weather from %s (units=%s)",
            location,
            self._config.base_url,
            self.units,
        )
        try:
            async with self._session.get(
                self._config.base_url,
                params=self._params(query),
                timeout=aiohttp.ClientTimeout(total=self._config.request_timeout),
            ) as resp:
                if not 200 <= resp.status < 300:
                    # Provider error bodies are not surfaced
                    raise WeatherLookupNotFound(resp.status, location)
                try:
                    data = await resp.json(content_type=None)
                except ValueError as err:
                    raise WeatherLookupMalformedResponse(
                        "Weather response is not valid JSON"
                    ) from err
        except TimeoutError as err:
            raise WeatherLookupTimeout("Weather request timed out") from err
        except aiohttp.ClientError as err:
            raise WeatherLookupConnectionError(
                f"Weather request failed: {err}"
            ) from err

        return WeatherReading.from_payload(data)

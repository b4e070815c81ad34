"""View state machine for weather lookups.

This module maps lookup outcomes onto a single rendered view state:
- Idle until the first submission
- Loading while a fetch is in flight
- Success with the formatted reading
- Error with a single-line message

Rendering is delegated to a WeatherRenderer supplied by the UI layer, so
the state machine does not depend on any UI toolkit.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from .config import DEFAULT_ICON_URL_TEMPLATE
from .display import WeatherDisplay
from .errors import WeatherLookupError, WeatherLookupInvalidInput
from .http import WeatherFetcher
from .reading import LookupQuery, WeatherReading

_LOGGER = logging.getLogger(__name__)


class ViewStateKind(Enum):
    """Presentation modes of the lookup view."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    """The single live view state.

    Attributes:
        kind: Current presentation mode.
        reading: Reading shown in SUCCESS.
        display: Formatted reading shown in SUCCESS.
        message: Error text shown in ERROR.
    """

    kind: ViewStateKind
    reading: WeatherReading | None = None
    display: WeatherDisplay | None = None
    message: str | None = None

    @classmethod
    def idle(cls) -> ViewState:
        return cls(ViewStateKind.IDLE)

    @classmethod
    def loading(cls) -> ViewState:
        return cls(ViewStateKind.LOADING)

    @classmethod
    def success(cls, reading: WeatherReading, display: WeatherDisplay) -> ViewState:
        return cls(ViewStateKind.SUCCESS, reading=reading, display=display)

    @classmethod
    def error(cls, message: str) -> ViewState:
        return cls(ViewStateKind.ERROR, message=message)


class WeatherRenderer(Protocol):
    """Rendering capabilities the UI layer provides to the view."""

    def render_loading(self) -> None:
        """Show the loading indicator."""
        ...

    def render_success(self, reading: WeatherReading, display: WeatherDisplay) -> None:
        """Show a successful reading."""
        ...

    def render_error(self, message: str) -> None:
        """Show an error message."""
        ...


def error_message(err: WeatherLookupError) -> str:
    """Single-line user-facing message for a lookup error."""
    return str(err)


class WeatherView:
    """Lookup controller owning the view state.

    Usage:
        view = WeatherView(
            WeatherHttpClient(session, config),
            panel,
            icon_url_template=config.icon_url_template,
        )
        await view.start(config.default_city)
        await view.submit_query("Nairobi")
        view.state.kind  # ViewStateKind.SUCCESS
    """

    def __init__(
        self,
        fetcher: WeatherFetcher,
        renderer: WeatherRenderer,
        *,
        icon_url_template: str = DEFAULT_ICON_URL_TEMPLATE,
    ) -> None:
        self._fetcher = fetcher
        self._renderer = renderer
        self._icon_url_template = icon_url_template

        self._state = ViewState.idle()
        self._request_seq = 0
        self._state_callback: Callable[[ViewState], None] | None = None

    @property
    def state(self) -> ViewState:
        """Current view state."""
        return self._state

    @property
    def request_seq(self) -> int:
        """Sequence number of the latest submission."""
        return self._request_seq

    def on_state_changed(self, callback: Callable[[ViewState], None]) -> None:
        """Register callback for view state changes."""
        self._state_callback = callback

    # -------------------------------------------------------------------------
    # Public API: Input events
    # -------------------------------------------------------------------------

    async def start(self, default_city: str | None = None) -> None:
        """Run the initial lookup, if a default city is configured."""
        if default_city:
            await self.submit_query(default_city)

    async def select_city(self, value: str | None) -> None:
        """Handle a city selection change; empty selections are ignored."""
        if not value:
            return
        await self.submit_query(value)

    async def submit_query(self, name: str | None) -> None:
        """Look up weather for a location and render the outcome.

        Empty input goes straight to ERROR without a fetch. Otherwise the
        view enters LOADING before the request is issued. A result is
        applied only if no newer submission started while it was in flight.
        """
        try:
            query = LookupQuery.parse(name)
        except WeatherLookupInvalidInput as err:
            self._request_seq += 1
            self._apply(ViewState.error(error_message(err)))
            return

        self._request_seq += 1
        seq = self._request_seq
        self._apply(ViewState.loading())

        try:
            reading = await self._fetcher.fetch_weather(query)
            display = WeatherDisplay.from_reading(reading, self._icon_url_template)
        except WeatherLookupError as err:
            if self._is_stale(seq, query):
                return
            _LOGGER.warning("[%s] Lookup failed: %s", query.location_name, err)
            self._apply(ViewState.error(error_message(err)))
            return
        except Exception as err:
            if self._is_stale(seq, query):
                return
            _LOGGER.exception(
                "[%s] Unexpected lookup error: %s", query.location_name, err
            )
            self._apply(ViewState.error(str(err)))
            return

        if self._is_stale(seq, query):
            return

        _LOGGER.info(
            "[%s] %s°, %s",
            query.location_name,
            display.temperature,
            reading.condition_description,
        )
        self._apply(ViewState.success(reading, display))

    # -------------------------------------------------------------------------
    # Internal: State transitions
    # -------------------------------------------------------------------------

    def _is_stale(self, seq: int, query: LookupQuery) -> bool:
        if seq == self._request_seq:
            return False
        _LOGGER.debug(
            "[%s] Discarding stale result (seq=%d, latest=%d)",
            query.location_name,
            seq,
            self._request_seq,
        )
        return True

    def _apply(self, state: ViewState) -> None:
        """Replace the view state, render it and notify the callback."""
        _LOGGER.debug("View: %s → %s", self._state.kind.value, state.kind.value)
        self._state = state

        if state.kind is ViewStateKind.LOADING:
            self._renderer.render_loading()
        elif state.kind is ViewStateKind.SUCCESS:
            if state.reading is not None and state.display is not None:
                self._renderer.render_success(state.reading, state.display)
        elif state.kind is ViewStateKind.ERROR:
            self._renderer.render_error(state.message or "")

        if self._state_callback:
            try:
                self._state_callback(state)
            except Exception as err:
                _LOGGER.exception("View state callback error: %s", err)

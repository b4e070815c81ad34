"""Weather lookup client and view state machine."""

__version__ = "0.1.0"

from .config import WeatherLookupConfig, load_config
from .display import WeatherDisplay
from .errors import (
    WeatherLookupConfigError,
    WeatherLookupConnectionError,
    WeatherLookupError,
    WeatherLookupInvalidInput,
    WeatherLookupMalformedResponse,
    WeatherLookupNotFound,
    WeatherLookupTimeout,
)
from .http import WeatherFetcher, WeatherHttpClient
from .panel import WeatherPanel
from .reading import LookupQuery, TemperatureCategory, WeatherReading
from .view import ViewState, ViewStateKind, WeatherRenderer, WeatherView

__all__ = [
    "LookupQuery",
    "TemperatureCategory",
    "ViewState",
    "ViewStateKind",
    "WeatherDisplay",
    "WeatherFetcher",
    "WeatherHttpClient",
    "WeatherLookupConfig",
    "WeatherLookupConfigError",
    "WeatherLookupConnectionError",
    "WeatherLookupError",
    "WeatherLookupInvalidInput",
    "WeatherLookupMalformedResponse",
    "WeatherLookupNotFound",
    "WeatherLookupTimeout",
    "WeatherPanel",
    "WeatherReading",
    "WeatherRenderer",
    "WeatherView",
    "__version__",
    "load_config",
]

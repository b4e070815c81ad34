"""Lookup configuration loading.

Configuration is data: a YAML mapping with the provider endpoint, unit
system and request timeout. The credential is injected at runtime through
``WEATHER_LOOKUP_API_KEY`` and is never embedded in code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .errors import WeatherLookupConfigError

API_KEY_ENV = "WEATHER_LOOKUP_API_KEY"

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{icon}@2x.png"
DEFAULT_UNITS = "metric"
DEFAULT_REQUEST_TIMEOUT = 10.0


@dataclass(frozen=True)
class WeatherLookupConfig:
    """Provider settings for a weather client.

    Attributes:
        api_key: Provider credential (``appid``).
        base_url: Current-weather endpoint.
        units: Provider unit system (e.g., "metric", "imperial").
        icon_url_template: Icon URL with an ``{icon}`` placeholder.
        request_timeout: Total request timeout in seconds.
        default_city: City looked up when the view starts, if any.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    units: str = DEFAULT_UNITS
    icon_url_template: str = DEFAULT_ICON_URL_TEMPLATE
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    default_city: str | None = None


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file with error handling."""
    if not path.exists():
        raise WeatherLookupConfigError(f"File not found: {path}")
    with path.open() as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as err:
            raise WeatherLookupConfigError(f"Invalid YAML in {path}") from err
    if not isinstance(data, dict):
        raise WeatherLookupConfigError(f"Expected a mapping in {path}")
    return data


def config_from_mapping(
    data: dict[str, Any], environ: dict[str, str] | None = None
) -> WeatherLookupConfig:
    """Build a config from a mapping, applying the credential override.

    Args:
        data: Raw settings (keys match WeatherLookupConfig fields).
        environ: Environment to read the credential from (defaults to
            ``os.environ``).

    Returns:
        Validated WeatherLookupConfig.

    Raises:
        WeatherLookupConfigError: Unknown keys, or no credential available.
    """
    env = os.environ if environ is None else environ
    known = {f.name for f in fields(WeatherLookupConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise WeatherLookupConfigError(f"Unknown config keys: {', '.join(unknown)}")

    settings = dict(data)
    api_key = env.get(API_KEY_ENV) or settings.get("api_key")
    if not api_key:
        raise WeatherLookupConfigError(
            f"No API key configured (set {API_KEY_ENV} or api_key)"
        )
    settings["api_key"] = str(api_key)

    if "request_timeout" in settings:
        try:
            settings["request_timeout"] = float(settings["request_timeout"])
        except (TypeError, ValueError) as err:
            raise WeatherLookupConfigError("request_timeout must be a number") from err
        if settings["request_timeout"] <= 0:
            raise WeatherLookupConfigError("request_timeout must be positive")

    template = settings.get("icon_url_template", DEFAULT_ICON_URL_TEMPLATE)
    if "{icon}" not in template:
        raise WeatherLookupConfigError("icon_url_template must contain {icon}")
    try:
        template.format(icon="01d")
    except (KeyError, IndexError, ValueError) as err:
        raise WeatherLookupConfigError(
            "icon_url_template may only use the {icon} placeholder"
        ) from err

    return WeatherLookupConfig(**settings)


def load_config(
    path: Path, environ: dict[str, str] | None = None
) -> WeatherLookupConfig:
    """Load lookup configuration from a YAML file."""
    return config_from_mapping(_load_yaml(path), environ)

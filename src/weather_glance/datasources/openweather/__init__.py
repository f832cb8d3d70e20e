"""OpenWeatherMap current-weather data source.

Public API:
  - current: fetch_current, parse_current_weather, classify_error
  - client: API URL, build_params
  - models: CurrentWeatherResponse (upstream body schema)
"""

from weather_glance.datasources.openweather.client import OPENWEATHER_API, build_params
from weather_glance.datasources.openweather.current import (
    classify_error,
    fetch_current,
    parse_current_weather,
)
from weather_glance.datasources.openweather.models import CurrentWeatherResponse

__all__ = [
    "OPENWEATHER_API",
    "CurrentWeatherResponse",
    "build_params",
    "classify_error",
    "fetch_current",
    "parse_current_weather",
]

"""Weather Glance - current weather for the device location or a chosen city.

Architecture::

    client.py      WeatherClient: resolve location, fetch, normalize to FetchOutcome
    datasources/   External APIs (OpenWeatherMap current weather)
    location/      LocationProvider protocol + fixed and IP-based providers
    state.py       Immutable AppState and the pure reducer
    controller.py  Explicit event dispatch with stale-response guard
    places.py      Country/city catalogue for manual selection
    renderers/     Pure data -> display strings (temperatures, icons, messages)
    services/      Shared utilities (HTTP session, default HttpFetcher)

Data flow: controller event -> reducer -> client -> datasource -> reducer -> renderers
"""

__version__ = "0.1.0"

from weather_glance.client import WeatherClient
from weather_glance.config import Settings, get_settings
from weather_glance.controller import WeatherController
from weather_glance.schemas import (
    FetchError,
    FetchErrorKind,
    FetchOutcome,
    GpsSelector,
    ManualSelector,
    UnitPreference,
    WeatherReading,
)
from weather_glance.state import AppState

__all__ = [
    "AppState",
    "FetchError",
    "FetchErrorKind",
    "FetchOutcome",
    "GpsSelector",
    "ManualSelector",
    "Settings",
    "UnitPreference",
    "WeatherClient",
    "WeatherController",
    "WeatherReading",
    "__version__",
    "get_settings",
]

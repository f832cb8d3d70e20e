"""OpenWeatherMap API constants and request building.

API docs: https://openweathermap.org/current
"""

from __future__ import annotations

from typing import Any

from weather_glance.schemas import Coordinates, UnitPreference

OPENWEATHER_API = "https://api.openweathermap.org/data/2.5/weather"

# ``cod`` values the current-weather endpoint puts in its JSON body
COD_OK = 200
COD_UNAUTHORIZED = 401

NOT_FOUND_MARKER = "not found"


def build_params(
    api_key: str,
    unit: UnitPreference,
    *,
    coords: Coordinates | None = None,
    query: str | None = None,
) -> dict[str, Any]:
    """
    Query params for one current-weather request.

    Exactly one of ``coords`` or ``query`` must be given.

    Args:
        api_key: OpenWeatherMap ``appid``.
        unit: Upstream ``units`` code.
        coords: Look up by latitude/longitude.
        query: Look up by ``"{city},{country}"``.
    """
    if (coords is None) == (query is None):
        raise ValueError("build_params needs exactly one of coords or query")

    params: dict[str, Any] = {}
    if coords is not None:
        params["lat"] = coords.lat
        params["lon"] = coords.lon
    else:
        params["q"] = query
    params["appid"] = api_key
    params["units"] = unit.value
    return params

"""Display strings for the weather screen.

Pure functions over readings, errors and ``AppState``; the host UI places
the strings, this module only decides what they say.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_glance.renderers.weather_utils import c_to_f, round_half_up
from weather_glance.schemas import FetchErrorKind, UnitPreference

if TYPE_CHECKING:
    from weather_glance.schemas import FetchError, WeatherReading
    from weather_glance.state import AppState

NO_DATA = "N/A"

ERROR_MESSAGES: dict[FetchErrorKind, str] = {
    FetchErrorKind.PERMISSION_DENIED: (
        "Location access denied. Please enable location services for this app "
        "or switch to manual selection."
    ),
    FetchErrorKind.LOCATION_UNAVAILABLE: (
        "Unable to determine your current location. Please try again or switch "
        "to manual selection."
    ),
    FetchErrorKind.INVALID_API_KEY: (
        "Invalid API Key. Please double-check your OpenWeatherMap API key."
    ),
    FetchErrorKind.PLACE_NOT_FOUND: (
        "City Not Found: The selected city/country combination could not be found. "
        "Please try another."
    ),
    FetchErrorKind.NETWORK_FAILURE: (
        "Failed to fetch weather data. Please check your internet connection or try again."
    ),
}

FALLBACK_ERROR = "Unable to load weather data. Please try again."
MANUAL_HINT = "Make sure your city/country selection is valid."
PERMISSION_HINT = "Please grant location permission to use GPS."


def display_temperature(reading: WeatherReading | None, unit: UnitPreference) -> str:
    """Rounded temperature with its unit symbol, e.g. ``"22°C"`` or ``"72°F"``."""
    if reading is None:
        return NO_DATA
    if unit == UnitPreference.IMPERIAL:
        return f"{round_half_up(c_to_f(reading.temperature_celsius))}°F"
    return f"{round_half_up(reading.temperature_celsius)}°C"


def location_label(reading: WeatherReading) -> str:
    return f"{reading.location_name}, {reading.country_code}"


def format_coordinates(reading: WeatherReading) -> str:
    return f"Lat: {reading.latitude:.2f}, Lon: {reading.longitude:.2f}"


def unit_toggle_label(unit: UnitPreference) -> str:
    """Label for the button that flips the unit."""
    target = "Fahrenheit" if unit == UnitPreference.METRIC else "Celsius"
    return f"Switch to {target}"


def error_message(error: FetchError | None) -> str:
    """User-facing text for a fetch error."""
    if error is None:
        return FALLBACK_ERROR
    if error.kind is FetchErrorKind.UNKNOWN_API_ERROR:
        return error.message or FALLBACK_ERROR
    return ERROR_MESSAGES[error.kind]


def error_hints(state: AppState) -> list[str]:
    """Extra guidance shown under the error card."""
    if not state.use_gps:
        return [MANUAL_HINT]
    if not state.location_granted:
        return [PERMISSION_HINT]
    return []

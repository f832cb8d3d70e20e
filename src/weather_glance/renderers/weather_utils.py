"""Weather utility functions for renderers.

Pure conversion functions with no external dependencies.
"""

from __future__ import annotations

import math
from enum import StrEnum


class IconKey(StrEnum):
    """Local icon set keys; the host app maps each to an image."""

    CLEAR = "clear"
    CLOUDS = "clouds"
    RAIN = "rain"
    SNOW = "snow"
    THUNDERSTORM = "thunderstorm"
    ATMOSPHERE = "atmosphere"
    DEFAULT = "default"


# OpenWeatherMap condition groups (https://openweathermap.org/weather-conditions)
CONDITION_ICONS: dict[str, IconKey] = {
    "clear": IconKey.CLEAR,
    "clouds": IconKey.CLOUDS,
    "rain": IconKey.RAIN,
    "drizzle": IconKey.RAIN,
    "snow": IconKey.SNOW,
    "thunderstorm": IconKey.THUNDERSTORM,
    "mist": IconKey.ATMOSPHERE,
    "smoke": IconKey.ATMOSPHERE,
    "haze": IconKey.ATMOSPHERE,
    "dust": IconKey.ATMOSPHERE,
    "fog": IconKey.ATMOSPHERE,
    "sand": IconKey.ATMOSPHERE,
    "ash": IconKey.ATMOSPHERE,
    "squall": IconKey.ATMOSPHERE,
    "tornado": IconKey.ATMOSPHERE,
}


def c_to_f(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32


def f_to_c(fahrenheit: float) -> float:
    """Convert Fahrenheit to Celsius."""
    return (fahrenheit - 32) * 5 / 9


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +inf (22.5 -> 23, -0.5 -> 0)."""
    return math.floor(value + 0.5)


def condition_to_icon_key(main: str) -> IconKey:
    """Map a condition group (``weather[0].main``) to an icon key, case-insensitively."""
    return CONDITION_ICONS.get(main.strip().lower(), IconKey.DEFAULT)

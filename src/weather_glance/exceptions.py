"""Internal exceptions. None of these escape ``WeatherClient.fetch_weather``."""

from __future__ import annotations


class WeatherGlanceError(Exception):
    """Base class for package errors."""


class TransportError(WeatherGlanceError):
    """The HTTP round-trip failed or returned a body that isn't JSON."""


class LocationUnavailableError(WeatherGlanceError):
    """The location provider could not produce coordinates."""

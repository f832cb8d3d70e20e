"""
Domain models for weather-glance.

Pydantic models for the client's inputs and outputs. These define the
canonical schema - datasources normalize API responses to these.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, Field, model_validator

# =============================================================================
# Location selection
# =============================================================================


class UnitPreference(StrEnum):
    """Display unit. Values double as the upstream ``units`` codes."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class GpsSelector(BaseModel):
    """Resolve the location from the device position."""

    model_config = {"frozen": True}

    mode: Literal["gps"] = "gps"


class ManualSelector(BaseModel):
    """Resolve the location from an explicit country/city pair."""

    model_config = {"frozen": True, "str_strip_whitespace": True}

    mode: Literal["manual"] = "manual"
    country: str = Field(..., description="ISO 3166 alpha-2 country code")
    city: str = Field(..., description="City name")

    @property
    def query(self) -> str:
        """Free-text place query, ``"{city},{country}"``."""
        return f"{self.city},{self.country}"


LocationSelector = Annotated[GpsSelector | ManualSelector, Field(discriminator="mode")]


class Coordinates(BaseModel):
    """Geographic point."""

    model_config = {"frozen": True}

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class PermissionStatus(StrEnum):
    """Outcome of a foreground location permission request."""

    GRANTED = "granted"
    DENIED = "denied"


# =============================================================================
# Readings
# =============================================================================


class WeatherReading(BaseModel):
    """Current weather for a resolved location, always in Celsius."""

    model_config = {"frozen": True}

    location_name: str
    country_code: str
    latitude: float
    longitude: float
    temperature_celsius: float
    condition_main: str
    condition_description: str


# =============================================================================
# Errors and outcomes
# =============================================================================


class FetchErrorKind(StrEnum):
    """Why a fetch failed."""

    PERMISSION_DENIED = "permission_denied"
    LOCATION_UNAVAILABLE = "location_unavailable"
    INVALID_API_KEY = "invalid_api_key"
    PLACE_NOT_FOUND = "place_not_found"
    NETWORK_FAILURE = "network_failure"
    UNKNOWN_API_ERROR = "unknown_api_error"


class FetchError(BaseModel):
    """A classified fetch failure, returned to the caller as data."""

    model_config = {"frozen": True}

    kind: FetchErrorKind
    message: str = ""

    @classmethod
    def permission_denied(cls) -> FetchError:
        return cls(kind=FetchErrorKind.PERMISSION_DENIED, message="Location permission denied")

    @classmethod
    def location_unavailable(cls, message: str = "Current location unavailable") -> FetchError:
        return cls(kind=FetchErrorKind.LOCATION_UNAVAILABLE, message=message)

    @classmethod
    def invalid_api_key(cls, message: str = "Invalid API key") -> FetchError:
        return cls(kind=FetchErrorKind.INVALID_API_KEY, message=message)

    @classmethod
    def place_not_found(cls, message: str = "city not found") -> FetchError:
        return cls(kind=FetchErrorKind.PLACE_NOT_FOUND, message=message)

    @classmethod
    def network_failure(cls, message: str = "Network request failed") -> FetchError:
        return cls(kind=FetchErrorKind.NETWORK_FAILURE, message=message)

    @classmethod
    def unknown_api_error(cls, message: str) -> FetchError:
        return cls(kind=FetchErrorKind.UNKNOWN_API_ERROR, message=message)


class FetchOutcome(BaseModel):
    """Result of one fetch: exactly one of ``reading`` or ``error``."""

    model_config = {"frozen": True}

    reading: WeatherReading | None = None
    error: FetchError | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> FetchOutcome:
        if (self.reading is None) == (self.error is None):
            raise ValueError("FetchOutcome needs exactly one of reading or error")
        return self

    @classmethod
    def ok(cls, reading: WeatherReading) -> FetchOutcome:
        return cls(reading=reading)

    @classmethod
    def err(cls, error: FetchError) -> FetchOutcome:
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.reading is not None

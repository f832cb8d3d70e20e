"""
Screen state and its reducer.

``AppState`` is one immutable record; ``reduce(state, event)`` is the only
way to get a new one. Fetch results carry the generation token of the fetch
that produced them, and the reducer drops any whose token is not current.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from weather_glance import places
from weather_glance.schemas import (
    FetchErrorKind,
    GpsSelector,
    ManualSelector,
    UnitPreference,
)

if TYPE_CHECKING:
    from weather_glance.schemas import FetchError, FetchOutcome, WeatherReading


@dataclass(frozen=True)
class AppState:
    """Everything the weather screen shows."""

    use_gps: bool = True
    country: str = "IN"
    city: str = "Delhi"
    unit: UnitPreference = UnitPreference.METRIC
    reading: WeatherReading | None = None
    error: FetchError | None = None
    loading: bool = False
    location_granted: bool = False
    generation: int = 0

    @property
    def selector(self) -> GpsSelector | ManualSelector:
        """The active location selector."""
        if self.use_gps:
            return GpsSelector()
        return ManualSelector(country=self.country, city=self.city)


# =============================================================================
# Events
# =============================================================================


@dataclass(frozen=True)
class ModeChanged:
    use_gps: bool


@dataclass(frozen=True)
class LocationChanged:
    """New manual country; ``city=None`` picks the country's first city."""

    country: str
    city: str | None = None


@dataclass(frozen=True)
class UnitChanged:
    unit: UnitPreference


@dataclass(frozen=True)
class FetchStarted:
    generation: int


@dataclass(frozen=True)
class FetchCompleted:
    generation: int
    outcome: FetchOutcome


Event = ModeChanged | LocationChanged | UnitChanged | FetchStarted | FetchCompleted


# =============================================================================
# Reducer
# =============================================================================


def _apply_outcome(state: AppState, outcome: FetchOutcome) -> AppState:
    granted = state.location_granted
    if outcome.error is not None:
        if outcome.error.kind is FetchErrorKind.PERMISSION_DENIED:
            granted = False
        elif outcome.error.kind is FetchErrorKind.LOCATION_UNAVAILABLE:
            granted = True
        return replace(
            state, loading=False, reading=None, error=outcome.error, location_granted=granted
        )

    if state.use_gps:
        granted = True
    return replace(
        state, loading=False, reading=outcome.reading, error=None, location_granted=granted
    )


def reduce(state: AppState, event: Event) -> AppState:
    """Return the state after ``event``. Pure; ``state`` is never mutated."""
    if isinstance(event, ModeChanged):
        return replace(state, use_gps=event.use_gps)

    if isinstance(event, LocationChanged):
        city = event.city if event.city is not None else places.default_city(event.country)
        return replace(state, country=event.country, city=city)

    if isinstance(event, UnitChanged):
        return replace(state, unit=event.unit)

    if isinstance(event, FetchStarted):
        return replace(state, loading=True, error=None, generation=event.generation)

    if isinstance(event, FetchCompleted):
        if event.generation != state.generation:
            return state
        return _apply_outcome(state, event.outcome)

    raise TypeError(f"Unknown event: {event!r}")

"""Tests for AppState and the reducer."""

from __future__ import annotations

import dataclasses

import pytest

from weather_glance.schemas import (
    FetchError,
    FetchOutcome,
    GpsSelector,
    ManualSelector,
    UnitPreference,
    WeatherReading,
)
from weather_glance.state import (
    AppState,
    FetchCompleted,
    FetchStarted,
    LocationChanged,
    ModeChanged,
    UnitChanged,
    reduce,
)

READING = WeatherReading(
    location_name="London",
    country_code="GB",
    latitude=51.51,
    longitude=-0.13,
    temperature_celsius=14.2,
    condition_main="Clouds",
    condition_description="broken clouds",
)


class TestAppState:
    def test_defaults(self) -> None:
        state = AppState()
        assert state.use_gps is True
        assert (state.country, state.city) == ("IN", "Delhi")
        assert state.unit is UnitPreference.METRIC
        assert state.reading is None
        assert state.error is None
        assert state.generation == 0

    def test_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            AppState().loading = True  # type: ignore[misc]

    def test_selector_gps(self) -> None:
        assert AppState().selector == GpsSelector()

    def test_selector_manual(self) -> None:
        state = AppState(use_gps=False, country="US", city="Chicago")
        assert state.selector == ManualSelector(country="US", city="Chicago")


class TestSelectionEvents:
    def test_mode_changed_keeps_manual_place(self) -> None:
        state = AppState(use_gps=False, country="GB", city="Glasgow")
        state = reduce(state, ModeChanged(use_gps=True))
        state = reduce(state, ModeChanged(use_gps=False))
        assert (state.country, state.city) == ("GB", "Glasgow")

    def test_location_changed_defaults_city(self) -> None:
        state = reduce(AppState(), LocationChanged("US"))
        assert (state.country, state.city) == ("US", "New York")

    def test_location_changed_explicit_city(self) -> None:
        state = reduce(AppState(), LocationChanged("GB", "Manchester"))
        assert state.city == "Manchester"

    def test_location_changed_unknown_country(self) -> None:
        state = reduce(AppState(), LocationChanged("FR"))
        assert (state.country, state.city) == ("FR", "")

    def test_unit_changed(self) -> None:
        state = reduce(AppState(), UnitChanged(UnitPreference.IMPERIAL))
        assert state.unit is UnitPreference.IMPERIAL

    def test_input_state_untouched(self) -> None:
        before = AppState()
        reduce(before, UnitChanged(UnitPreference.IMPERIAL))
        assert before.unit is UnitPreference.METRIC


class TestFetchEvents:
    def test_fetch_started(self) -> None:
        state = AppState(error=FetchError.network_failure())
        state = reduce(state, FetchStarted(3))
        assert state.loading is True
        assert state.error is None
        assert state.generation == 3

    def test_completed_success(self) -> None:
        state = reduce(AppState(), FetchStarted(1))
        state = reduce(state, FetchCompleted(1, FetchOutcome.ok(READING)))
        assert state.loading is False
        assert state.reading == READING
        assert state.error is None
        assert state.location_granted is True

    def test_completed_error_clears_reading(self) -> None:
        state = AppState(reading=READING, generation=1)
        state = reduce(state, FetchCompleted(1, FetchOutcome.err(FetchError.place_not_found())))
        assert state.reading is None
        assert state.error == FetchError.place_not_found()

    def test_stale_completion_ignored(self) -> None:
        state = reduce(AppState(), FetchStarted(1))
        state = reduce(state, FetchStarted(2))
        after = reduce(state, FetchCompleted(1, FetchOutcome.ok(READING)))
        assert after is state
        assert after.loading is True
        assert after.reading is None

    def test_permission_denied_clears_granted(self) -> None:
        state = AppState(location_granted=True, generation=1)
        state = reduce(state, FetchCompleted(1, FetchOutcome.err(FetchError.permission_denied())))
        assert state.location_granted is False

    def test_location_unavailable_means_granted(self) -> None:
        state = AppState(generation=1)
        outcome = FetchOutcome.err(FetchError.location_unavailable())
        assert reduce(state, FetchCompleted(1, outcome)).location_granted is True

    def test_manual_success_leaves_granted(self) -> None:
        state = AppState(use_gps=False, generation=1)
        state = reduce(state, FetchCompleted(1, FetchOutcome.ok(READING)))
        assert state.location_granted is False


def test_unknown_event() -> None:
    with pytest.raises(TypeError):
        reduce(AppState(), object())  # type: ignore[arg-type]

"""Tests for the pure rendering helpers."""

from __future__ import annotations

import pytest

from weather_glance.renderers.display import (
    ERROR_MESSAGES,
    FALLBACK_ERROR,
    MANUAL_HINT,
    NO_DATA,
    PERMISSION_HINT,
    display_temperature,
    error_hints,
    error_message,
    format_coordinates,
    location_label,
    unit_toggle_label,
)
from weather_glance.renderers.weather_utils import (
    IconKey,
    c_to_f,
    condition_to_icon_key,
    f_to_c,
    round_half_up,
)
from weather_glance.schemas import FetchError, FetchErrorKind, UnitPreference, WeatherReading
from weather_glance.state import AppState


def _reading(temp_c: float = 21.6) -> WeatherReading:
    return WeatherReading(
        location_name="Mumbai",
        country_code="IN",
        latitude=19.0144,
        longitude=72.8479,
        temperature_celsius=temp_c,
        condition_main="Rain",
        condition_description="moderate rain",
    )


class TestConversions:
    def test_freezing(self) -> None:
        assert c_to_f(0) == 32
        assert f_to_c(32) == 0

    def test_boiling(self) -> None:
        assert c_to_f(100) == 212
        assert f_to_c(212) == pytest.approx(100)

    def test_crossover(self) -> None:
        assert c_to_f(-40) == -40

    @pytest.mark.parametrize("x", [-40.0, -12.3, 0.0, 19.5, 37.77, 104.0, 451.0])
    def test_round_trip_within_one_degree(self, x: float) -> None:
        assert abs(round(c_to_f(f_to_c(x))) - round(x)) <= 1


class TestConditionToIconKey:
    def test_case_insensitive(self) -> None:
        assert condition_to_icon_key("RAIN") == condition_to_icon_key("rain") == IconKey.RAIN

    def test_drizzle_is_rain(self) -> None:
        assert condition_to_icon_key("Drizzle") is IconKey.RAIN

    @pytest.mark.parametrize(
        "main", ["Mist", "Smoke", "Haze", "Dust", "Fog", "Sand", "Ash", "Squall", "Tornado"]
    )
    def test_atmosphere_group(self, main: str) -> None:
        assert condition_to_icon_key(main) is IconKey.ATMOSPHERE

    @pytest.mark.parametrize(
        ("main", "key"),
        [
            ("Clear", IconKey.CLEAR),
            ("Clouds", IconKey.CLOUDS),
            ("Snow", IconKey.SNOW),
            ("Thunderstorm", IconKey.THUNDERSTORM),
        ],
    )
    def test_primary_groups(self, main: str, key: IconKey) -> None:
        assert condition_to_icon_key(main) is key

    def test_unknown_is_default(self) -> None:
        assert condition_to_icon_key("Volcano") is IconKey.DEFAULT
        assert condition_to_icon_key("") is IconKey.DEFAULT


class TestDisplayTemperature:
    def test_celsius(self) -> None:
        assert display_temperature(_reading(21.6), UnitPreference.METRIC) == "22°C"

    def test_fahrenheit(self) -> None:
        assert display_temperature(_reading(21.6), UnitPreference.IMPERIAL) == "71°F"

    def test_zero_is_shown(self) -> None:
        assert display_temperature(_reading(0.0), UnitPreference.METRIC) == "0°C"

    @pytest.mark.parametrize(
        ("temp_c", "expected"), [(22.5, "23°C"), (0.5, "1°C"), (-0.5, "0°C"), (-1.5, "-1°C")]
    )
    def test_halves_round_up(self, temp_c: float, expected: str) -> None:
        assert display_temperature(_reading(temp_c), UnitPreference.METRIC) == expected

    def test_fahrenheit_half_rounds_up(self) -> None:
        # 72.5°F stored as 22.5°C
        assert display_temperature(_reading(22.5), UnitPreference.IMPERIAL) == "73°F"

    def test_plain_string_unit(self) -> None:
        assert display_temperature(_reading(0.0), "imperial") == "32°F"  # type: ignore[arg-type]

    def test_no_reading(self) -> None:
        assert display_temperature(None, UnitPreference.METRIC) == NO_DATA


class TestLabels:
    def test_location_label(self) -> None:
        assert location_label(_reading()) == "Mumbai, IN"

    def test_coordinates_two_decimals(self) -> None:
        assert format_coordinates(_reading()) == "Lat: 19.01, Lon: 72.85"

    def test_unit_toggle(self) -> None:
        assert unit_toggle_label(UnitPreference.METRIC) == "Switch to Fahrenheit"
        assert unit_toggle_label(UnitPreference.IMPERIAL) == "Switch to Celsius"


class TestErrorMessage:
    def test_every_kind_has_text(self) -> None:
        for kind in FetchErrorKind:
            error = FetchError(kind=kind, message="upstream says hi")
            assert error_message(error)

    def test_unknown_uses_upstream_message(self) -> None:
        assert error_message(FetchError.unknown_api_error("quota exceeded")) == "quota exceeded"

    def test_unknown_without_message(self) -> None:
        error = FetchError(kind=FetchErrorKind.UNKNOWN_API_ERROR, message="")
        assert error_message(error) == FALLBACK_ERROR

    def test_place_not_found_text(self) -> None:
        assert error_message(FetchError.place_not_found()) == ERROR_MESSAGES[
            FetchErrorKind.PLACE_NOT_FOUND
        ]
        assert "City Not Found" in error_message(FetchError.place_not_found())

    def test_none(self) -> None:
        assert error_message(None) == FALLBACK_ERROR


class TestErrorHints:
    def test_manual_mode(self) -> None:
        assert error_hints(AppState(use_gps=False)) == [MANUAL_HINT]

    def test_gps_without_permission(self) -> None:
        assert error_hints(AppState(use_gps=True, location_granted=False)) == [PERMISSION_HINT]

    def test_gps_with_permission(self) -> None:
        assert error_hints(AppState(use_gps=True, location_granted=True)) == []


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        ("value", "expected"), [(2.5, 3), (3.5, 4), (2.4, 2), (-2.5, -2), (-2.6, -3), (0.0, 0)]
    )
    def test_rounding(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected

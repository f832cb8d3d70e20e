"""Tests for the manual-selection place catalogue."""

from __future__ import annotations

from weather_glance import places


class TestCatalogue:
    def test_countries(self) -> None:
        assert [c.value for c in places.countries()] == ["IN", "US", "GB"]

    def test_every_country_has_cities(self) -> None:
        for country in places.countries():
            assert len(places.cities_for(country.value)) == 4

    def test_unknown_country(self) -> None:
        assert places.cities_for("FR") == ()
        assert places.default_city("FR") == ""


class TestDefaultCity:
    def test_first_city(self) -> None:
        assert places.default_city("IN") == "Delhi"
        assert places.default_city("US") == "New York"
        assert places.default_city("GB") == "London"


class TestIsKnownPlace:
    def test_matching_pair(self) -> None:
        assert places.is_known_place("GB", "Birmingham")

    def test_city_in_other_country(self) -> None:
        assert not places.is_known_place("US", "Kolkata")

"""Places offered for manual selection.

Countries and their cities, in dropdown order. The first city of each
country is its default when the country changes.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Place:
    """A dropdown entry: display label and submitted value."""

    label: str
    value: str


COUNTRIES: tuple[Place, ...] = (
    Place("India", "IN"),
    Place("USA", "US"),
    Place("UK", "GB"),
)

CITIES: dict[str, tuple[Place, ...]] = {
    "IN": (
        Place("Delhi", "Delhi"),
        Place("Mumbai", "Mumbai"),
        Place("Bengaluru", "Bengaluru"),
        Place("Kolkata", "Kolkata"),
    ),
    "US": (
        Place("New York", "New York"),
        Place("Los Angeles", "Los Angeles"),
        Place("Chicago", "Chicago"),
        Place("Houston", "Houston"),
    ),
    "GB": (
        Place("London", "London"),
        Place("Manchester", "Manchester"),
        Place("Birmingham", "Birmingham"),
        Place("Glasgow", "Glasgow"),
    ),
}


def countries() -> tuple[Place, ...]:
    return COUNTRIES


def cities_for(country: str) -> tuple[Place, ...]:
    """Cities for a country code; empty for unknown codes."""
    return CITIES.get(country, ())


def default_city(country: str) -> str:
    """First city of ``country``, or ``""`` when it has none."""
    cities = cities_for(country)
    return cities[0].value if cities else ""


def is_known_place(country: str, city: str) -> bool:
    return any(place.value == city for place in cities_for(country))

"""Current weather from the OpenWeatherMap API, normalized to ``FetchOutcome``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from weather_glance.datasources.openweather.client import (
    COD_OK,
    COD_UNAUTHORIZED,
    NOT_FOUND_MARKER,
    OPENWEATHER_API,
    build_params,
)
from weather_glance.datasources.openweather.models import CurrentWeatherResponse
from weather_glance.exceptions import TransportError
from weather_glance.renderers.weather_utils import f_to_c
from weather_glance.schemas import (
    Coordinates,
    FetchError,
    FetchOutcome,
    UnitPreference,
    WeatherReading,
)

if TYPE_CHECKING:
    from weather_glance.services.http import HttpFetcher

logger = logging.getLogger(__name__)

GENERIC_API_ERROR = "Unable to load weather data"


def _cod(body: dict[str, Any]) -> int | None:
    """The body's ``cod`` as an int (the API sends both 200 and "404")."""
    try:
        return int(body.get("cod"))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def classify_error(body: dict[str, Any]) -> FetchError:
    """
    Map a non-success body to a ``FetchError``.

    Unauthorized wins over the message text; after that a "not found"
    message means the place query matched nothing.
    """
    message = str(body.get("message") or "").strip()
    if _cod(body) == COD_UNAUTHORIZED:
        return FetchError.invalid_api_key(message or "Invalid API key")
    if NOT_FOUND_MARKER in message.lower():
        return FetchError.place_not_found(message)
    return FetchError.unknown_api_error(message or GENERIC_API_ERROR)


def to_reading(response: CurrentWeatherResponse, unit: UnitPreference) -> WeatherReading:
    """Normalize a success response; imperial temperatures go back to Celsius."""
    temp = response.main.temp
    if unit == UnitPreference.IMPERIAL:
        temp = f_to_c(temp)
    return WeatherReading(
        location_name=response.name,
        country_code=response.sys.country,
        latitude=response.coord.lat,
        longitude=response.coord.lon,
        temperature_celsius=temp,
        condition_main=response.primary.main,
        condition_description=response.primary.description,
    )


def parse_current_weather(body: Any, unit: UnitPreference) -> FetchOutcome:
    """
    Interpret a decoded current-weather body.

    Args:
        body: Decoded JSON from the API.
        unit: The ``units`` code the request was sent with.

    Returns:
        ``FetchOutcome`` with a reading, or a classified error.
    """
    if not isinstance(body, dict):
        return FetchOutcome.err(
            FetchError.unknown_api_error(f"Malformed weather response: {type(body).__name__}")
        )

    if _cod(body) != COD_OK:
        return FetchOutcome.err(classify_error(body))

    try:
        response = CurrentWeatherResponse.model_validate(body)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in e["loc"]) for e in exc.errors())
        return FetchOutcome.err(
            FetchError.unknown_api_error(f"Malformed weather response: missing or invalid {fields}")
        )
    return FetchOutcome.ok(to_reading(response, unit))


async def fetch_current(
    fetcher: HttpFetcher,
    api_key: str,
    unit: UnitPreference,
    *,
    coords: Coordinates | None = None,
    query: str | None = None,
    url: str = OPENWEATHER_API,
) -> FetchOutcome:
    """
    One GET to the current-weather endpoint, by coordinates or place query.

    Transport failures come back as ``NetworkFailure``; nothing is raised.
    """
    params = build_params(api_key, unit, coords=coords, query=query)
    try:
        body = await fetcher.get(url, params)
    except TransportError as exc:
        logger.warning("Weather request failed: %s", exc)
        return FetchOutcome.err(FetchError.network_failure(str(exc)))
    except Exception as exc:
        logger.exception("Weather request raised an unexpected error")
        return FetchOutcome.err(FetchError.network_failure(str(exc) or type(exc).__name__))

    outcome = parse_current_weather(body, unit)
    if outcome.error is not None:
        logger.warning("Weather API error (%s): %s", outcome.error.kind, outcome.error.message)
    return outcome

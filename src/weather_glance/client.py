"""
Weather client: resolve a location, fetch current weather, normalize.

``fetch_weather`` is the single entry point. It never raises; every failure
comes back as a ``FetchOutcome`` carrying a classified ``FetchError``::

    client = WeatherClient(api_key, FixedLocationProvider(coords))
    outcome = await client.fetch_weather(GpsSelector(), UnitPreference.METRIC)
    if outcome.is_ok:
        print(outcome.reading.temperature_celsius)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from weather_glance.config import DEFAULT_API_KEY_MIN_LENGTH, has_plausible_api_key
from weather_glance.datasources.openweather import OPENWEATHER_API, fetch_current
from weather_glance.exceptions import LocationUnavailableError
from weather_glance.schemas import (
    FetchError,
    FetchOutcome,
    GpsSelector,
    LocationSelector,
    ManualSelector,
    PermissionStatus,
    UnitPreference,
)
from weather_glance.services.http import RequestsFetcher, create_session

if TYPE_CHECKING:
    from weather_glance.config import Settings
    from weather_glance.location import LocationProvider
    from weather_glance.services.http import HttpFetcher

logger = logging.getLogger(__name__)


class WeatherClient:
    """Location- and unit-aware current weather fetcher.

    At most one network call per ``fetch_weather``; no retries.
    """

    def __init__(
        self,
        api_key: str | None,
        location_provider: LocationProvider,
        fetcher: HttpFetcher | None = None,
        *,
        api_url: str = OPENWEATHER_API,
        api_key_min_length: int = DEFAULT_API_KEY_MIN_LENGTH,
    ) -> None:
        self._api_key = api_key.strip() if api_key else None
        self.location_provider = location_provider
        self.fetcher: HttpFetcher = fetcher or RequestsFetcher()
        self.api_url = api_url
        self.api_key_min_length = api_key_min_length

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        location_provider: LocationProvider,
        fetcher: HttpFetcher | None = None,
    ) -> WeatherClient:
        """Build a client from ``Settings``, honouring its request timeout."""
        if fetcher is None:
            fetcher = RequestsFetcher(create_session(timeout=settings.request_timeout))
        return cls(
            settings.api_key_value,
            location_provider,
            fetcher,
            api_url=settings.api_url,
            api_key_min_length=settings.api_key_min_length,
        )

    @property
    def has_valid_api_key(self) -> bool:
        return has_plausible_api_key(self._api_key, self.api_key_min_length)

    async def fetch_weather(
        self, selector: LocationSelector, unit: UnitPreference
    ) -> FetchOutcome:
        """
        Fetch current weather for ``selector`` in ``unit``.

        Args:
            selector: GPS or a manual country/city.
            unit: Requested unit; the reading is stored in Celsius either way.

        Returns:
            ``FetchOutcome.ok(reading)`` or ``FetchOutcome.err(error)``.
        """
        api_key = self._api_key
        if api_key is None or not self.has_valid_api_key:
            logger.warning("API key missing or shorter than %d chars", self.api_key_min_length)
            return FetchOutcome.err(
                FetchError.invalid_api_key("API key is missing or malformed")
            )

        if isinstance(selector, GpsSelector):
            return await self._fetch_gps(api_key, unit)
        if isinstance(selector, ManualSelector):
            logger.debug("Fetching weather for %s", selector.query)
            return await fetch_current(
                self.fetcher, api_key, unit, query=selector.query, url=self.api_url
            )
        raise TypeError(f"Unsupported location selector: {selector!r}")

    async def _fetch_gps(self, api_key: str, unit: UnitPreference) -> FetchOutcome:
        permission = await self.location_provider.request_foreground_permission()
        if permission != PermissionStatus.GRANTED:
            logger.info("Foreground location permission denied")
            return FetchOutcome.err(FetchError.permission_denied())

        try:
            coords = await self.location_provider.get_current_coordinates()
        except LocationUnavailableError as exc:
            logger.warning("Location unavailable: %s", exc)
            return FetchOutcome.err(FetchError.location_unavailable(str(exc)))
        except Exception as exc:
            logger.exception("Location provider failed")
            return FetchOutcome.err(FetchError.location_unavailable(str(exc)))

        logger.debug("Fetching weather for (%s, %s)", coords.lat, coords.lon)
        return await fetch_current(self.fetcher, api_key, unit, coords=coords, url=self.api_url)

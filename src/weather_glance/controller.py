"""
Event dispatch for the weather screen.

Each user action is an explicit call that updates state and then fetches::

    controller = WeatherController(client)
    await controller.refresh()                      # initial load
    await controller.on_mode_changed(use_gps=False)
    await controller.on_location_changed("GB")      # city -> London

Concurrent calls are fine: a fetch that finishes after a newer one started
completes normally, but its outcome is discarded by the reducer.
"""

from __future__ import annotations

import itertools
import logging
from typing import TYPE_CHECKING

from weather_glance.state import (
    AppState,
    Event,
    FetchCompleted,
    FetchStarted,
    LocationChanged,
    ModeChanged,
    UnitChanged,
    reduce,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from weather_glance.client import WeatherClient
    from weather_glance.config import Settings
    from weather_glance.schemas import UnitPreference

logger = logging.getLogger(__name__)


class WeatherController:
    """Holds the current ``AppState`` and drives ``WeatherClient``."""

    def __init__(
        self,
        client: WeatherClient,
        state: AppState | None = None,
        on_change: Callable[[AppState], None] | None = None,
    ) -> None:
        self.client = client
        self.state = state or AppState()
        self.on_change = on_change
        self._tokens = itertools.count(self.state.generation + 1)

    @classmethod
    def from_settings(
        cls,
        client: WeatherClient,
        settings: Settings,
        on_change: Callable[[AppState], None] | None = None,
    ) -> WeatherController:
        """Start from the configured default place and unit."""
        state = AppState(
            country=settings.default_country,
            city=settings.default_city,
            unit=settings.default_unit,
        )
        return cls(client, state, on_change)

    def dispatch(self, event: Event) -> AppState:
        """Apply ``event`` and notify ``on_change`` if the state changed."""
        new_state = reduce(self.state, event)
        if new_state is not self.state:
            self.state = new_state
            if self.on_change is not None:
                self.on_change(new_state)
        return self.state

    async def refresh(self) -> AppState:
        """Fetch for the current selector and unit under a fresh generation token."""
        token = next(self._tokens)
        self.dispatch(FetchStarted(token))
        selector, unit = self.state.selector, self.state.unit

        outcome = await self.client.fetch_weather(selector, unit)

        if token != self.state.generation:
            logger.debug("Discarding stale fetch %d (current %d)", token, self.state.generation)
        return self.dispatch(FetchCompleted(token, outcome))

    async def on_mode_changed(self, use_gps: bool) -> AppState:
        self.dispatch(ModeChanged(use_gps))
        return await self.refresh()

    async def on_location_changed(self, country: str, city: str | None = None) -> AppState:
        self.dispatch(LocationChanged(country, city))
        return await self.refresh()

    async def on_unit_changed(self, unit: UnitPreference) -> AppState:
        self.dispatch(UnitChanged(unit))
        return await self.refresh()

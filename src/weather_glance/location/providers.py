"""
Location providers.

A ``LocationProvider`` answers two questions for GPS mode: may we use the
device location, and where is it. Mobile hosts wrap their platform API in
this protocol; two providers ship here:

- ``FixedLocationProvider`` - known coordinates (desktop hosts, tests).
- ``IpLocationProvider`` - approximate position from the public IP via
  ip-api.com, for machines without a GPS receiver.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

import requests

from weather_glance.exceptions import LocationUnavailableError
from weather_glance.schemas import Coordinates, PermissionStatus
from weather_glance.services.http import session

logger = logging.getLogger(__name__)

IP_API_URL = "http://ip-api.com/json/"
IP_API_FIELDS = "status,message,lat,lon"


class LocationProvider(Protocol):
    """Permission prompt plus current-position lookup."""

    async def request_foreground_permission(self) -> PermissionStatus:
        """Ask for foreground location access. May wait on the user indefinitely."""
        ...

    async def get_current_coordinates(self) -> Coordinates:
        """
        Current position.

        Raises:
            LocationUnavailableError: If no fix can be obtained.
        """
        ...


class FixedLocationProvider:
    """Always reports the same coordinates (or none at all)."""

    def __init__(
        self,
        coords: Coordinates | None,
        permission: PermissionStatus = PermissionStatus.GRANTED,
    ) -> None:
        self.coords = coords
        self.permission = permission

    async def request_foreground_permission(self) -> PermissionStatus:
        return self.permission

    async def get_current_coordinates(self) -> Coordinates:
        if self.coords is None:
            raise LocationUnavailableError("No coordinates configured")
        return self.coords


class IpLocationProvider:
    """Approximate position from the caller's public IP address.

    There is no OS prompt for this, so permission is always granted.
    """

    def __init__(self, http: requests.Session | None = None, url: str = IP_API_URL) -> None:
        self._session = http or session
        self.url = url

    async def request_foreground_permission(self) -> PermissionStatus:
        return PermissionStatus.GRANTED

    async def get_current_coordinates(self) -> Coordinates:
        data = await asyncio.to_thread(self._lookup)
        if data.get("status") != "success":
            raise LocationUnavailableError(
                f"IP geolocation failed: {data.get('message') or 'unknown error'}"
            )
        try:
            return Coordinates(lat=data["lat"], lon=data["lon"])
        except (KeyError, ValueError) as exc:
            msg = f"IP geolocation returned bad coordinates: {exc}"
            raise LocationUnavailableError(msg) from exc

    def _lookup(self) -> dict[str, Any]:
        try:
            resp = self._session.get(self.url, params={"fields": IP_API_FIELDS})
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as exc:
            raise LocationUnavailableError(f"IP geolocation request failed: {exc}") from exc
        if not isinstance(data, dict):
            raise LocationUnavailableError("IP geolocation returned a non-object body")
        logger.debug("IP geolocation: status=%s", data.get("status"))
        return data

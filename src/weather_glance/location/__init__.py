"""Location resolution for GPS mode."""

from weather_glance.location.providers import (
    FixedLocationProvider,
    IpLocationProvider,
    LocationProvider,
)

__all__ = ["FixedLocationProvider", "IpLocationProvider", "LocationProvider"]

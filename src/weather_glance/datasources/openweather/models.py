"""Response schema for the OpenWeatherMap current-weather endpoint.

Only the fields we read are modelled; everything else is ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Coord(BaseModel):
    lat: float
    lon: float


class Condition(BaseModel):
    """One entry of the ``weather`` array."""

    main: str
    description: str = ""


class MainBlock(BaseModel):
    temp: float


class SysBlock(BaseModel):
    country: str = ""


class CurrentWeatherResponse(BaseModel):
    """A ``cod == 200`` body."""

    name: str
    coord: Coord
    main: MainBlock
    weather: list[Condition] = Field(..., min_length=1)
    sys: SysBlock = Field(default_factory=SysBlock)

    @property
    def primary(self) -> Condition:
        """The first (primary) weather condition."""
        return self.weather[0]

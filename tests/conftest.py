"""Shared fixtures."""

from __future__ import annotations

import pytest
from fakes import VALID_KEY, FakeFetcher, FakeLocationProvider

from weather_glance.client import WeatherClient


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def location() -> FakeLocationProvider:
    return FakeLocationProvider()


@pytest.fixture
def client(fetcher: FakeFetcher, location: FakeLocationProvider) -> WeatherClient:
    return WeatherClient(VALID_KEY, location, fetcher)

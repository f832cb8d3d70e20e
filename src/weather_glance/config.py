"""
Application settings.

Values come from the environment (prefix ``WEATHER_``) or a local ``.env``
file. The only secret is the OpenWeatherMap API key::

    export WEATHER_API_KEY=0123456789abcdef0123456789abcdef
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_glance.datasources.openweather.client import OPENWEATHER_API
from weather_glance.schemas import UnitPreference


# OpenWeatherMap keys are 32 hex chars; anything much shorter is a typo.
DEFAULT_API_KEY_MIN_LENGTH = 30


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "weather-glance"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    api_key: SecretStr | None = None
    api_key_min_length: int = Field(default=DEFAULT_API_KEY_MIN_LENGTH, ge=1)
    api_url: str = OPENWEATHER_API
    request_timeout: float = Field(default=30.0, gt=0)

    default_country: str = "IN"
    default_city: str = "Delhi"
    default_unit: UnitPreference = UnitPreference.METRIC

    @property
    def api_key_value(self) -> str | None:
        """Plain API key, or None when unset."""
        return self.api_key.get_secret_value() if self.api_key is not None else None


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()


def has_plausible_api_key(
    api_key: str | None, min_length: int = DEFAULT_API_KEY_MIN_LENGTH
) -> bool:
    """Minimal sanity check: present and at least ``min_length`` chars."""
    if not api_key:
        return False
    return len(api_key.strip()) >= min_length


def configure_logging(settings: Settings | None = None) -> None:
    """Set up root logging from settings (DEBUG when ``debug`` is on)."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

"""
Shared HTTP client.

Provides a pre-configured ``requests.Session`` with a default timeout and a
User-Agent, and ``RequestsFetcher``, the default ``HttpFetcher`` built on it.

Every fetch is a single attempt: the mounted adapter never retries, so a
failed request surfaces immediately and re-fetching is the caller's call.

Usage::

    from weather_glance.services.http import RequestsFetcher

    fetcher = RequestsFetcher()
    body = await fetcher.get("https://api.example.com/v1/data", {"q": "x"})
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from weather_glance.exceptions import TransportError

logger = logging.getLogger(__name__)

#: Single attempt, no backoff. Status codes are left for the caller to read.
DEFAULT_RETRY = Retry(
    total=None,
    connect=0,
    read=0,
    status=0,
    other=0,
    redirect=3,
    raise_on_status=False,
)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = "weather-glance/0.1"

# Query params that must never reach the logs.
_SECRET_PARAMS = frozenset({"appid", "api_key", "key"})


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the no-retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session - import and use directly.
session: requests.Session = create_session()


def redact_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Copy of ``params`` with secrets masked, for logging."""
    return {k: ("***" if k in _SECRET_PARAMS else v) for k, v in params.items()}


class HttpFetcher(Protocol):
    """URL + query params -> decoded JSON body."""

    async def get(self, url: str, params: Mapping[str, Any]) -> Any:
        """
        Fetch ``url`` and decode the JSON body.

        The body is returned whatever the HTTP status; APIs like
        OpenWeatherMap report errors inside it.

        Raises:
            TransportError: On DNS/connection/timeout failures or a non-JSON body.
        """
        ...


class RequestsFetcher:
    """``HttpFetcher`` backed by a ``requests.Session``.

    The blocking call runs in a worker thread so the event loop stays free.
    """

    def __init__(self, http: requests.Session | None = None) -> None:
        self._session = http or session

    async def get(self, url: str, params: Mapping[str, Any]) -> Any:
        return await asyncio.to_thread(self._get_sync, url, dict(params))

    def _get_sync(self, url: str, params: dict[str, Any]) -> Any:
        logger.debug("GET %s params=%s", url, redact_params(params))
        try:
            resp = self._session.get(url, params=params)
        except requests.RequestException as exc:
            raise TransportError(f"Request to {url} failed: {exc.__class__.__name__}") from exc
        try:
            return resp.json()
        except ValueError as exc:
            # requests.JSONDecodeError subclasses ValueError
            raise TransportError(
                f"Response from {url} is not JSON (HTTP {resp.status_code})"
            ) from exc

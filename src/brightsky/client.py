"""
Bright Sky API clients.

``BrightSky`` issues blocking requests, ``AsyncBrightSky`` awaits them. Both
expose the same four endpoints and share validation and URL building::

    from brightsky import BrightSky

    client = BrightSky()
    body = client.weather({"date": "2023-04-01", "lat": "52.52", "lon": "13.40"})

Bodies are returned exactly as decoded from JSON, whatever the status code.
Pass ``strict=True`` to get validated ``brightsky.schemas`` records instead.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Coroutine, Mapping
from dataclasses import dataclass
from typing import Any

from brightsky import decode
from brightsky.config import settings
from brightsky.errors import ConfigurationError, ValidationError, ValidationReason
from brightsky.query import encode, is_empty
from brightsky.schemas import (
    CurrentWeatherParams,
    CurrentWeatherResponse,
    SourcesParams,
    SourcesResponse,
    SynopParams,
    SynopResponse,
    WeatherParams,
    WeatherResponse,
)
from brightsky.services import AsyncTransport, HTTPResponse, Transport
from brightsky.services import async_http, http

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Accept": "application/json; charset=UTF-8"}

STATION_KEYS = ("dwd_station_id", "wmo_station_id", "source_id")


def has_location(params: Mapping[str, Any]) -> bool:
    """Both ``lat`` and ``lon`` are given (``0`` counts)."""
    return not is_empty(params.get("lat")) and not is_empty(params.get("lon"))


def has_station(params: Mapping[str, Any]) -> bool:
    """At least one station or source id filter is non-empty."""
    return any(not is_empty(params.get(key)) for key in STATION_KEYS)


def require_location_or_station(params: Mapping[str, Any]) -> None:
    if not has_location(params) and not has_station(params):
        raise ValidationError(ValidationReason.LOCATION_OR_STATION_REQUIRED)


def require_station(params: Mapping[str, Any]) -> None:
    if not has_station(params):
        raise ValidationError(ValidationReason.STATION_REQUIRED)


@dataclass(frozen=True)
class Endpoint:
    """One API path with its parameter rule and strict decoder."""

    path: str
    decoder: Callable[[Any], Any]
    validate: Callable[[Mapping[str, Any]], None] | None = None


CURRENT_WEATHER = Endpoint("/current_weather", decode.decode_current_weather)
WEATHER = Endpoint("/weather", decode.decode_weather, require_location_or_station)
SOURCES = Endpoint("/sources", decode.decode_sources, require_location_or_station)
SYNOP = Endpoint("/synop", decode.decode_synop, require_station)


class _ClientBase:
    """Configuration and request preparation shared by both clients."""

    def __init__(
        self,
        base_url: str | None,
        transport: Any,
        default_transport: Any,
        strict: bool,
    ) -> None:
        if transport is None:
            transport = default_transport
        if transport is None:
            raise ConfigurationError()
        self._base_url = base_url or settings.base_url
        self._transport = transport
        self._strict = strict

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def strict(self) -> bool:
        return self._strict

    def build_url(self, path: str, params: Mapping[str, Any] | None) -> str:
        """
        Join base URL, path and encoded query.

        Unlike plain concatenation of ``base_url + path + "?" + query``, a
        trailing ``/`` on the base URL is stripped so the default
        ``https://api.brightsky.dev/`` never yields ``//current_weather``, and no
        ``?`` is appended when the encoded query is empty.
        """
        url = self._base_url.rstrip("/") + path
        query = encode(params)
        return f"{url}?{query}" if query else url

    def _prepare(
        self, endpoint: Endpoint, params: Mapping[str, Any] | None, options: dict[str, Any]
    ) -> tuple[str, dict[str, Any]]:
        params = params or {}
        if endpoint.validate is not None:
            endpoint.validate(params)
        url = self.build_url(endpoint.path, params)
        request_options: dict[str, Any] = {"method": "GET", "headers": dict(DEFAULT_HEADERS)}
        request_options.update(options)
        logger.debug("GET %s", url)
        return url, request_options

    def _finish(self, endpoint: Endpoint, url: str, response: HTTPResponse, payload: Any) -> Any:
        # requests and httpx expose status_code; aiohttp and urllib3 expose status.
        status = getattr(response, "status_code", getattr(response, "status", None))
        if isinstance(status, int) and not 200 <= status < 300:
            logger.warning("Bright Sky answered %s for %s", status, url)
        if self._strict:
            return endpoint.decoder(payload)
        return payload


class BrightSky(_ClientBase):
    """
    Blocking client.

    Args:
        base_url: API root (defaults to ``settings.base_url``).
        transport: Callable ``(url, **options) -> response``. Defaults to
            ``brightsky.services.http.default_transport``.
        strict: Validate bodies into ``brightsky.schemas`` records.

    Raises:
        ConfigurationError: If no transport is injected and no default exists.
    """

    def __init__(
        self,
        base_url: str | None = None,
        transport: Transport | None = None,
        *,
        strict: bool = False,
    ) -> None:
        super().__init__(base_url, transport, http.default_transport, strict)

    def _get(self, endpoint: Endpoint, params: Mapping[str, Any] | None, options: dict[str, Any]) -> Any:
        url, request_options = self._prepare(endpoint, params, options)
        response = self._transport(url, **request_options)
        return self._finish(endpoint, url, response, response.json())

    def current_weather(
        self, params: CurrentWeatherParams | None = None, **options: Any
    ) -> dict[str, Any] | CurrentWeatherResponse:
        """Current weather near a point or at the given stations."""
        return self._get(CURRENT_WEATHER, params, options)

    def weather(
        self, params: WeatherParams | None = None, **options: Any
    ) -> dict[str, Any] | WeatherResponse:
        """
        Hourly observations and forecasts.

        Requires ``lat``/``lon`` or a station/source id filter.

        Raises:
            ValidationError: Before any request, if neither is given.
        """
        return self._get(WEATHER, params, options)

    def sources(
        self, params: SourcesParams | None = None, **options: Any
    ) -> dict[str, Any] | SourcesResponse:
        """Stations and grid points; same filter rule as ``weather``."""
        return self._get(SOURCES, params, options)

    def synop(
        self, params: SynopParams | None = None, **options: Any
    ) -> dict[str, Any] | SynopResponse:
        """
        Raw SYNOP observations.

        Requires a station/source id filter; ``lat``/``lon`` are not enough.

        Raises:
            ValidationError: Before any request, if no id filter is given.
        """
        return self._get(SYNOP, params, options)


class AsyncBrightSky(_ClientBase):
    """
    asyncio client.

    Same arguments as ``BrightSky``, except the transport returns an
    awaitable and defaults to ``brightsky.services.async_http.default_transport``.

    Endpoint methods validate their parameters when called and return a
    coroutine for the request, so a ``ValidationError`` surfaces before
    anything is awaited.
    """

    def __init__(
        self,
        base_url: str | None = None,
        transport: AsyncTransport | None = None,
        *,
        strict: bool = False,
    ) -> None:
        super().__init__(base_url, transport, async_http.default_transport, strict)

    async def _send(self, endpoint: Endpoint, url: str, request_options: dict[str, Any]) -> Any:
        response = await self._transport(url, **request_options)
        payload = response.json()
        if inspect.isawaitable(payload):
            payload = await payload
        return self._finish(endpoint, url, response, payload)

    def _get(
        self, endpoint: Endpoint, params: Mapping[str, Any] | None, options: dict[str, Any]
    ) -> Coroutine[Any, Any, Any]:
        url, request_options = self._prepare(endpoint, params, options)
        return self._send(endpoint, url, request_options)

    def current_weather(
        self, params: CurrentWeatherParams | None = None, **options: Any
    ) -> Coroutine[Any, Any, dict[str, Any] | CurrentWeatherResponse]:
        return self._get(CURRENT_WEATHER, params, options)

    def weather(
        self, params: WeatherParams | None = None, **options: Any
    ) -> Coroutine[Any, Any, dict[str, Any] | WeatherResponse]:
        return self._get(WEATHER, params, options)

    def sources(
        self, params: SourcesParams | None = None, **options: Any
    ) -> Coroutine[Any, Any, dict[str, Any] | SourcesResponse]:
        return self._get(SOURCES, params, options)

    def synop(
        self, params: SynopParams | None = None, **options: Any
    ) -> Coroutine[Any, Any, dict[str, Any] | SynopResponse]:
        return self._get(SYNOP, params, options)

"""Default asyncio transport built on ``httpx``."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from brightsky.config import settings
from brightsky.services import AsyncTransport

logger = logging.getLogger(__name__)


async def httpx_transport(url: str, **options: Any) -> httpx.Response:
    """Issue a request through a short-lived ``httpx.AsyncClient``.

    ``method`` defaults to GET. ``timeout`` configures the client (httpx's
    own default applies when it is omitted); every other option goes to
    ``AsyncClient.request``.
    """
    method = options.pop("method", "GET")
    client_kwargs: dict[str, Any] = {"headers": {"User-Agent": settings.user_agent}}
    if "timeout" in options:
        client_kwargs["timeout"] = options.pop("timeout")
    logger.debug("%s %s", method, url)
    async with httpx.AsyncClient(**client_kwargs) as client:
        response = await client.request(method, url, **options)
        await response.aread()
    return response


#: Transport used by ``AsyncBrightSky`` when none is injected.
default_transport: AsyncTransport | None = httpx_transport

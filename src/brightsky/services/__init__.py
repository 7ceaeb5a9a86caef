"""
HTTP transports.

A transport is any callable ``transport(url, **options)`` whose result has a
``json()`` method. The clients call it with ``method="GET"`` and ``headers=``
plus whatever extra options the caller passed to the endpoint method.

- http.py        - blocking default (requests)
- async_http.py  - asyncio default (httpx)
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Any, Protocol


class HTTPResponse(Protocol):
    """
    The part of a response object the clients rely on.

    Only ``json()`` is required; it may return the body or an awaitable of it.
    The HTTP status is read from ``status_code`` (requests, httpx) or, failing
    that, ``status`` (aiohttp, urllib3). A non-2xx status is logged as a
    warning and the body is still returned. Neither attribute is required.
    """

    def json(self) -> Any: ...


class Transport(Protocol):
    def __call__(self, url: str, **options: Any) -> HTTPResponse: ...


class AsyncTransport(Protocol):
    def __call__(self, url: str, **options: Any) -> Awaitable[HTTPResponse]: ...


__all__ = ["AsyncTransport", "HTTPResponse", "Transport"]

"""
Default blocking transport built on ``requests``.

Provides a pre-configured ``requests.Session`` and a transport function with
the calling convention the clients expect::

    transport(url, method="GET", headers={...}, **options) -> response

The session does not retry unless asked to and sets no timeout of its own.
Callers who want hardening can build their own session and pass ``timeout=``
per call::

    from urllib3.util.retry import Retry
    from brightsky.services.http import create_session

    s = create_session(retry=Retry(total=3, backoff_factor=1))
    client = BrightSky(transport=lambda url, **kw: s.request(kw.pop("method"), url, **kw))
    client.weather({...}, timeout=10)
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from brightsky.config import settings
from brightsky.services import Transport

logger = logging.getLogger(__name__)


def create_session(retry: Retry | None = None) -> requests.Session:
    """
    Build a ``requests.Session`` with an HTTP adapter mounted.

    Timeouts are per request: pass ``timeout=`` to the endpoint method and it
    reaches ``Session.request`` unchanged.

    Args:
        retry: Retry strategy for the adapter (defaults to no retries).
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry) if retry is not None else HTTPAdapter()
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = settings.user_agent
    return s


#: Module-level session used by ``requests_transport``.
session: requests.Session = create_session()


def requests_transport(url: str, **options: Any) -> requests.Response:
    """Issue a request through the module session.

    ``method`` defaults to GET; every other option goes to
    ``requests.Session.request`` unchanged.
    """
    method = options.pop("method", "GET")
    logger.debug("%s %s", method, url)
    return session.request(method, url, **options)


#: Transport used by ``BrightSky`` when none is injected.
default_transport: Transport | None = requests_transport

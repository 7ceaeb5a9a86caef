"""Bright Sky - typed client for the public Bright Sky weather API.

Architecture::

    query.py       Parameter mapping -> query string (drops empty values)
    client.py      BrightSky / AsyncBrightSky: validate, encode, GET, decode
    schemas.py     Enums, request parameter TypedDicts, response records
    decode.py      Opt-in strict decoding of response bodies
    errors.py      ConfigurationError, ValidationError, DecodeError
    config.py      Environment-driven settings (BRIGHTSKY_*)
    services/      Default HTTP transports (requests, httpx)

Data flow: params -> client (validate) -> query.encode -> transport -> JSON body

Any callable ``transport(url, **options)`` returning an object with a
``json()`` method can stand in for the default transports.
"""

__version__ = "0.1.0"

from brightsky.client import AsyncBrightSky, BrightSky
from brightsky.config import Settings
from brightsky.errors import (
    BrightSkyError,
    ConfigurationError,
    DecodeError,
    ValidationError,
    ValidationReason,
)
from brightsky.schemas import Condition, Icon, SourceType, Units

__all__ = [
    "AsyncBrightSky",
    "BrightSky",
    "BrightSkyError",
    "Condition",
    "ConfigurationError",
    "DecodeError",
    "Icon",
    "Settings",
    "SourceType",
    "Units",
    "ValidationError",
    "ValidationReason",
    "__version__",
]

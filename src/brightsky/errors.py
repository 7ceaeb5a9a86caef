"""Exceptions raised by the Bright Sky client.

Only configuration, parameter and strict-decoding problems are raised here.
Transport failures (connection errors, invalid JSON) reach the caller as
whatever the transport raised.
"""

from __future__ import annotations

from enum import StrEnum

NO_TRANSPORT_MESSAGE = "The `fetch` API is not available. It must be specified."


class ValidationReason(StrEnum):
    """Which filter rule a request failed, with its literal message."""

    LOCATION_OR_STATION_REQUIRED = (
        "Please supply lat/lon or dwd_station_id or wmo_station_id or source_id"
    )
    STATION_REQUIRED = "Please supply dwd_station_id or wmo_station_id or source_id"


class BrightSkyError(Exception):
    """Base class for errors raised by this package."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(BrightSkyError):
    """No HTTP transport was injected and none is available by default."""

    def __init__(self, message: str = NO_TRANSPORT_MESSAGE) -> None:
        super().__init__(message)


class ValidationError(BrightSkyError, ValueError):
    """Request parameters do not satisfy an endpoint's required filters."""

    def __init__(self, reason: ValidationReason) -> None:
        super().__init__(reason.value)
        self.reason = reason


class DecodeError(BrightSkyError, ValueError):
    """A response body did not match the expected record schema."""

"""Shared fixtures: transport stubs and sample API bodies."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

# =============================================================================
# Sample API records
# =============================================================================


@pytest.fixture
def sample_source() -> dict[str, Any]:
    """A synop station 16 km from central Berlin."""
    return {
        "id": 6007,
        "dwd_station_id": "00427",
        "wmo_station_id": "10385",
        "station_name": "Berlin-Schönefeld",
        "observation_type": "synop",
        "first_record": "2023-03-31T00:00:00+00:00",
        "last_record": "2023-04-01T18:00:00+00:00",
        "lat": 52.3807,
        "lon": 13.5306,
        "height": 46.0,
        "distance": 16365.0,
    }


@pytest.fixture
def sample_weather() -> dict[str, Any]:
    """One hourly record from /weather."""
    return {
        "timestamp": "2023-04-01T18:00:00+00:00",
        "source_id": 6007,
        "cloud_cover": 88,
        "condition": "rain",
        "dew_point": 4.3,
        "icon": "cloudy",
        "pressure_msl": 1003.2,
        "relative_humidity": 84,
        "temperature": 6.9,
        "visibility": 31000,
        "precipitation": 0.2,
        "sunshine": 0,
        "wind_direction": 250,
        "wind_speed": 14.4,
        "wind_gust_direction": 260,
        "wind_gust_speed": 31.7,
        "fallback_source_ids": {"cloud_cover": 6011},
    }


@pytest.fixture
def sample_current_weather() -> dict[str, Any]:
    """The record /current_weather answers with."""
    return {
        "timestamp": "2023-04-01T18:30:00+00:00",
        "source_id": 6007,
        "condition": "dry",
        "icon": "partly-cloudy-night",
        "temperature": 6.2,
        "precipitation_10": 0.0,
        "precipitation_30": 0.0,
        "precipitation_60": 0.1,
        "wind_speed_10": 11.2,
        "wind_speed_30": 12.0,
        "wind_speed_60": 13.1,
    }


# =============================================================================
# Transport stubs
# =============================================================================


class FakeResponse:
    """Minimal stand-in for a requests/httpx response."""

    def __init__(self, body: Any, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code

    def json(self) -> Any:
        return self.body


@pytest.fixture
def fake_response() -> type[FakeResponse]:
    """Response factory: ``fake_response(body, status_code=200)``."""
    return FakeResponse


@pytest.fixture
def transport() -> MagicMock:
    """Blocking transport answering ``{"weather": [], "sources": []}``."""
    return MagicMock(return_value=FakeResponse({"weather": [], "sources": []}))


@pytest.fixture
def async_transport() -> AsyncMock:
    """Async transport answering ``{"weather": [], "sources": []}``."""
    return AsyncMock(return_value=FakeResponse({"weather": [], "sources": []}))

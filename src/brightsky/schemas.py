"""
Data model for the Bright Sky API.

Request parameters are plain ``TypedDict`` mappings whose keys are the wire
names. Response records are frozen pydantic models; the client only builds
them when strict decoding is requested (see ``brightsky.decode``).

Enum fields are open: known values decode to the enum member, anything else
the server starts sending is kept as a plain string.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Annotated, Any, Required, TypedDict

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Enumerations
# =============================================================================


class Condition(StrEnum):
    """Dominant weather condition."""

    DRY = "dry"
    FOG = "fog"
    RAIN = "rain"
    SLEET = "sleet"
    SNOW = "snow"
    HAIL = "hail"
    THUNDERSTORM = "thunderstorm"


class Icon(StrEnum):
    """Pictogram identifier suited for rendering the weather."""

    CLEAR_DAY = "clear-day"
    CLEAR_NIGHT = "clear-night"
    PARTLY_CLOUDY_DAY = "partly-cloudy-day"
    PARTLY_CLOUDY_NIGHT = "partly-cloudy-night"
    CLOUDY = "cloudy"
    FOG = "fog"
    WIND = "wind"
    RAIN = "rain"
    SLEET = "sleet"
    SNOW = "snow"
    HAIL = "hail"
    THUNDERSTORM = "thunderstorm"


class SourceType(StrEnum):
    """Kind of observation or forecast a source provides."""

    FORECAST = "forecast"
    SYNOP = "synop"
    CURRENT = "current"
    HISTORICAL = "historical"


class Units(StrEnum):
    """Unit system the server uses for numeric fields."""

    DWD = "dwd"
    SI = "si"


# Known values become enum members, unknown ones stay plain strings.
OpenCondition = Annotated[Condition | str, Field(union_mode="left_to_right")]
OpenIcon = Annotated[Icon | str, Field(union_mode="left_to_right")]
OpenSourceType = Annotated[SourceType | str, Field(union_mode="left_to_right")]


# =============================================================================
# Request parameters
# =============================================================================


class DefaultParams(TypedDict, total=False):
    """Filters shared by the weather endpoints."""

    last_date: str
    dwd_station_id: list[str]
    wmo_station_id: list[str]
    source_id: list[int]
    tz: str
    units: Units | str


class CurrentWeatherParams(DefaultParams, total=False):
    lat: str | float
    lon: str | float
    max_dist: int | float


class WeatherParams(DefaultParams, total=False):
    date: Required[str]
    lat: str | float
    lon: str | float
    max_dist: int | float


class SourcesParams(TypedDict, total=False):
    lat: str | float
    lon: str | float
    dwd_station_id: list[str]
    wmo_station_id: list[str]
    source_id: list[int]
    max_dist: int | float


class SynopParams(DefaultParams, total=False):
    date: Required[str]


# =============================================================================
# Response records
# =============================================================================


class Record(BaseModel):
    """Immutable API record that keeps fields it does not know about."""

    model_config = ConfigDict(frozen=True, extra="allow")


class Source(Record):
    """A weather station or forecast grid point."""

    id: int
    dwd_station_id: str | None = None
    wmo_station_id: str | None = None
    station_name: str | None = None
    observation_type: OpenSourceType | None = None
    first_record: datetime
    last_record: datetime
    lat: float
    lon: float
    height: float
    distance: float = Field(..., description="Distance from the queried point")


class BaseWeather(Record):
    """Fields shared by timeseries and current weather records."""

    timestamp: datetime
    source_id: int
    cloud_cover: float | None = None
    condition: OpenCondition | None = None
    dew_point: float | None = None
    icon: OpenIcon | None = None
    pressure_msl: float | None = None
    relative_humidity: float | None = None
    temperature: float | None = None
    visibility: float | None = None
    fallback_source_ids: dict[str, int] | None = None


class Weather(BaseWeather):
    """Hourly observation or forecast."""

    precipitation: float | None = None
    sunshine: float | None = None
    wind_direction: float | None = None
    wind_speed: float | None = None
    wind_gust_direction: float | None = None
    wind_gust_speed: float | None = None


class CurrentWeather(BaseWeather):
    """Latest conditions, with rolling 10/30/60 minute aggregates."""

    precipitation_10: float | None = None
    precipitation_30: float | None = None
    precipitation_60: float | None = None
    sunshine_10: float | None = None
    sunshine_30: float | None = None
    sunshine_60: float | None = None
    wind_direction_10: float | None = None
    wind_direction_30: float | None = None
    wind_direction_60: float | None = None
    wind_speed_10: float | None = None
    wind_speed_30: float | None = None
    wind_speed_60: float | None = None
    wind_gust_direction_10: float | None = None
    wind_gust_direction_30: float | None = None
    wind_gust_direction_60: float | None = None
    wind_gust_speed_10: float | None = None
    wind_gust_speed_30: float | None = None
    wind_gust_speed_60: float | None = None


class CurrentWeatherResponse(Record):
    weather: list[CurrentWeather]
    sources: list[Source]

    @field_validator("weather", mode="before")
    @classmethod
    def wrap_single_record(cls, v: Any) -> Any:
        """/current_weather answers with a single object rather than a list."""
        if isinstance(v, dict):
            return [v]
        return v


class WeatherResponse(Record):
    weather: list[Weather]
    sources: list[Source]


class SourcesResponse(Record):
    sources: list[Source]


SynopResponse = CurrentWeatherResponse

"""Strict decoding of response bodies into ``brightsky.schemas`` records."""

from __future__ import annotations

from typing import Any, TypeVar

import pydantic

from brightsky.errors import DecodeError
from brightsky.schemas import (
    CurrentWeatherResponse,
    Record,
    SourcesResponse,
    SynopResponse,
    WeatherResponse,
)

R = TypeVar("R", bound=Record)


def decode(model: type[R], payload: Any) -> R:
    """
    Validate ``payload`` against ``model``.

    Raises:
        DecodeError: If the payload does not fit the schema. The pydantic
            error is chained as ``__cause__``.
    """
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise DecodeError(f"Invalid {model.__name__}: {exc}") from exc


def decode_current_weather(payload: Any) -> CurrentWeatherResponse:
    return decode(CurrentWeatherResponse, payload)


def decode_weather(payload: Any) -> WeatherResponse:
    return decode(WeatherResponse, payload)


def decode_sources(payload: Any) -> SourcesResponse:
    return decode(SourcesResponse, payload)


def decode_synop(payload: Any) -> SynopResponse:
    return decode(SynopResponse, payload)

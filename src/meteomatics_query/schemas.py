"""
Domain models for Meteomatics queries.

Pydantic models for query inputs and per-request values. Responses from the
API are passed through unparsed, so there are no response models here.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator, model_validator

# ISO-8601 duration, e.g. PT1H, PT15M, P1D, P1DT12H
_DURATION_RE = re.compile(r"^P(?=\d|T\d)(\d+[YMWD])*(T(\d+[HMS])+)?$")

# =============================================================================
# Metrics
# =============================================================================


class Metric(StrEnum):
    """Weather metrics the client knows how to request.

    Declaration order is the order used by ``fetch_all``.
    """

    SNOW_PROBABILITY = "snow_probability"
    HUMIDITY = "humidity"
    TEMPERATURE = "temperature"
    CLEAR_SKY_RADIATION = "clear_sky_radiation"
    WIND_SPEED = "wind_speed"
    PRESSURE = "pressure"


# =============================================================================
# Query inputs
# =============================================================================


class Coordinates(BaseModel):
    """Geographic point the query is made for."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class DateRange(BaseModel):
    """Inclusive range of days covered by a query."""

    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    @field_validator("start", "end", mode="before")
    @classmethod
    def _drop_time(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return value.date()
        return value

    @model_validator(mode="after")
    def _check_order(self) -> DateRange:
        if self.end < self.start:
            raise ValueError(f"end {self.end} is before start {self.start}")
        return self


class Credentials(BaseModel):
    """HTTP Basic credentials for the Meteomatics API."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., min_length=1)
    password: SecretStr

    @field_validator("password")
    @classmethod
    def _password_not_empty(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("password must not be empty")
        return value


class QueryConfig(BaseModel):
    """Everything needed to build a request URL, minus the metric."""

    model_config = ConfigDict(frozen=True)

    coordinates: Coordinates
    date_range: DateRange
    frequency: str = "PT1H"
    base_url: str = "https://api.meteomatics.com"
    output_format: str = "json"

    @field_validator("frequency")
    @classmethod
    def _check_frequency(cls, value: str) -> str:
        if not _DURATION_RE.match(value):
            raise ValueError(f"not an ISO-8601 duration: {value!r}")
        return value

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


# =============================================================================
# Requests
# =============================================================================


class RequestDescriptor(BaseModel):
    """A fully built request for one metric."""

    model_config = ConfigDict(frozen=True)

    metric: Metric
    parameter: str
    url: str


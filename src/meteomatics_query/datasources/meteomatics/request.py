"""Request building for the Meteomatics time-series API.

URL layout::

    {base_url}/{start}Z--{end}Z:{frequency}/{parameter}/{lat},{lon}/{format}

Everything here is pure: no I/O, no credentials, same input → same URL.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from meteomatics_query.datasources.meteomatics import client
from meteomatics_query.schemas import Metric, RequestDescriptor

if TYPE_CHECKING:
    from meteomatics_query.schemas import DateRange, QueryConfig

# Metrics sampled at a given elevation: token and unit
_ELEVATION_PARAMS: dict[Metric, tuple[str, str]] = {
    Metric.HUMIDITY: (client.RELATIVE_HUMIDITY, client.UNIT_PERCENT),
    Metric.TEMPERATURE: (client.TEMPERATURE, client.UNIT_CELSIUS),
    Metric.WIND_SPEED: (client.WIND_SPEED, client.UNIT_KMH),
    Metric.PRESSURE: (client.PRESSURE, client.UNIT_HPA),
}

_FIXED_PARAMS: dict[Metric, str] = {
    Metric.SNOW_PROBABILITY: client.PROB_SNOWFALL,
    Metric.CLEAR_SKY_RADIATION: f"{client.CLEAR_SKY_RADIATION}:{client.UNIT_WATTS}",
}


def format_number(value: float) -> str:
    """Render a number as a plain decimal: ``8``, ``45.5``, ``0.00001``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def format_date_range(date_range: DateRange) -> str:
    """``2024-02-28Z--2024-03-01Z``"""
    start = date_range.start.isoformat()
    end = date_range.end.isoformat()
    return f"{start}Z--{end}Z"


def metric_parameter(metric: Metric | str, elevation: float | None = None) -> str:
    """
    Parameter token for a metric.

    Args:
        metric: Which metric to request.
        elevation: Height in meters; required for humidity, temperature,
            wind speed and pressure, ignored for the others.

    Raises:
        ValueError: Unknown metric, or missing elevation where one is needed.
    """
    metric = Metric(metric)
    if metric in _FIXED_PARAMS:
        return _FIXED_PARAMS[metric]

    if elevation is None:
        raise ValueError(f"{metric} requires an elevation")
    token, unit = _ELEVATION_PARAMS[metric]
    return f"{token}_{format_number(elevation)}m:{unit}"


def build_request_url(config: QueryConfig, parameter: str) -> str:
    """Compose the full request URL for one parameter token."""
    coords = config.coordinates
    location = f"{format_number(coords.latitude)},{format_number(coords.longitude)}"
    return (
        f"{config.base_url}/{format_date_range(config.date_range)}:{config.frequency}"
        f"/{parameter}/{location}/{config.output_format}"
    )


def build_request(
    config: QueryConfig, metric: Metric | str, elevation: float | None = None
) -> RequestDescriptor:
    """Build a self-contained request descriptor for one metric."""
    metric = Metric(metric)
    parameter = metric_parameter(metric, elevation)
    return RequestDescriptor(
        metric=metric, parameter=parameter, url=build_request_url(config, parameter)
    )

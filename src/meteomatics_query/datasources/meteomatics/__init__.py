"""Meteomatics weather API data source.

Builds time-series request URLs for six weather metrics and fetches them with
HTTP Basic authentication.

Public API:
  - query: WeatherQueryClient (per-metric fetches, fetch_all, fetch_all_settled)
  - request: build_request_url, build_request, metric_parameter, format_date_range
  - models: MetricResult
  - client: API URL, default frequency, parameter tokens
"""

from meteomatics_query.datasources.meteomatics.client import BASE_URL, DEFAULT_FREQUENCY
from meteomatics_query.datasources.meteomatics.models import MetricResult
from meteomatics_query.datasources.meteomatics.query import WeatherQueryClient
from meteomatics_query.datasources.meteomatics.request import (
    build_request,
    build_request_url,
    format_date_range,
    metric_parameter,
)

__all__ = [
    "BASE_URL",
    "DEFAULT_FREQUENCY",
    "MetricResult",
    "WeatherQueryClient",
    "build_request",
    "build_request_url",
    "format_date_range",
    "metric_parameter",
]

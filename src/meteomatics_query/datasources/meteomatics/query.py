"""
Weather queries against the Meteomatics API.

One ``WeatherQueryClient`` covers one coordinate + date range. Each metric
call builds its own request descriptor before dispatch, so the client holds
no per-request state and can be shared between threads.

Example::

    from datetime import date
    from meteomatics_query import Coordinates, DateRange, WeatherQueryClient

    client = WeatherQueryClient(
        Coordinates(latitude=45.5, longitude=-122.6),
        DateRange(start=date(2024, 6, 15), end=date(2024, 6, 16)),
    )
    resp = client.temperature_prediction(1500)
    data = resp.json()
"""

from __future__ import annotations

import concurrent.futures as cf
import logging
from typing import TYPE_CHECKING

from requests.auth import HTTPBasicAuth

from meteomatics_query.config import get_settings
from meteomatics_query.datasources.meteomatics.client import BASE_URL, DEFAULT_FREQUENCY
from meteomatics_query.datasources.meteomatics.models import MetricResult
from meteomatics_query.datasources.meteomatics.request import build_request, build_request_url
from meteomatics_query.schemas import Metric, QueryConfig
from meteomatics_query.services.http import session as default_session

if TYPE_CHECKING:
    import requests

    from meteomatics_query.schemas import Coordinates, Credentials, DateRange, RequestDescriptor

logger = logging.getLogger(__name__)


class WeatherQueryClient:
    """Credential-and-config holder that issues Meteomatics requests."""

    def __init__(
        self,
        coordinates: Coordinates,
        date_range: DateRange,
        credentials: Credentials | None = None,
        *,
        frequency: str = DEFAULT_FREQUENCY,
        base_url: str = BASE_URL,
        session: requests.Session | None = None,
    ) -> None:
        """
        Args:
            coordinates: Location to query.
            date_range: Days to query.
            credentials: API credentials. When omitted they are read from
                ``METEO_USERNAME`` / ``METEO_PASSWORD``.
            frequency: ISO-8601 sampling interval (default: hourly).
            base_url: API endpoint.
            session: HTTP session (default: shared module session).

        Raises:
            ConfigurationError: Credentials omitted and not configured.
        """
        if credentials is None:
            credentials = get_settings().credentials()
        self.credentials = credentials
        self.config = QueryConfig(
            coordinates=coordinates,
            date_range=date_range,
            frequency=frequency,
            base_url=base_url,
        )
        self.session = session or default_session

    def __repr__(self) -> str:
        c = self.config
        return (
            f"WeatherQueryClient(({c.coordinates.latitude}, {c.coordinates.longitude}), "
            f"{c.date_range.start}..{c.date_range.end}, user={self.credentials.username!r})"
        )

    # -------------------------------------------------------------------------
    # Request building and dispatch
    # -------------------------------------------------------------------------

    def build_request_url(self, parameter: str) -> str:
        return build_request_url(self.config, parameter)

    def request(self, metric: Metric | str, elevation: float | None = None) -> RequestDescriptor:
        return build_request(self.config, metric, elevation)

    def execute(self, descriptor: RequestDescriptor) -> requests.Response:
        """
        GET a prepared request with Basic auth and return the raw response.

        The status code is not checked and transport errors are not caught.
        """
        logger.debug("GET %s", descriptor.url)
        auth = HTTPBasicAuth(
            self.credentials.username, self.credentials.password.get_secret_value()
        )
        return self.session.get(descriptor.url, auth=auth)

    def fetch(self, metric: Metric | str, elevation: float | None = None) -> requests.Response:
        """Build and execute the request for one metric."""
        return self.execute(self.request(metric, elevation))

    # -------------------------------------------------------------------------
    # Per-metric queries
    # -------------------------------------------------------------------------

    def snow_probability(self) -> requests.Response:
        """Probability of snowfall."""
        return self.fetch(Metric.SNOW_PROBABILITY)

    def humidity_prediction(self, elevation: float) -> requests.Response:
        """Relative humidity (%) at ``elevation`` meters."""
        return self.fetch(Metric.HUMIDITY, elevation)

    def temperature_prediction(self, elevation: float) -> requests.Response:
        """Temperature (°C) at ``elevation`` meters."""
        return self.fetch(Metric.TEMPERATURE, elevation)

    def clear_solar_sky_prediction(self) -> requests.Response:
        """Clear-sky solar radiation (W/m²)."""
        return self.fetch(Metric.CLEAR_SKY_RADIATION)

    def wind_speed_prediction(self, elevation: float) -> requests.Response:
        """Wind speed (km/h) at ``elevation`` meters."""
        return self.fetch(Metric.WIND_SPEED, elevation)

    def pressure_prediction(self, elevation: float) -> requests.Response:
        """Pressure (hPa) at ``elevation`` meters."""
        return self.fetch(Metric.PRESSURE, elevation)

    # -------------------------------------------------------------------------
    # Fan-out
    # -------------------------------------------------------------------------

    def _requests_for_all(self, elevation: float) -> list[RequestDescriptor]:
        return [self.request(metric, elevation) for metric in Metric]

    def fetch_all(self, elevation: float) -> list[requests.Response]:
        """
        Fetch all six metrics concurrently.

        Returns:
            Responses in ``Metric`` order: snow, humidity, temperature,
            clear-sky radiation, wind speed, pressure.

        Raises:
            Whatever the first failing request raised. No partial list is
            returned; outstanding requests are left to finish and ignored.
        """
        descriptors = self._requests_for_all(elevation)
        pool = cf.ThreadPoolExecutor(max_workers=len(descriptors))
        try:
            futures = [pool.submit(self.execute, d) for d in descriptors]
            for future in cf.as_completed(futures):
                future.result()
            return [future.result() for future in futures]
        finally:
            pool.shutdown(wait=False, cancel_futures=True)

    def fetch_all_settled(self, elevation: float) -> list[MetricResult]:
        """
        Fetch all six metrics concurrently, tagging each as success or failure.

        Never raises for a failed request; check ``MetricResult.ok``.
        """
        descriptors = self._requests_for_all(elevation)
        with cf.ThreadPoolExecutor(max_workers=len(descriptors)) as pool:
            futures = [pool.submit(self.execute, d) for d in descriptors]

        results = []
        for descriptor, future in zip(descriptors, futures, strict=True):
            error = future.exception()
            if error is not None:
                logger.warning("%s request failed: %s", descriptor.metric, error)
                results.append(MetricResult(metric=descriptor.metric, error=error))
            else:
                results.append(MetricResult(metric=descriptor.metric, response=future.result()))
        return results

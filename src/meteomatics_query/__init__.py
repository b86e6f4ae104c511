"""Meteomatics Query - weather metric requests against the Meteomatics API.

Architecture::

    schemas.py     Pydantic models (coordinates, date ranges, request descriptors)
    config.py      Settings from environment / .env (credentials, defaults)
    datasources/   Meteomatics URL building and the WeatherQueryClient
    services/      Shared utilities (HTTP session)
    cli.py         Command-line entry point

Data flow: Settings → Credentials → WeatherQueryClient → request descriptors → session.get
"""

__version__ = "0.1.0"
__author__ = "Michael Howden"

from meteomatics_query.config import ConfigurationError, Settings
from meteomatics_query.datasources.meteomatics import WeatherQueryClient
from meteomatics_query.schemas import Coordinates, Credentials, DateRange, Metric

__all__ = [
    "ConfigurationError",
    "Coordinates",
    "Credentials",
    "DateRange",
    "Metric",
    "Settings",
    "WeatherQueryClient",
    "__version__",
]

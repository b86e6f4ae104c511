"""
Application settings.

Values come from environment variables (case-insensitive) and an optional
``.env`` file in the working directory, e.g.::

    METEO_USERNAME=acme_corp
    METEO_PASSWORD=s3cret
    METEO_FREQUENCY=PT3H
"""

from __future__ import annotations

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from meteomatics_query.schemas import Credentials


class ConfigurationError(RuntimeError):
    """Required configuration is missing or unusable."""


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "meteomatics-query"
    app_env: str = "development"
    debug: bool = False

    meteo_username: str | None = None
    meteo_password: SecretStr | None = None
    meteo_base_url: str = "https://api.meteomatics.com"
    meteo_frequency: str = "PT1H"
    meteo_timeout: float | None = None

    # Default location (Portland, OR)
    lat: float = 45.5
    lon: float = -122.6

    @property
    def has_credentials(self) -> bool:
        return bool(self.meteo_username) and bool(
            self.meteo_password and self.meteo_password.get_secret_value()
        )

    def credentials(self) -> Credentials:
        """
        Build API credentials from the configured username and password.

        Raises:
            ConfigurationError: If either value is missing or empty.
        """
        username, password = self.meteo_username, self.meteo_password
        if not username or password is None or not password.get_secret_value():
            raise ConfigurationError(
                "Missing API credentials for Meteomatics "
                "(set METEO_USERNAME and METEO_PASSWORD)"
            )
        return Credentials(username=username, password=password)


def get_settings() -> Settings:
    """Load settings. Not cached: each call re-reads the environment."""
    return Settings()

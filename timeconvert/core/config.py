"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Every variable is prefixed with ``TIMECONVERT_``.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (OpenAPI docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        documentation_url: Returned with every error response.
        error_catalog_path: Override for the packaged errors.json.
        locale_catalog_path: Override for the packaged locales.json.
        allow_degraded_catalogs: Start with empty catalogs instead of
            failing when a catalog cannot be loaded.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TIMECONVERT_",
        extra="ignore",
    )

    project_name: str = "Time Convert"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    documentation_url: str = "https://github.com/timeconvert/timeconvert#error-codes"

    error_catalog_path: Optional[str] = None
    locale_catalog_path: Optional[str] = None
    allow_degraded_catalogs: bool = False


settings = Settings()

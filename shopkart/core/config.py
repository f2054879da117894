"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REDACTED_DETAILS = "An unexpected error occurred"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        error_log_level: Level for the error responder loggers only;
            unset means they follow ``log_level``.
        redact_internal_errors: Replace the raw message of unexpected
            failures with ``redacted_error_details`` on the wire.
        redacted_error_details: Details text sent for redacted failures.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "ShopKart"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    error_log_level: str | None = None
    redact_internal_errors: bool = False
    redacted_error_details: str = DEFAULT_REDACTED_DETAILS


settings = Settings()

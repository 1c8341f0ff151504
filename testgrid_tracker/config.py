"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables with .env file support.
"""
from functools import lru_cache
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from testgrid_tracker.constants import OVERALL_TEST_NAME


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Job runs
    PROW_VIEW_URL: str = "https://prow.ci.openshift.org/view/gs"  # Job run links are <PROW_VIEW_URL>/<query>/<change list>
    OVERALL_TEST_NAME: str = OVERALL_TEST_NAME

    @field_validator('PROW_VIEW_URL')
    @classmethod
    def validate_prow_view_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError('PROW_VIEW_URL must start with http:// or https://')
        return v.rstrip('/')

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept only the standard logging level names."""
        level = v.upper()
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f'Invalid LOG_LEVEL: {v}')
        return level

    # Model configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra='ignore'
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once.

    Returns:
        Settings instance
    """
    return Settings()

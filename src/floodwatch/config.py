"""
Client configuration for floodwatch.

Values are read from keyword arguments first, then from ``FLOODWATCH_*``
environment variables (and an optional ``.env`` file), then the defaults below.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "http://localhost:5000"
DEFAULT_TIMEOUT = 30.0


def package_version() -> str:
    """Installed floodwatch version, or "unknown" when running from a checkout."""
    try:
        from importlib import metadata

        return metadata.version("floodwatch")
    except Exception:
        return "unknown"


def default_user_agent() -> str:
    return f"floodwatch-client/{package_version()}"


class ClientConfig(BaseSettings):
    """Connection settings for the dashboard backend."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    user_agent: str = Field(default_factory=default_user_agent)
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="FLOODWATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("base_url cannot be empty")
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    def url_for(self, path: str) -> str:
        """Join a relative endpoint path onto the base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"

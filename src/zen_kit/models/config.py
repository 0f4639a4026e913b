"""Configuration models for the Zen notes API client.

Values can be passed directly or loaded from environment variables
(prefix ``ZEN_``) and ``.env`` files through pydantic-settings.
"""

from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetryConfig(BaseSettings):
    """Retry policy for idempotent HTTP requests.

    Environment variables use the ``ZEN_RETRY_`` prefix, e.g.
    ``ZEN_RETRY_MAX_ATTEMPTS=5``.
    """

    model_config = SettingsConfigDict(
        env_prefix="ZEN_RETRY_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_attempts: int = Field(default=3, ge=1, le=10, description="Maximum request attempts")
    initial_wait: float = Field(default=1.0, ge=0, description="Initial backoff in seconds")
    max_wait: float = Field(default=60.0, ge=0, description="Maximum backoff in seconds")
    exponential_base: float = Field(default=2.0, ge=1, description="Backoff multiplier")


class ZenConfig(BaseSettings):
    """Client configuration for a Zen notes server.

    Example:
        >>> config = ZenConfig(base_url="http://localhost:8080")
        >>> config.get_base_url()
        'http://localhost:8080'
    """

    model_config = SettingsConfigDict(
        env_prefix="ZEN_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(..., description="Server URL, e.g. http://localhost:8080")
    api_token: SecretStr | None = Field(default=None, description="Optional bearer token")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    max_connections: int = Field(default=10, ge=1, description="Connection pool size")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    retry: RetryConfig = Field(default_factory=RetryConfig)
    download_dir: Path = Field(default=Path("."), description="Where exports are delivered")

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("base_url cannot be empty")
        return value.rstrip("/")

    def get_base_url(self) -> str:
        """Return the server URL without a trailing slash."""
        return self.base_url

    def get_api_token(self) -> str | None:
        """Return the plain API token, or None when the server needs no auth."""
        if self.api_token is None:
            return None
        return self.api_token.get_secret_value()

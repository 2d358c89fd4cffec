"""Configuration management for pwnquery.

Uses pydantic-settings to load configuration from environment variables
and .env files.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pwnquery import __version__
from pwnquery.executors import ClientConfig
from pwnquery.urls import DEFAULT_BASE_URL


class Settings(BaseSettings):
    """pwnquery configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="PWNQUERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    user_agent: str = Field(
        default=f"pwnquery/{__version__}",
        description="The service requires an identifying user agent",
    )
    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout: float = Field(default=30.0)  # Seconds

    def client_config(self) -> ClientConfig:
        """Build a client configuration from these settings."""
        return ClientConfig(
            user_agent=self.user_agent,
            base_url=self.base_url,
            timeout=self.timeout,
        )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (useful for testing)."""
    global _settings
    _settings = None

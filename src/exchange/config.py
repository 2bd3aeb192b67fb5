"""
Exchange access configuration using Pydantic Settings.

This module provides configuration management for the exchange access layer,
allowing environment-based configuration with type validation and defaults.
"""

from datetime import timedelta

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

HITBTC_BASE_URL = "https://api.hitbtc.com/api/2"


class HitbtcConfig(BaseSettings):
    """HitBTC public REST API configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EXCHANGE_HITBTC_", validate_assignment=True
    )

    # Identity
    exchange_id: str = Field(
        default="hitbtc",
        min_length=1,
        description="Label identifying this exchange instance",
    )

    # Connection settings
    base_url: str = Field(
        default=HITBTC_BASE_URL,
        min_length=1,
        description="Base URL of the public REST API",
    )
    request_timeout: float | None = Field(
        default=None,
        gt=0,
        description="HTTP timeout in seconds (None = transport default)",
    )

    # Caching
    rate_cache_seconds: float = Field(
        default=30.0,
        ge=0,
        description="Rate and volume cache time-to-live in seconds",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalise the base URL so endpoint paths can be appended."""
        return v.rstrip("/")

    @property
    def rate_cache_duration(self) -> timedelta:
        """Cache TTL as a timedelta."""
        return timedelta(seconds=self.rate_cache_seconds)

    def public_api_url(self, command: str) -> str:
        """Build the URL of a public endpoint."""
        return f"{self.base_url}/public/{command}"


class ExchangeConfig(BaseSettings):
    """Root configuration combining all sub-configs."""

    model_config = SettingsConfigDict(env_prefix="EXCHANGE_")

    # Sub-configurations
    hitbtc: HitbtcConfig = Field(default_factory=HitbtcConfig)

    # Global settings
    debug: bool = False
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )

    @classmethod
    def from_env(cls) -> "ExchangeConfig":
        """
        Load configuration from environment variables.

        Returns:
            Configured ExchangeConfig instance

        """
        return cls(hitbtc=HitbtcConfig())

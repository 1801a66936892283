"""
Centralized settings management using pydantic-settings.

All environment variables and configuration values are defined here.
Use get_settings() to access the singleton settings instance.

Ranking weights are deliberately not settings: the scoring constants live in
``stylematch.scoring.feed_ranker.FeedScoringConfig``.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Engine settings loaded from environment variables.

    Optional environment variables:
        - ENVIRONMENT: Environment name (development, staging, production)
        - LOG_LEVEL: Minimum log level (default: INFO)
        - JSON_LOGS: Emit JSON logs instead of console output
        - PROFILE_BACKEND: auto, memory or redis (default: auto)
        - REDIS_URL: Redis connection URL (default: redis://localhost:6379/0)
        - REDIS_SOCKET_TIMEOUT: Redis connect/command timeout in seconds (default: 2)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Environment
    # ==========================================================================
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

    # ==========================================================================
    # Logging
    # ==========================================================================
    log_level: str = Field(default="INFO", description="Minimum log level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v):
        if isinstance(v, str):
            level = v.strip().upper()
            if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
                raise ValueError(f"Unknown log level: {v}")
            return level
        return v

    # ==========================================================================
    # Profile Persistence
    # ==========================================================================
    profile_backend: Literal["auto", "memory", "redis"] = Field(
        default="auto",
        description="Profile storage backend (auto tries Redis, falls back to memory)",
    )
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL",
    )
    redis_socket_timeout: float = Field(
        default=2.0,
        gt=0,
        description="Seconds a Redis connect or command may take before failing",
    )
    profile_key_prefix: str = Field(
        default="profile:",
        description="Key prefix for persisted preference profiles",
    )
    profile_ttl_seconds: int = Field(
        default=0,
        ge=0,
        description="Profile record TTL in seconds (0 keeps records forever)",
    )

    @field_validator("profile_backend", mode="before")
    @classmethod
    def parse_profile_backend(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Uses lru_cache to ensure only one instance is created.
    Settings are loaded from environment variables and .env file.

    Raises:
        ValidationError: If an environment variable has an invalid value
    """
    env_file = Path(__file__).parent.parent.parent.parent / ".env"
    return Settings(_env_file=env_file if env_file.exists() else None)


def get_settings_for_testing(**overrides) -> Settings:
    """
    Create a settings instance for testing with optional overrides.

    This bypasses the cache to allow different settings in tests.
    """
    test_defaults = {
        "environment": "testing",
        "debug": True,
        "profile_backend": "memory",
    }
    test_defaults.update(overrides)

    return Settings(_env_file=None, **test_defaults)

"""
Runtime configuration for the workout log API.

Values come from environment variables (or a .env file) and are validated
once at startup. create_app() takes a Settings instance, so tests build their
own instead of patching the environment.

Usage:
    from backend.settings import get_settings

    settings = get_settings()
    settings.session_marker_path   # where the logged-in username is kept

    # Isolated settings for tests
    Settings(environment="test", session_marker_backend="memory", _env_file=None)
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production, test",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR)",
    )

    # -------------------------------------------------------------------------
    # Session Marker
    # -------------------------------------------------------------------------
    session_marker_backend: Literal["file", "memory"] = Field(
        default="file",
        description="Where the logged-in username is checkpointed",
    )
    session_marker_path: Path = Field(
        default=Path(".workout-log/session.json"),
        description="Marker file used by the 'file' backend",
    )

    # -------------------------------------------------------------------------
    # Import / Export
    # -------------------------------------------------------------------------
    import_max_bytes: int = Field(
        default=10 * 1024 * 1024,
        gt=0,
        description="Largest snapshot file accepted for import",
    )
    export_indent: Optional[int] = Field(
        default=2,
        ge=0,
        description="JSON indentation of exported snapshots (unset for compact)",
    )

    # -------------------------------------------------------------------------
    # HTTP
    # -------------------------------------------------------------------------
    cors_allowed_origins: str = Field(
        default="",
        description="Comma-separated list of extra CORS origins",
    )

    @property
    def cors_allowed_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is one the logging module knows."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level '{v}'")
        return level

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """
    Settings for the current process, loaded on first use.

    Call get_settings.cache_clear() to pick up a changed environment.
    """
    return Settings()

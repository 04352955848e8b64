"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.constants import (
    API_TIMEOUT_EXTERNAL,
    CONFIG_FALLBACK_PATH,
    CONFIG_PRIMARY_PATH,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    app_env: Literal["development", "production", "test"] = "development"
    app_name: str = "Jellypick"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] | None = None

    # Persisted Jellyfin configuration
    config_path: str = CONFIG_PRIMARY_PATH
    config_fallback_path: str = CONFIG_FALLBACK_PATH

    # Web
    templates_dir: str = "templates"
    static_dir: str = "static"

    # Upstream
    jellyfin_timeout: float = API_TIMEOUT_EXTERNAL

    @field_validator("jellyfin_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Outbound calls must always be bounded."""
        if v <= 0:
            raise ValueError("JELLYFIN_TIMEOUT must be a positive number of seconds")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

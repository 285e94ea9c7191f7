"""
Application configuration using Pydantic Settings.

All configuration is loaded from environment variables or a local .env file.
"""

from functools import lru_cache
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "CamerPulse Poll API"
    APP_ENV: str = "development"
    DEBUG: bool = False
    API_VERSION: str = "1.0.0"
    # Mount point of the gateway, e.g. "/functions/v1/poll-api-gateway"
    API_PREFIX: str = ""

    # Database - hosted PostgreSQL
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""  # Required - loaded from environment
    POSTGRES_DB: str = "postgres"
    POSTGRES_SSL: bool = True
    DATABASE_URL: str | None = None  # Overrides the composed URL when set
    DB_POOL_SIZE: int = 5
    DB_ECHO: bool = False

    @field_validator("POSTGRES_PASSWORD")
    @classmethod
    def validate_required_secrets(cls, v: str, info: Any) -> str:
        """Validate that required secrets are set."""
        if not v:
            raise ValueError(f"{info.field_name} must be set in environment")
        return v

    @field_validator("API_PREFIX")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        """Strip trailing slashes and ensure a leading one."""
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = f"/{v}"
        return v

    @property
    def POSTGRES_URL(self) -> str:
        """Construct the async PostgreSQL connection URL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        url = (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )
        if self.POSTGRES_SSL:
            url += "?ssl=require"
        return url

    # Documented limits (advertised by the documentation endpoint, not enforced)
    RATE_LIMIT_PER_HOUR: int = 1000

    # Polls - report the true row count instead of the page length
    POLLS_EXACT_TOTAL: bool = False

    # Analytics
    ANALYTICS_TREND_DAYS: int = 30


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()

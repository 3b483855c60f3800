"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite:///./lifelessons.db"
    DATABASE_POOL_SIZE: int = 20
    DATABASE_MAX_OVERFLOW: int = 30

    # API (constants, not from env)
    PROJECT_NAME: str = "Life Lessons API"
    VERSION: str = "0.1.0"

    # Server
    HOST: str = "0.0.0.0"  # noqa: S104
    PORT: int = 3000

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Auth
    SECRET_KEY: str = ""
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Lessons
    DEFAULT_PAGE_SIZE: int = 12
    RECOMMENDED_LESSONS_LIMIT: int = 6
    RECENT_LESSONS_LIMIT: int = 5
    REPORT_RATE_LIMIT: str = "10/minute"

    @field_validator("SECRET_KEY", mode="after")
    @classmethod
    def strip_secret_key(cls, value: str) -> str:
        """Strip whitespace from the signing key."""
        return value.strip()


def configure_logging(environment: str = "development") -> None:
    """
    Route structlog events through stdlib logging.

    Development gets a console renderer at DEBUG; test and production log at
    INFO, and production emits one JSON object per line.
    """
    level = logging.DEBUG if environment == "development" else logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    # Statement echo is noise outside of targeted debugging
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer()
        if environment == "production"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""
Application configuration.

All settings are read from environment variables (a ``.env`` file is loaded
by the entry points with python-dotenv before settings are first read).
"""

import json
import logging
from typing import Annotated, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode

from src.constants import DEFAULT_API_HOST, DEFAULT_API_PORT, DEFAULT_API_PREFIX


class ShowcaseSettings(BaseSettings):
    """Settings for the HTTP surface and logging."""

    api_host: str = Field(
        default=DEFAULT_API_HOST,
        description="Address the API server listens on",
    )
    api_port: int = Field(
        default=DEFAULT_API_PORT,
        description="Port the API server listens on",
    )
    api_prefix: str = Field(
        default=DEFAULT_API_PREFIX,
        description="Prefix for all pattern routes (e.g., /api)",
    )
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default=["*"],
        description="Allowed CORS origins (JSON list or comma-separated)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable FastAPI debug mode and auto-reload",
    )

    class Config:
        case_sensitive = False

    @field_validator("api_prefix")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        """Ensure a single leading slash and no trailing slash."""
        v = v.strip().strip("/")
        return f"/{v}" if v else ""

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_origins(cls, v):
        """Accept a JSON list or a comma-separated string."""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
            except ValueError:
                parsed = [origin.strip() for origin in v.split(",") if origin.strip()]
            return parsed if isinstance(parsed, list) else [str(parsed)]
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("api_port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 1 <= v <= 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v


# Singleton settings instance
_settings: Optional[ShowcaseSettings] = None


def get_settings() -> ShowcaseSettings:
    """Get the settings singleton."""
    global _settings
    if _settings is None:
        _settings = ShowcaseSettings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (for testing)."""
    global _settings
    _settings = None

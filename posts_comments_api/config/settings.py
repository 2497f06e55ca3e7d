"""
Configuration settings for the posts & comments API.

Settings are loaded from environment variables (and an optional ``.env`` file)
using pydantic-settings. Only ``PORT`` is expected to change between
deployments; everything else defaults to the values the service was built
against.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Service configuration settings.

    All settings can be overridden via environment variables.
    """

    # Application settings
    APP_NAME: str = "PostsCommentsAPI"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # Listener. Port 0, or an empty PORT, lets the OS pick a free port.
    API_HOST: str = "localhost"
    PORT: int = Field(default=0, ge=0, le=65535)

    # Logging
    LOG_LEVEL: str = "INFO"

    # Upstream content API
    UPSTREAM_BASE_URL: str = "https://jsonplaceholder.typicode.com"
    UPSTREAM_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)

    # None waits for in-flight requests indefinitely on shutdown
    SHUTDOWN_TIMEOUT_SECONDS: Optional[int] = Field(default=None, ge=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_ignore_empty=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Configured settings instance
    """
    return Settings()

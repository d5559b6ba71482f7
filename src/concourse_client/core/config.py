"""
Configuration management using Pydantic Settings.

Type-safe configuration for building a TeamClient from the environment.
Every variable is read with the CONCOURSE_ prefix.

Usage:
    from concourse_client.core.config import get_settings

    settings = get_settings()
    client = TeamClient.from_settings(settings)

Environment:
    CONCOURSE_API_URL=https://ci.example.com/api/v1
    CONCOURSE_BEARER_TOKEN=...
    CONCOURSE_TEAM_ID=1
    CONCOURSE_TEAM_NAME=main
"""

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from concourse_client.core.constants import HTTP_TIMEOUT_DEFAULT

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ClientSettings(BaseSettings):
    """
    Client settings loaded from environment variables.

    Configuration precedence:
        1. Explicit keyword arguments
        2. Environment variables (CONCOURSE_*)
        3. .env file in the working directory
        4. Default values (only for non-sensitive config)
    """

    api_url: str = Field(
        description="Concourse API base URL (e.g., https://ci.example.com/api/v1)",
    )
    bearer_token: SecretStr = Field(
        description="Bearer token sent in the Authorization header",
    )
    team_id: int = Field(
        default=1,
        gt=0,
        description="Identifier of the team the client is scoped to",
    )
    team_name: str = Field(
        default="main",
        min_length=1,
        description="Name of the team the client is scoped to",
    )
    timeout: float = Field(
        default=HTTP_TIMEOUT_DEFAULT,
        gt=0,
        description="HTTP request timeout in seconds",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON instead of the human-readable console format",
    )

    model_config = SettingsConfigDict(
        env_prefix="CONCOURSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("api_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from the API URL.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and check the log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> ClientSettings:
    """Return the cached settings instance.

    Raises:
        pydantic.ValidationError: If required settings are missing or invalid.
    """
    return ClientSettings()  # type: ignore[call-arg]

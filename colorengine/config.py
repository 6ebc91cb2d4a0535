"""Service settings, read from COLOR_ENGINE_* environment variables or .env."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="COLOR_ENGINE_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    host: str = Field(default="0.0.0.0", description="Interface the HTTP server binds to.")
    port: int = Field(default=8973, ge=1, le=65535, description="HTTP port.")
    log_level: str = Field(default="INFO", description="Root level for the colorengine loggers.")
    strict_validation: bool = Field(
        default=True,
        description="Reject out-of-range components before converting instead of clamping them.",
    )
    cache_size: int = Field(
        default=256,
        ge=0,
        description="Parsed inputs remembered per service instance (0 disables the cache).",
    )
    mcp_enabled: bool = Field(default=True, description="Expose the endpoints as MCP tools.")


@lru_cache
def get_settings() -> Settings:
    return Settings()

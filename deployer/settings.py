"""Runtime configuration for the deployer service."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_local_repository() -> str:
    return str(Path.home() / ".m2" / "repository")


class Settings(BaseSettings):
    """Configuration values mapped from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field("Omnis Deployer API")
    version: str = Field("1.0.0")
    log_level: str = Field("INFO")

    # Nexus repository configuration
    nexus_base_url: str = Field("http://localhost:8081")
    nexus_repository: str = Field("releases")
    nexus_username: Optional[str] = Field(None)
    nexus_password: Optional[str] = Field(None)
    http_timeout: float = Field(30.0)

    # Local Maven repository used for lookups and as the download target
    local_repository: str = Field(default_factory=_default_local_repository)
    resolver_offline: bool = Field(False)


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection."""
    return Settings()

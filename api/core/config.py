"""
Process-wide settings.

Loaded once from the environment (and an optional `.env` file) and handed to
handlers through `Depends(get_settings)`. The object is frozen; nothing should
read `os.environ` ad hoc after startup.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    database_url: str = Field(..., min_length=1)
    admin_secret_key: str = Field(..., min_length=1)

    cors_origins: list[str] = ["http://localhost:5173"]

    db_pool_min_size: int = Field(default=1, ge=1)
    db_pool_max_size: int = Field(default=5, ge=1)
    db_command_timeout: float = Field(default=30.0, gt=0)

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()

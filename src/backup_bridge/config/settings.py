"""
Translator settings and configuration management.

Loads configuration from environment variables with sensible defaults.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Translator settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BACKUP_BRIDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Store key paths
    backups_key: str = Field(
        default="phpbu",
        description="Key path of the block declaring backups by kind",
    )
    filename_key: str = Field(
        default="phpbu.config",
        description="Key path of the output configuration filename",
    )
    connections_key: str = Field(
        default="database.connections",
        description="Key path of the named database connections table",
    )

    # Translation behaviour
    sync_provider: str = Field(
        default="laravel-storage",
        description="Sync type emitted for every sync block",
    )
    strict_backup_kinds: bool = Field(
        default=False,
        description="Fail on declared backup kinds that have no mapper",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()

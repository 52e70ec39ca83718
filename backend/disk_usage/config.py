"""disk-usage configuration: Pydantic BaseSettings loaded from env / .env."""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Sidecar settings. Variable names are unprefixed (PORT, DISK_PATH, ...)."""

    app_name: str = "disk-usage"
    log_level: str = "INFO"

    # Network
    host: str = "0.0.0.0"
    port: int = 3000

    # Disk query
    disk_path: str = "/mnt/plexdrive"
    cache_ms: int = 5000  # freshness window
    df_timeout_ms: int = 5000
    df_binary: str = "df"

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("port")
    @classmethod
    def _check_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("port must be between 1 and 65535")
        return value

    @field_validator("cache_ms")
    @classmethod
    def _check_cache_ms(cls, value: int) -> int:
        if value < 0:
            raise ValueError("cache_ms must not be negative")
        return value

    @field_validator("df_timeout_ms")
    @classmethod
    def _check_timeout(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("df_timeout_ms must be positive")
        return value

    @property
    def cache_seconds(self) -> float:
        return self.cache_ms / 1000.0

    @property
    def df_timeout_seconds(self) -> float:
        return self.df_timeout_ms / 1000.0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

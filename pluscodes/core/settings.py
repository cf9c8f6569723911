from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PLUSCODES_",
        case_sensitive=False,
    )

    # Digits produced by /v1/codes/encode when the caller gives no length.
    default_code_length: int = 10

    # Upper bound on items accepted by one batch encode request.
    max_batch_items: int = 1000

    log_level: str = "INFO"

    # Cookie/CORS (dev defaults)
    cors_allow_origin: str = "http://localhost:3000"
    cors_allow_credentials: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()

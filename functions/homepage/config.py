"""
Configuration and settings for the homepage backend.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_prefix: str = Field(default="/api")
    log_level: str = Field(default="INFO", env="LOG_LEVEL")
    enable_docs: bool = Field(default=False, env="ENABLE_DOCS")

    # CORS
    cors_allow_origin: str = Field(default="*", env="CORS_ALLOW_ORIGIN")

    # Outbound HTTP
    hitokoto_api_url: str = Field(
        default="https://v1.hitokoto.cn", env="HITOKOTO_API_URL"
    )
    notification_api_url: Optional[str] = Field(
        default=None, env="NOTIFICATION_API_URL"
    )
    request_timeout: float = Field(default=10.0, env="REQUEST_TIMEOUT")

    # Development toggles
    use_in_memory_backends: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "use_in_memory_backends", "HOMEPAGE_USE_IN_MEMORY_BACKENDS"
        ),
    )

    # Key-value store (Redis)
    redis_url: Optional[str] = Field(default=None, env="REDIS_URL")
    redis_key_prefix: str = Field(default="homepage:", env="REDIS_KEY_PREFIX")

    # Key-value store (SQL, Postgres or SQLite)
    database_url: Optional[str] = Field(default=None, env="DATABASE_URL")

    # Key-value store (S3-compatible object storage)
    kv_bucket: Optional[str] = Field(default=None, env="KV_BUCKET")
    kv_endpoint: Optional[str] = Field(default=None, env="KV_ENDPOINT")
    kv_region: Optional[str] = Field(default=None, env="KV_REGION")
    kv_prefix: str = Field(default="kv/", env="KV_PREFIX")
    aws_access_key_id: Optional[str] = Field(
        default=None, env="AWS_ACCESS_KEY_ID"
    )
    aws_secret_access_key: Optional[str] = Field(
        default=None, env="AWS_SECRET_ACCESS_KEY"
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()

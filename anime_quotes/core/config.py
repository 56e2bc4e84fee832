from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from pydantic import AnyUrl, Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=os.getenv("ENV_FILE", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: Literal["dev", "prod"] = Field(default="dev", validation_alias="APP_ENV")
    app_name: str = Field(default="anime-quotes-backend", validation_alias="APP_NAME")
    api_v1_prefix: str = Field(default="/v1", validation_alias="API_V1_PREFIX")
    docs_enabled: bool = Field(default=True, validation_alias="DOCS_ENABLED")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_json: bool = Field(default=True, validation_alias="LOG_JSON")

    # comma separated; empty disables CORS
    cors_allow_origins: str = Field(default="", validation_alias="CORS_ALLOW_ORIGINS")

    jikan_base_url: AnyUrl = Field(default="https://api.jikan.moe/v4", validation_alias="JIKAN_BASE_URL")
    jikan_timeout_seconds: float = Field(default=10.0, validation_alias="JIKAN_TIMEOUT_SECONDS")

    animechan_base_url: AnyUrl = Field(default="https://animechan.xyz/api", validation_alias="ANIMECHAN_BASE_URL")
    animechan_timeout_seconds: float = Field(default=10.0, validation_alias="ANIMECHAN_TIMEOUT_SECONDS")
    animechan_api_key: SecretStr | None = Field(default=None, validation_alias="ANIMECHAN_API_KEY")

    http_max_connections: int = Field(default=50, validation_alias="HTTP_MAX_CONNECTIONS")

    @model_validator(mode="after")
    def _check_provider_limits(self) -> "Settings":
        for name in ("jikan_timeout_seconds", "animechan_timeout_seconds", "http_max_connections"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name.upper()} must be positive")
        return self

    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]

    def animechan_api_key_plain(self) -> str | None:
        if self.animechan_api_key is None:
            return None
        return self.animechan_api_key.get_secret_value() or None


class DevSettings(Settings):
    log_json: bool = Field(default=False, validation_alias="LOG_JSON")


class ProdSettings(Settings):
    docs_enabled: bool = Field(default=False, validation_alias="DOCS_ENABLED")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    if (os.getenv("APP_ENV") or "dev").strip().lower() == "prod":
        return ProdSettings()
    return DevSettings()

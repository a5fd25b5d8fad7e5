import os
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", validate_default=True)

    app_name: str = "Solar Power Forecasting API"
    app_version: str = "1.0.0"

    # Forecasting backend every route forwards to
    upstream_url: str = os.getenv("SOLAR_API_URL", "http://localhost:4545")
    # None keeps the HTTP client's default (wait indefinitely)
    upstream_timeout: float | None = None

    host: str = os.getenv("GATEWAY_HOST", "0.0.0.0")
    port: int = int(os.getenv("GATEWAY_PORT", "8888"))
    log_level: str = "INFO"

    cors_origins: tuple[str, ...] = ("*",)

    @field_validator("upstream_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

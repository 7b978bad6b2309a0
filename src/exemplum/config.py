"""Application settings, read from ``EXEMPLUM_*`` environment variables.

Nested sections use ``__`` as delimiter, e.g. ``EXEMPLUM_AUTH__AUDIENCE``
or ``EXEMPLUM_WEATHER__API_KEY``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class CacheBackend(str, Enum):
    MEMORY = "memory"
    REDIS = "redis"


class DatabaseSettings(BaseModel):
    url: str = "sqlite+aiosqlite:///:memory:"
    echo: bool = False
    seed_on_startup: bool = True

    @property
    def in_memory(self) -> bool:
        return ":memory:" in self.url


class AuthSettings(BaseModel):
    # Auth0-style tenant; ``iss`` must match exactly
    authority: str | None = None
    audience: str | None = None
    # HS* shared secret, or a JWKS document (JSON) for RS*/ES*
    signing_key: str | None = None
    jwks: str | None = None
    algorithms: list[str] = Field(default_factory=lambda: ["HS256"])
    name_claim: str = "name"
    role_claim: str = "roles"
    leeway_seconds: int = 0

    @property
    def enabled(self) -> bool:
        return bool(self.signing_key or self.jwks)


class WeatherForecastSettings(BaseModel):
    base_url: str = "https://api.openweathermap.org/data/2.5"
    api_key: str = ""
    units: str = "metric"
    timeout_seconds: float = 10.0
    cache_ttl_seconds: float = 300.0


class CacheStoreSettings(BaseModel):
    backend: CacheBackend = CacheBackend.MEMORY
    redis_url: str = "redis://localhost:6379/0"


class Settings(BaseSettings):
    """
    Central configuration.
    Strictly typed and validated via Pydantic.
    """

    model_config = SettingsConfigDict(
        env_prefix="EXEMPLUM_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    # --- Application Meta ---
    app_name: str = "Exemplum"
    environment: AppEnv = AppEnv.DEVELOPMENT

    # --- Logging ---
    log_level: str = "INFO"

    # --- Sections ---
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    weather: WeatherForecastSettings = Field(default_factory=WeatherForecastSettings)
    cache: CacheStoreSettings = Field(default_factory=CacheStoreSettings)


def get_settings() -> Settings:
    return Settings()


__all__ = [
    "AppEnv",
    "AuthSettings",
    "CacheBackend",
    "CacheStoreSettings",
    "DatabaseSettings",
    "Settings",
    "WeatherForecastSettings",
    "get_settings",
]

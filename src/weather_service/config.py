"""Runtime configuration for the weather service."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .weather.units import Unit, parse_unit


class Settings(BaseSettings):
    """Runtime configuration for the weather service."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # FastAPI
    app_host: str = Field(default="0.0.0.0", alias="APP_HOST")
    app_port: int = Field(default=8080, alias="APP_PORT")
    debug: bool = Field(default=False, alias="DEBUG")
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Unit used when a query does not name one
    default_unit: Unit = Field(default=Unit.CELSIUS, alias="DEFAULT_UNIT")

    @field_validator("default_unit", mode="before")
    @classmethod
    def _parse_default_unit(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_unit(value)
        return value

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()

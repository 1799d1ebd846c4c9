"""Configuration for the catalog service."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Catalog service configuration.

    All settings can be overridden via environment variables prefixed
    with ``CATALOG_`` (e.g. ``CATALOG_STORAGE_BACKEND=memory``).
    """

    # Service configuration
    SERVICE_NAME: str = Field(default="catalog-service")
    HOST: str = Field(default="127.0.0.1")
    PORT: int = Field(default=8000, ge=1, le=65535)
    DEBUG: bool = Field(default=False)

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    LOG_JSON: bool = Field(default=True)

    # Storage
    STORAGE_BACKEND: Literal["memory", "json"] = Field(default="json")
    DATA_DIR: Path = Field(default=Path("data"))

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def products_file(self) -> Path:
        return self.DATA_DIR / "products.json"


@lru_cache
def get_settings() -> Settings:
    return Settings()

# publicapi/core/config.py
"""
Settings da Catalog Public API (variáveis de ambiente + .env).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Catalog Public API"
    APP_VERSION: str = "1.0.0"

    # Base de dados
    DATABASE_URL: str = Field(
        "sqlite:///./catalog.db",
        description="SQLAlchemy connection string.",
    )
    DATABASE_ECHO: bool = False

    # Catálogo
    CATALOG_BASE_URL: str = Field(
        "http://localhost:5106",
        description="Base URL used to turn stored picture paths into absolute URIs.",
    )
    SEED_CATALOG: bool = Field(
        True,
        description="Seed demo brands/types/items on startup when the catalog is empty.",
    )

    # HTTP
    CORS_ORIGINS: list[str] = Field(default=["*"])

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

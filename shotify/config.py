"""
Application Configuration
Pydantic Settings for environment-based configuration.
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Application
    # ==========================================================================
    app_name: str = "Shotify"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    # ==========================================================================
    # Database
    # ==========================================================================
    database_url: str = "sqlite+aiosqlite:///./shotify.db"

    @property
    def is_sqlite(self) -> bool:
        return "sqlite" in self.database_url

    @property
    def is_memory_db(self) -> bool:
        return self.is_sqlite and ":memory:" in self.database_url

    # ==========================================================================
    # Template Catalog
    # ==========================================================================
    seed_templates_on_startup: bool = True
    seed_force: bool = False

    # ==========================================================================
    # Access Control
    # ==========================================================================
    # Admin template management is disabled unless a key is configured
    admin_api_key: str | None = None
    ownership_policy: Literal["hide_existence", "distinguish_forbidden"] = "hide_existence"

    @property
    def admin_enabled(self) -> bool:
        return bool(self.admin_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

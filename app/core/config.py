"""
Portfolio API - Configuration
Loads settings from environment variables
"""

from typing import Optional, List
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App Info
    APP_NAME: str = "Portfolio API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # API
    API_PREFIX: str = "/api"

    # Supabase (checked on first use, not at import)
    SUPABASE_URL: str = ""
    SUPABASE_ANON_KEY: str = ""
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None

    # Projects table
    PROJECTS_TABLE: str = "projects"
    PROJECTS_CREATED_AT_COLUMN: str = "created_at"
    FEATURED_PROJECTS_LIMIT: int = 6

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def effective_log_level(self) -> str:
        """DEBUG wins over LOG_LEVEL so record traces show up while developing."""
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL.upper()

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Literal


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    ENVIRONMENT: str = "development"
    ALLOWED_ORIGINS: list[str] = ["http://localhost:3000"]
    API_PREFIX: str = "/api"
    API_TITLE: str = "Cohort Admissions API"
    API_DESCRIPTION: str = "Admission applications for numbered program cohorts"
    VERSION: str = "0.1.0"

    # Features
    ENABLE_DOCS: bool = True
    ENABLE_REDOC: bool = True

    # Storage
    STORE_BACKEND: Literal["memory", "database"] = "memory"
    DATABASE_URL: str = "sqlite:///./admissions.db"
    DATABASE_ECHO: bool = False
    SEED_SAMPLE_DATA: bool = True  # Memory backend only

    # Pagination
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    # Logging
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()

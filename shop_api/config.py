"""
Configuration management for Shop API
"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Shop API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Database (in-memory by default, shared across sessions)
    DATABASE_URL: str = "sqlite:///:memory:"
    SEED_DATA: bool = True

    # Paging
    DEFAULT_PAGE_SIZE: int = 50
    MAX_PAGE_SIZE: int = 100

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()

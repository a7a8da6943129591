"""
Configuration management for the DrugSafe Interaction Engine.
Uses pydantic-settings for type-safe environment variable handling.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "DrugSafe Interaction Engine"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Security
    API_KEY: str = ""
    FRONTEND_ORIGIN: str = "http://localhost:5173"

    # Redis
    REDIS_URL: str = "redis://localhost:6379"
    ANALYSIS_CACHE_TTL: int = 300  # 5 minutes

    # Analysis
    MAX_DRUGS_PER_ANALYSIS: int = 10
    STRICT_DRUG_RESOLUTION: bool = False
    SEARCH_MIN_QUERY_LENGTH: int = 2

    # Knowledge base provenance
    KNOWLEDGE_BASE_VERSION: str = "2024.1"
    KNOWLEDGE_BASE_UPDATED: str = "2024-01-15"

    # Rate limiting
    RATE_LIMIT_REQUESTS: int = 100
    RATE_LIMIT_WINDOW: int = 60  # seconds

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

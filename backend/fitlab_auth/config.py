"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db_name: str = "fitlab"

    # JWT Configuration (no default secret: startup fails without one)
    jwt_secret: str = Field(..., min_length=1)
    jwt_algorithm: str = "HS256"

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    environment: str = "production"
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

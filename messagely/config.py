"""
Configuration management for the messagely service
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Service configuration loaded from environment variables"""

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./messagely.db"

    # Tokens
    SECRET_KEY: str = "change-this-secret-in-prod"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Password hashing work factor (pbkdf2 rounds)
    PASSWORD_HASH_ROUNDS: int = 29000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Dependency returning the settings passed into stores and token helpers."""
    return settings

"""
Configuration management for the podcast service
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

DEFAULT_JWT_PRIVATE_KEY = "change-this-secret-in-prod"


class Settings(BaseSettings):
    """Service configuration loaded from environment variables"""

    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./podcasts.db"

    # Authentication
    JWT_PRIVATE_KEY: str = DEFAULT_JWT_PRIVATE_KEY
    PASSWORD_HASH_SCHEME: str = "pbkdf2_sha256"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )


def validate_runtime_config(config: Settings) -> None:
    if config.APP_ENV.lower() == "production" and config.JWT_PRIVATE_KEY == DEFAULT_JWT_PRIVATE_KEY:
        raise RuntimeError("JWT_PRIVATE_KEY must be set in production.")


# Global settings instance
settings = Settings()

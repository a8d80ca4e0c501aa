"""
Application configuration.
Uses pydantic-settings to read environment variables and the .env file.
"""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_title: str = "User Directory"
    api_description: str = "User management API with JWT authentication"
    api_version: str = "1.0.0"

    # CORS
    cors_allow_origins: List[str] = ["*"]  # W produkcji ograniczyć do konkretnych domen
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]

    # User storage: "memory" or "sql"
    user_store_backend: str = "memory"
    database_url: str = "sqlite:///./users.db"

    # JWT
    jwt_secret_key: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Admin bootstrap
    admin_enabled: bool = True
    admin_username: str = "admin"
    admin_email: str = "admin@example.com"
    admin_password: str = "admin123"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Globalna instancja ustawień
settings = Settings()

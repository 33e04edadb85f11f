"""
Configuration management for CareerPath.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Base paths
ROOT_DIR = Path(__file__).parent.parent.parent


class DatabaseSettings(BaseSettings):
    """MongoDB database configuration."""

    model_config = SettingsConfigDict(env_prefix="DB_")

    host: str = "localhost"
    port: int = 27017
    name: str = "careerpath"
    username: str | None = None
    password: str | None = None
    server_selection_timeout_ms: int = 5000
    max_pool_size: int = 10


class AuthSettings(BaseSettings):
    """Credential hashing and session token configuration."""

    model_config = SettingsConfigDict(env_prefix="AUTH_")

    jwt_secret: str = "dev_secret_change_me"
    jwt_algorithm: str = "HS256"
    token_ttl_days: int = Field(default=7, ge=1)
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)
    min_password_length: int = Field(default=6, ge=1)

    # Self-service registration with role=admin
    allow_admin_signup: bool = False


class AdminSettings(BaseSettings):
    """Default administrator account seeded by init-db."""

    model_config = SettingsConfigDict(env_prefix="ADMIN_")

    email: str = "admin@gmail.com"
    password: str = "123456"
    name: str = "Admin"

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = ROOT_DIR / "logs" / "careerpath.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    file_output: bool = True
    audit_rotation: str = "1 week"
    audit_retention: str = "1 year"


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    admin: AdminSettings = Field(default_factory=AdminSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the cached settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings

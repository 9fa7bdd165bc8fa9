"""
Application settings and configuration.
"""

from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .database import DatabaseConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application
    app_name: str = "Room Booking"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database
    database_path: str = Field(default="booking.db", description="SQLite database file")
    database_timeout: float = Field(default=30.0, description="Seconds to wait for the write lock")

    # Authentication
    jwt_key: Optional[str] = Field(default=None, description="HS256 signing key, at least 32 bytes")
    jwt_algorithm: str = "HS256"
    token_ttl_hours: int = 8
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # HTTP
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    enable_dev_seed: bool = True

    # Logging
    log_level: str = "INFO"

    def database_config(self) -> DatabaseConfig:
        """Build the database configuration from these settings."""
        return DatabaseConfig(path=self.database_path, timeout=self.database_timeout)


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()

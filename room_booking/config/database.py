"""
Database configuration.
"""

from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    """Database configuration settings."""

    path: str = "booking.db"
    timeout: float = Field(default=30.0, gt=0)

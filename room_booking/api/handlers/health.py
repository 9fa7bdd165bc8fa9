"""
Health and readiness handler.
"""

import sqlite3

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ...config import Settings
from ...services.storage import Database
from ...utils.date import utc_now
from ...utils.logging import get_logger

logger = get_logger("booking.http")


class HealthResponse(BaseModel):
    """Liveness payload."""
    status: str
    timestamp: str
    version: str
    uptime: float


class ReadinessResponse(BaseModel):
    """Readiness payload; database is "ok" or the storage error."""
    status: str
    database: str


class HealthHandler:
    """Liveness and readiness checks for the booking service."""

    def __init__(self, settings: Settings, database: Database):
        self.settings = settings
        self.database = database
        self.start_time = utc_now()
        self.router = APIRouter()
        self._setup_routes()

    def _ping_database(self) -> None:
        with self.database.reader() as conn:
            conn.execute("SELECT 1").fetchone()

    def _setup_routes(self):

        @self.router.get("/", response_model=HealthResponse)
        async def health_check():
            now = utc_now()
            return HealthResponse(
                status="ok",
                timestamp=now.isoformat(),
                version=self.settings.app_version,
                uptime=(now - self.start_time).total_seconds(),
            )

        @self.router.get("/ready", response_model=ReadinessResponse)
        async def readiness_check():
            """Ready only when the booking database answers a query."""
            try:
                await self.database.run(self._ping_database)
            except sqlite3.Error as e:
                logger.error(f"readiness: database unavailable: {e}")
                return JSONResponse(
                    status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                    content={"status": "unavailable", "database": str(e)},
                )
            return ReadinessResponse(status="ready", database="ok")

        @self.router.get("/live")
        async def liveness_check():
            return {"status": "alive"}

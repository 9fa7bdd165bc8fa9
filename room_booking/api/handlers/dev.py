"""
Development helpers.
"""

from fastapi import APIRouter

from ...services.identity import SeedService


class DevHandler:
    """Demo seeding; only mounted when enabled in settings."""

    def __init__(self, seed_service: SeedService):
        self.seed_service = seed_service
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):

        @self.router.post("/seed")
        async def seed():
            await self.seed_service.seed()
            return {"seeded": True}

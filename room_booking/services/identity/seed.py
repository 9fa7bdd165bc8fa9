"""
Demo data seeding.
"""

from ...core.enums import Role
from ...utils.logging import get_logger
from ..resource import ResourceCatalog
from .service import IdentityService

DEMO_USERS = [
    ("admin@demo.no", "admin", Role.ADMIN),
    ("user@demo.no", "user", Role.USER),
]

DEMO_RESOURCES = [
    ("Meeting Room A", "4 seats, screen"),
    ("Meeting Room B", "8 seats, whiteboard"),
]

logger = get_logger("booking.seed")


class SeedService:
    """Idempotent demo seed: safe to run any number of times."""

    def __init__(self, identity: IdentityService, catalog: ResourceCatalog):
        self.identity = identity
        self.catalog = catalog

    async def seed(self) -> None:
        for email, password, role in DEMO_USERS:
            # Always reset so the demo logins keep working
            await self.identity.upsert_user(email, password, role)

        for name, description in DEMO_RESOURCES:
            if await self.catalog.find_by_name(name) is None:
                await self.catalog.add_resource(name, description)

        logger.info("demo data seeded")

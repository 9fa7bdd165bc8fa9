"""
Pytest configuration and fixtures.
"""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio

from room_booking.config import DatabaseConfig, Settings
from room_booking.services import (
    AuditLog,
    BookingService,
    Database,
    IdentityService,
    PasswordHasher,
    ResourceCatalog,
    TokenService,
)

TEST_JWT_KEY = "test-signing-key-that-is-long-enough-0123456789"

OSLO = timezone(timedelta(hours=1))


def at(hour: int, minute: int = 0, tz=timezone.utc) -> datetime:
    """A fixed day at the given time."""
    return datetime(2026, 1, 28, hour, minute, tzinfo=tz)


@pytest.fixture
def database(tmp_path):
    """Fresh SQLite database file with schema."""
    db = Database(DatabaseConfig(path=str(tmp_path / "booking.db"), timeout=10.0))
    db.create_schema()
    return db


@pytest.fixture
def catalog(database):
    return ResourceCatalog(database)


@pytest.fixture
def audit_log(database):
    return AuditLog(database)


@pytest.fixture
def booking_service(database, catalog, audit_log):
    """Booking service over the temporary database."""
    return BookingService(database, catalog, audit_log)


@pytest_asyncio.fixture
async def room(catalog):
    """An active resource."""
    return await catalog.add_resource("Meeting Room A", "4 seats, screen")


@pytest.fixture
def token_service():
    return TokenService(TEST_JWT_KEY)


@pytest.fixture
def identity(database, token_service):
    # Low bcrypt cost keeps the suite fast
    return IdentityService(database, token_service, PasswordHasher(rounds=4))


@pytest.fixture
def settings(tmp_path):
    return Settings(
        jwt_key=TEST_JWT_KEY,
        database_path=str(tmp_path / "api.db"),
        database_timeout=10.0,
        bcrypt_rounds=4,
        enable_dev_seed=True,
    )

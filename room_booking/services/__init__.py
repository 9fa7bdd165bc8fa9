"""
Service layer for the room booking service.
"""

from .storage import Database
from .audit import AuditLog
from .resource import ResourceCatalog
from .booking import BookingService
from .identity import IdentityService, PasswordHasher, SeedService, TokenService

__all__ = [
    "Database",
    "AuditLog",
    "ResourceCatalog",
    "BookingService",
    "IdentityService",
    "PasswordHasher",
    "SeedService",
    "TokenService",
]

"""
Identity collaborator: passwords, tokens, users and demo seed.
"""

from .passwords import PasswordHasher
from .tokens import TokenService
from .service import IdentityService
from .seed import SeedService

__all__ = [
    "PasswordHasher",
    "TokenService",
    "IdentityService",
    "SeedService",
]

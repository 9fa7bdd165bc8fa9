"""
Request dependencies shared by handlers.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..core.models import Caller
from ..services.identity import IdentityService

_bearer = HTTPBearer(auto_error=False)


class CallerResolver:
    """FastAPI dependency turning the Authorization header into a Caller."""

    def __init__(self, identity: IdentityService):
        self.identity = identity

    def __call__(
        self, credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer)
    ) -> Caller:
        token = credentials.credentials if credentials else None
        return self.identity.authenticate(token)

"""
Login handler.
"""

from fastapi import APIRouter

from ...core.models import LoginRequest, LoginResponse
from ...services.identity import IdentityService
from ..errors import error_response


class AuthHandler:
    """Handler for credential exchange."""

    def __init__(self, identity: IdentityService):
        self.identity = identity
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):

        @self.router.post("/login", response_model=LoginResponse)
        async def login(req: LoginRequest):
            """Exchange email and password for a bearer token."""
            result = await self.identity.login(req.email, req.password)
            if not result.ok:
                return error_response(result)
            return result.value

"""
Bearer token issuance and validation.
"""

from datetime import timedelta

import jwt

from ...core.enums import Role
from ...core.exceptions import AuthenticationError, ConfigurationError
from ...core.models import Caller, User
from ...utils.date import utc_now

MIN_KEY_BYTES = 32


class TokenService:
    """
    Signs and verifies JWTs carrying the caller triple.

    The signing key is passed in by whoever builds the service; nothing
    here reads configuration.
    """

    def __init__(self, key: str, algorithm: str = "HS256", ttl_hours: int = 8):
        if not key:
            raise ConfigurationError("JWT signing key is not configured.")
        if len(key.encode("utf-8")) < MIN_KEY_BYTES:
            raise ConfigurationError(
                f"JWT signing key must be at least {MIN_KEY_BYTES} bytes for {algorithm}."
            )
        self._key = key
        self.algorithm = algorithm
        self.ttl = timedelta(hours=ttl_hours)

    def issue(self, user: User) -> str:
        now = utc_now()
        payload = {
            "sub": user.id,
            "email": user.email,
            "role": user.role.value,
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self._key, algorithm=self.algorithm)

    def decode(self, token: str) -> Caller:
        """Validate a token and return the caller it identifies."""
        if not token:
            raise AuthenticationError("Missing bearer token.")
        try:
            payload = jwt.decode(
                token,
                self._key,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired.")
        except jwt.InvalidTokenError as e:
            raise AuthenticationError(f"Invalid token: {e}")

        email = payload.get("email")
        if not email:
            raise AuthenticationError("Token has no email claim.")

        return Caller(
            user_id=str(payload["sub"]),
            email=email,
            role=Role.from_string(payload.get("role")),
        )

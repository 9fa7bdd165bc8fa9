"""
Identity service: user accounts, login and caller resolution.
"""

import sqlite3
from typing import Optional, Union

from ...core.enums import Role
from ...core.exceptions import AuthenticationError
from ...core.models import Caller, ErrorKind, LoginResponse, ServiceResult, User
from ...utils.logging import get_logger
from ...utils.validation import ValidationUtils
from ..storage import Database
from .passwords import PasswordHasher
from .tokens import TokenService

INVALID_CREDENTIALS = "Invalid email or password."

logger = get_logger("booking.identity")


def _row_to_user(row: sqlite3.Row) -> User:
    return User(
        id=row["id"],
        email=row["email"],
        password_hash=row["password_hash"],
        role=Role.from_string(row["role"]),
    )


class IdentityService:
    """Owns users; hands the booking core a trusted Caller."""

    def __init__(self, database: Database, tokens: TokenService, hasher: Optional[PasswordHasher] = None):
        self.database = database
        self.tokens = tokens
        self.hasher = hasher or PasswordHasher()

    async def get_user_by_email(self, email: str) -> Optional[User]:
        def _fetch() -> Optional[User]:
            with self.database.reader() as conn:
                row = conn.execute("SELECT * FROM users WHERE email = ?", (email,)).fetchone()
            return _row_to_user(row) if row else None

        return await self.database.run(_fetch)

    async def upsert_user(
        self, email: str, password: str, role: Union[Role, str] = Role.USER
    ) -> User:
        """Create the user, or reset password and role if the email exists."""
        role = Role.from_string(role)
        is_valid, error = ValidationUtils.validate_email(email)
        if not is_valid:
            raise ValueError(error)

        password_hash = self.hasher.hash(password)

        def _write() -> User:
            with self.database.transaction() as conn:
                row = conn.execute("SELECT * FROM users WHERE email = ?", (email,)).fetchone()
                if row is None:
                    user = User(email=email, password_hash=password_hash, role=role)
                    conn.execute(
                        "INSERT INTO users (id, email, password_hash, role) VALUES (?, ?, ?, ?)",
                        (user.id, user.email, user.password_hash, user.role.value),
                    )
                    return user

                conn.execute(
                    "UPDATE users SET password_hash = ?, role = ? WHERE id = ?",
                    (password_hash, role.value, row["id"]),
                )
                return User(id=row["id"], email=email, password_hash=password_hash, role=role)

        return await self.database.run(_write)

    async def login(self, email: str, password: str) -> ServiceResult[LoginResponse]:
        """
        Verify credentials and issue a token.

        Unknown email and wrong password produce the same message so that
        callers cannot tell which accounts exist.
        """
        user = await self.get_user_by_email(email)
        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.warning(f"login failed for {email}")
            return ServiceResult.failure(ErrorKind.UNAUTHORIZED, INVALID_CREDENTIALS)

        token = self.tokens.issue(user)
        logger.info(f"login ok for {email}")
        return ServiceResult.success(LoginResponse(token=token, role=user.role, email=user.email))

    def authenticate(self, token: Optional[str]) -> Caller:
        """Resolve a bearer token to a Caller or raise AuthenticationError."""
        if not token:
            raise AuthenticationError("Missing bearer token.")
        return self.tokens.decode(token)

"""
Password hashing.
"""

import bcrypt

from ...utils.logging import get_logger

logger = get_logger("booking.identity")


class PasswordHasher:
    """Bcrypt password hashing utility."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a password; malformed hashes verify as False."""
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError as e:
            logger.error(f"password verification failed: {e}")
            return False

"""
Booking-related enums.
"""

from enum import Enum


class BookingStatus(str, Enum):
    """Lifecycle of a booking. Only CREATED -> CANCELLED is allowed."""

    CREATED = "Created"
    CANCELLED = "Cancelled"


class AuditAction(str, Enum):
    """Actions recorded in the audit log."""

    CREATE = "CREATE"
    CANCEL = "CANCEL"


class Role(str, Enum):
    """Caller roles."""

    USER = "User"
    ADMIN = "Admin"

    @classmethod
    def from_string(cls, value) -> "Role":
        """Convert a role claim to Role, ignoring case and whitespace."""
        if isinstance(value, cls):
            return value
        if not value:
            return cls.USER

        value = str(value).strip().casefold()
        for role in cls:
            if role.value.casefold() == value:
                return role

        # Unknown roles get no privileges
        return cls.USER

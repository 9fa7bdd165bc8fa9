"""
Enums for the room booking service.
"""

from .booking import BookingStatus, AuditAction, Role

__all__ = [
    "BookingStatus",
    "AuditAction",
    "Role",
]

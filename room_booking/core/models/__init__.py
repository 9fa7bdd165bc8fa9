"""
Core data models for the room booking service.
"""

from .booking import Booking, BookingCreateRequest, AuditEvent, new_id
from .resource import Resource
from .user import User, Caller, LoginRequest, LoginResponse
from .result import ErrorKind, ServiceResult

__all__ = [
    "Booking",
    "BookingCreateRequest",
    "AuditEvent",
    "new_id",
    "Resource",
    "User",
    "Caller",
    "LoginRequest",
    "LoginResponse",
    "ErrorKind",
    "ServiceResult",
]

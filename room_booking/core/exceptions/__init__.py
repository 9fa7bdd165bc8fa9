"""
Custom exceptions for the room booking service.
"""

from .booking import (
    BookingError,
    BookingValidationError,
    ResourceUnavailableError,
    BookingNotFoundError,
    BookingConflictError,
    BookingForbiddenError,
)
from .auth import AuthenticationError, ConfigurationError

__all__ = [
    "BookingError",
    "BookingValidationError",
    "ResourceUnavailableError",
    "BookingNotFoundError",
    "BookingConflictError",
    "BookingForbiddenError",
    "AuthenticationError",
    "ConfigurationError",
]

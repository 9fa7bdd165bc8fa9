"""
Booking-related exceptions.
"""

from ..models.result import ErrorKind


class BookingError(Exception):
    """Base exception for booking domain failures."""

    kind: ErrorKind = ErrorKind.VALIDATION_ERROR


class BookingValidationError(BookingError):
    """Exception raised when booking input is malformed."""

    kind = ErrorKind.VALIDATION_ERROR


class ResourceUnavailableError(BookingError):
    """Exception raised when a resource is absent or inactive."""

    kind = ErrorKind.RESOURCE_UNAVAILABLE


class BookingNotFoundError(BookingError):
    """Exception raised when a booking does not exist."""

    kind = ErrorKind.NOT_FOUND


class BookingConflictError(BookingError):
    """Exception raised when a booking overlaps an existing one."""

    kind = ErrorKind.CONFLICT


class BookingForbiddenError(BookingError):
    """Exception raised when the caller may not modify a booking."""

    kind = ErrorKind.FORBIDDEN

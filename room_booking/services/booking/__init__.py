"""
Booking service module.
"""

from .service import BookingService

__all__ = [
    "BookingService",
]

"""
HTTP handlers.
"""

from .health import HealthHandler
from .auth import AuthHandler
from .resources import ResourceHandler
from .bookings import BookingHandler
from .audit import AuditHandler
from .dev import DevHandler

__all__ = [
    "HealthHandler",
    "AuthHandler",
    "ResourceHandler",
    "BookingHandler",
    "AuditHandler",
    "DevHandler",
]

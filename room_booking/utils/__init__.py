"""
Utility modules for the room booking service.
"""

from .date import utc_now, is_aware, to_utc_micros, to_storage, from_storage
from .validation import ValidationUtils
from .logging import configure_logging, get_logger

__all__ = [
    "utc_now",
    "is_aware",
    "to_utc_micros",
    "to_storage",
    "from_storage",
    "ValidationUtils",
    "configure_logging",
    "get_logger",
]

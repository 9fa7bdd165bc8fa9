"""
Pure domain rules.
"""

from .overlap import overlaps
from .authorization import can_cancel, is_admin

__all__ = [
    "overlaps",
    "can_cancel",
    "is_admin",
]

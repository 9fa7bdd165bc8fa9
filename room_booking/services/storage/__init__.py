"""
Persistence layer.
"""

from .database import Database
from .schema import SCHEMA, OVERLAP_ERROR, STATUS_ERROR, AUDIT_ERROR

__all__ = [
    "Database",
    "SCHEMA",
    "OVERLAP_ERROR",
    "STATUS_ERROR",
    "AUDIT_ERROR",
]

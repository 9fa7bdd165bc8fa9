"""
Validation utilities for booking input.
"""

import re
from datetime import datetime
from typing import Optional, Tuple

from .date import is_aware

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ValidationUtils:
    """Validation utilities for various data types."""

    @staticmethod
    def validate_resource_id(resource_id: Optional[str]) -> Tuple[bool, Optional[str]]:
        """
        Validate that a resource id was supplied.

        Args:
            resource_id: Identifier of the resource to book

        Returns:
            Tuple of (is_valid, error_message)
        """
        if resource_id is None or not str(resource_id).strip():
            return False, "Resource id is required."
        return True, None

    @staticmethod
    def validate_interval(
        start: Optional[datetime], end: Optional[datetime]
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate a booking window.

        Both ends must be timezone-aware and end must be strictly after start.

        Args:
            start: Start of the window (inclusive)
            end: End of the window (exclusive)

        Returns:
            Tuple of (is_valid, error_message)
        """
        if start is None or end is None:
            return False, "Start and end are required."

        if not is_aware(start) or not is_aware(end):
            return False, "Start and end must include a timezone offset."

        if end <= start:
            return False, "End must be after start."

        return True, None

    @staticmethod
    def validate_email(email: str) -> Tuple[bool, Optional[str]]:
        """Validate email format."""
        if not email or not isinstance(email, str):
            return False, "Email is required."

        if not _EMAIL_RE.match(email.strip()):
            return False, "Email is not valid."

        return True, None

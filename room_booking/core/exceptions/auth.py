"""
Identity and configuration exceptions.
"""

from ..models.result import ErrorKind


class AuthenticationError(Exception):
    """Raised when a caller identity is missing or invalid."""

    kind = ErrorKind.UNAUTHORIZED


class ConfigurationError(Exception):
    """Raised at startup when settings are unusable."""
    pass

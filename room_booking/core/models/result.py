"""
Tagged result type returned by the service layer.
"""

from enum import Enum
from typing import Generic, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories understood by every caller of the service layer."""

    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    RESOURCE_UNAVAILABLE = "resource_unavailable"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"


class ServiceResult(BaseModel, Generic[T]):
    """Either a value or an error kind with a human-readable message."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    ok: bool
    value: Optional[T] = None
    error: Optional[ErrorKind] = Field(default=None, description="Set when ok is False")
    message: Optional[str] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "ServiceResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "ServiceResult[T]":
        return cls(ok=False, error=error, message=message)

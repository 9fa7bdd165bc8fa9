"""
Booking-related data models.
"""

import uuid
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from ..enums import AuditAction, BookingStatus
from ...utils.date import utc_now


def new_id() -> str:
    """Generate a new entity identifier."""
    return str(uuid.uuid4())


class Booking(BaseModel):
    """A reservation of one resource for a half-open time window [start, end)."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(default_factory=new_id)
    resource_id: str
    user_id: str
    start: datetime
    end: datetime
    status: BookingStatus = BookingStatus.CREATED
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def is_active(self) -> bool:
        return self.status == BookingStatus.CREATED


class BookingCreateRequest(BaseModel):
    """Input needed to create a booking."""

    model_config = ConfigDict(extra="forbid")

    resource_id: Optional[str] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None


class AuditEvent(BaseModel):
    """Immutable record of a single state-changing action."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(default_factory=new_id)
    actor_email: str
    action: AuditAction
    entity_type: str
    entity_id: str
    at: datetime = Field(default_factory=utc_now)

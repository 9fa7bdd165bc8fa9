"""
Resource data model.
"""

from pydantic import BaseModel, ConfigDict, Field

from .booking import new_id


class Resource(BaseModel):
    """Something that can be booked, e.g. a meeting room."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(default_factory=new_id)
    name: str
    description: str = ""
    is_active: bool = True

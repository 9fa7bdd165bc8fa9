"""
User-related data models.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..enums import Role
from .booking import new_id


class User(BaseModel):
    """Stored user account."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(default_factory=new_id)
    email: str
    password_hash: str
    role: Role = Role.USER


class Caller(BaseModel):
    """Authenticated identity of the current request."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    user_id: str
    email: str
    role: Role = Role.USER


class LoginRequest(BaseModel):
    """Login credentials."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """What the client needs after a successful login."""

    token: str
    role: Role
    email: str

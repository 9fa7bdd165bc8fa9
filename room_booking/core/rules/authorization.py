"""
Authorization policy for mutating bookings.
"""

from typing import Union

from ..enums import Role


def is_admin(role: Union[Role, str, None]) -> bool:
    """True if role names the Admin role, ignoring case and whitespace."""
    if role is None:
        return False
    value = role.value if isinstance(role, Role) else str(role)
    return value.strip().casefold() == Role.ADMIN.value.casefold()


def can_cancel(owner_user_id: str, caller_user_id: str, caller_role: Union[Role, str, None]) -> bool:
    """Owners may cancel their own bookings; admins may cancel any booking."""
    return owner_user_id == caller_user_id or is_admin(caller_role)

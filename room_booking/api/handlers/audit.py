"""
Audit trail handler (admins only).
"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from ...core.models import AuditEvent, Caller, ErrorKind, ServiceResult
from ...core.rules import is_admin
from ...services.audit import AuditLog
from ..dependencies import CallerResolver
from ..errors import error_response


class AuditHandler:
    """Read access to the audit log."""

    def __init__(self, audit_log: AuditLog, current_caller: CallerResolver):
        self.audit_log = audit_log
        self.current_caller = current_caller
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        current_caller = self.current_caller

        @self.router.get("", response_model=List[AuditEvent])
        async def list_events(
            entity_id: Optional[str] = None, caller: Caller = Depends(current_caller)
        ):
            if not is_admin(caller.role):
                return error_response(
                    ServiceResult.failure(ErrorKind.FORBIDDEN, "Admin role required.")
                )
            return await self.audit_log.list_events(entity_id)

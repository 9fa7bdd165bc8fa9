"""
Resource listing handler.
"""

from typing import List

from fastapi import APIRouter, Depends

from ...core.models import Caller, Resource
from ...services.resource import ResourceCatalog
from ..dependencies import CallerResolver


class ResourceHandler:
    """Read-only view of the resource catalog."""

    def __init__(self, catalog: ResourceCatalog, current_caller: CallerResolver):
        self.catalog = catalog
        self.current_caller = current_caller
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        current_caller = self.current_caller

        @self.router.get("", response_model=List[Resource])
        async def list_resources(caller: Caller = Depends(current_caller)):
            """Active resources ordered by name."""
            return await self.catalog.list_active()

"""
Booking handlers.

These only translate between HTTP and the booking service; all validation
and overlap logic lives in the service.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from ...core.models import Booking, BookingCreateRequest, Caller
from ...services.booking import BookingService
from ..dependencies import CallerResolver
from ..errors import error_response


class BookingHandler:
    """Handler for creating, listing and cancelling bookings."""

    def __init__(self, booking_service: BookingService, current_caller: CallerResolver):
        self.booking_service = booking_service
        self.current_caller = current_caller
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        current_caller = self.current_caller

        @self.router.post("", response_model=Booking, status_code=status.HTTP_201_CREATED)
        async def create_booking(
            req: BookingCreateRequest, caller: Caller = Depends(current_caller)
        ):
            result = await self.booking_service.create_booking(
                caller.user_id, caller.email, req.resource_id, req.start, req.end
            )
            if not result.ok:
                return error_response(result)
            return result.value

        @self.router.get("/me", response_model=List[Booking])
        async def my_bookings(caller: Caller = Depends(current_caller)):
            return await self.booking_service.list_bookings_for_user(caller.user_id)

        @self.router.post("/{booking_id}/cancel", response_model=Booking)
        async def cancel_booking(booking_id: str, caller: Caller = Depends(current_caller)):
            result = await self.booking_service.cancel_booking(
                booking_id, caller.user_id, caller.role, caller.email
            )
            if not result.ok:
                return error_response(result)
            return result.value

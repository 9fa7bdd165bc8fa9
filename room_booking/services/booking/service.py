"""
Booking service: create, list and cancel bookings.
"""

import sqlite3
from datetime import datetime
from typing import List, Optional, Union

from ...core.enums import AuditAction, BookingStatus, Role
from ...core.exceptions import (
    BookingConflictError,
    BookingError,
    BookingForbiddenError,
    BookingNotFoundError,
    BookingValidationError,
    ResourceUnavailableError,
)
from ...core.models import Booking, ServiceResult
from ...core.rules import can_cancel, overlaps
from ...utils.date import from_storage, to_storage, to_utc_micros
from ...utils.logging import get_logger
from ...utils.validation import ValidationUtils
from ..audit import AuditLog
from ..resource import ResourceCatalog
from ..storage import Database, OVERLAP_ERROR

ENTITY_TYPE = "Booking"

logger = get_logger("booking.service")


def _row_to_booking(row: sqlite3.Row) -> Booking:
    return Booking(
        id=row["id"],
        resource_id=row["resource_id"],
        user_id=row["user_id"],
        start=from_storage(row["starts_at"]),
        end=from_storage(row["ends_at"]),
        status=BookingStatus(row["status"]),
        created_at=from_storage(row["created_at"]),
    )


class BookingService:
    """
    Orchestrates booking validation, overlap checks, persistence and audit.

    Domain failures are raised internally as BookingError subclasses and
    converted to a ServiceResult at each public method. Storage failures
    are not caught.
    """

    def __init__(self, database: Database, catalog: ResourceCatalog, audit_log: AuditLog):
        self.database = database
        self.catalog = catalog
        self.audit_log = audit_log

    async def create_booking(
        self,
        user_id: str,
        actor_email: str,
        resource_id: Optional[str],
        start: Optional[datetime],
        end: Optional[datetime],
    ) -> ServiceResult[Booking]:
        """Create a booking if the resource is bookable and the window is free."""
        try:
            booking = await self.database.run(
                self._create, user_id, actor_email, resource_id, start, end
            )
        except BookingError as exc:
            logger.info(f"create rejected for resource={resource_id} user={user_id}: {exc.kind.value}: {exc}")
            return ServiceResult.failure(exc.kind, str(exc))

        logger.info(f"booking {booking.id} created on resource={booking.resource_id} by {actor_email}")
        return ServiceResult.success(booking)

    async def list_bookings_for_user(self, user_id: str) -> List[Booking]:
        """All bookings owned by user_id, latest start first."""

        def _fetch() -> List[Booking]:
            with self.database.reader() as conn:
                rows = conn.execute(
                    """
                    SELECT * FROM bookings
                    WHERE user_id = ?
                    ORDER BY starts_at_us DESC, id
                    """,
                    (user_id,),
                ).fetchall()
            return [_row_to_booking(row) for row in rows]

        return await self.database.run(_fetch)

    async def cancel_booking(
        self,
        booking_id: str,
        caller_user_id: str,
        caller_role: Union[Role, str, None],
        actor_email: str,
    ) -> ServiceResult[Booking]:
        """
        Cancel a booking on behalf of its owner or an admin.

        Cancelling an already cancelled booking succeeds without writing
        anything, including the audit log.
        """
        try:
            booking = await self.database.run(
                self._cancel, booking_id, caller_user_id, caller_role, actor_email
            )
        except BookingError as exc:
            logger.info(f"cancel rejected for booking={booking_id} caller={caller_user_id}: {exc.kind.value}")
            return ServiceResult.failure(exc.kind, str(exc))

        return ServiceResult.success(booking)

    def _create(
        self,
        user_id: str,
        actor_email: str,
        resource_id: Optional[str],
        start: Optional[datetime],
        end: Optional[datetime],
    ) -> Booking:
        for is_valid, error in (
            ValidationUtils.validate_resource_id(resource_id),
            ValidationUtils.validate_interval(start, end),
        ):
            if not is_valid:
                raise BookingValidationError(error)

        with self.database.transaction() as conn:
            if not self.catalog.is_bookable_in(conn, resource_id):
                raise ResourceUnavailableError("Resource does not exist or is inactive.")

            for existing in self._created_bookings(conn, resource_id):
                if overlaps(start, end, existing.start, existing.end):
                    raise BookingConflictError("The time window overlaps an existing booking.")

            booking = Booking(resource_id=resource_id, user_id=user_id, start=start, end=end)
            self._insert(conn, booking)
            self.audit_log.append(conn, actor_email, AuditAction.CREATE, ENTITY_TYPE, booking.id)

        return booking

    def _cancel(
        self,
        booking_id: str,
        caller_user_id: str,
        caller_role: Union[Role, str, None],
        actor_email: str,
    ) -> Booking:
        with self.database.transaction() as conn:
            row = conn.execute("SELECT * FROM bookings WHERE id = ?", (booking_id,)).fetchone()
            if row is None:
                raise BookingNotFoundError("Booking not found.")

            booking = _row_to_booking(row)
            if not can_cancel(booking.user_id, caller_user_id, caller_role):
                raise BookingForbiddenError("You are not allowed to cancel this booking.")

            if booking.status == BookingStatus.CANCELLED:
                return booking

            conn.execute(
                "UPDATE bookings SET status = ? WHERE id = ? AND status = ?",
                (BookingStatus.CANCELLED.value, booking.id, BookingStatus.CREATED.value),
            )
            self.audit_log.append(conn, actor_email, AuditAction.CANCEL, ENTITY_TYPE, booking.id)

        logger.info(f"booking {booking.id} cancelled by {actor_email}")
        return booking.model_copy(update={"status": BookingStatus.CANCELLED})

    @staticmethod
    def _created_bookings(conn: sqlite3.Connection, resource_id: str) -> List[Booking]:
        rows = conn.execute(
            "SELECT * FROM bookings WHERE resource_id = ? AND status = ?",
            (resource_id, BookingStatus.CREATED.value),
        ).fetchall()
        return [_row_to_booking(row) for row in rows]

    @staticmethod
    def _insert(conn: sqlite3.Connection, booking: Booking) -> None:
        try:
            conn.execute(
                """
                INSERT INTO bookings (
                    id, resource_id, user_id, starts_at, ends_at,
                    starts_at_us, ends_at_us, status, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    booking.id,
                    booking.resource_id,
                    booking.user_id,
                    to_storage(booking.start),
                    to_storage(booking.end),
                    to_utc_micros(booking.start),
                    to_utc_micros(booking.end),
                    booking.status.value,
                    to_storage(booking.created_at),
                ),
            )
        except sqlite3.IntegrityError as exc:
            if OVERLAP_ERROR in str(exc):
                raise BookingConflictError("The time window overlaps an existing booking.") from exc
            raise

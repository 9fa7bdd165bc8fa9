"""
Tests for the booking service.
"""

import asyncio
from datetime import datetime

import pytest

from room_booking.core.enums import AuditAction, BookingStatus, Role
from room_booking.core.models import ErrorKind
from room_booking.services import AuditLog, BookingService, ResourceCatalog
from tests.conftest import OSLO, at

ALICE = ("alice-id", "alice@demo.no")
BOB = ("bob-id", "bob@demo.no")
ADMIN = ("admin-id", "admin@demo.no")


async def _book(service, room, start, end, who=ALICE):
    user_id, email = who
    return await service.create_booking(user_id, email, room.id, start, end)


class TestCreateBooking:
    """Validation, availability and overlap checks."""

    @pytest.mark.asyncio
    async def test_create_success(self, booking_service, room, audit_log):
        result = await _book(booking_service, room, at(10), at(11))

        assert result.ok is True
        booking = result.value
        assert booking.resource_id == room.id
        assert booking.user_id == ALICE[0]
        assert booking.status == BookingStatus.CREATED

        events = await audit_log.list_events(booking.id)
        assert len(events) == 1
        assert events[0].action == AuditAction.CREATE
        assert events[0].entity_type == "Booking"
        assert events[0].actor_email == ALICE[1]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("start, end", [(at(11), at(10)), (at(10), at(10))])
    async def test_end_not_after_start(self, booking_service, room, start, end):
        result = await _book(booking_service, room, start, end)
        assert result.error == ErrorKind.VALIDATION_ERROR

    @pytest.mark.asyncio
    async def test_bad_interval_rejected_even_for_missing_resource(self, booking_service):
        result = await booking_service.create_booking(*ALICE, "no-such-room", at(11), at(10))
        assert result.error == ErrorKind.VALIDATION_ERROR

    @pytest.mark.asyncio
    @pytest.mark.parametrize("resource_id", [None, "", "   "])
    async def test_missing_resource_id(self, booking_service, resource_id):
        result = await booking_service.create_booking(*ALICE, resource_id, at(10), at(11))
        assert result.error == ErrorKind.VALIDATION_ERROR

    @pytest.mark.asyncio
    async def test_naive_datetimes_rejected(self, booking_service, room):
        result = await _book(
            booking_service, room, datetime(2026, 1, 28, 10), datetime(2026, 1, 28, 11)
        )
        assert result.error == ErrorKind.VALIDATION_ERROR
        assert "timezone" in result.message

    @pytest.mark.asyncio
    async def test_unknown_resource(self, booking_service, audit_log):
        result = await booking_service.create_booking(*ALICE, "no-such-room", at(10), at(11))
        assert result.error == ErrorKind.RESOURCE_UNAVAILABLE
        assert await audit_log.list_events() == []

    @pytest.mark.asyncio
    async def test_inactive_resource(self, booking_service, catalog):
        closed = await catalog.add_resource("Closed Room", is_active=False)
        result = await booking_service.create_booking(*ALICE, closed.id, at(10), at(11))
        assert result.error == ErrorKind.RESOURCE_UNAVAILABLE

    @pytest.mark.asyncio
    async def test_overlap_conflict_and_back_to_back(self, booking_service, room):
        assert (await _book(booking_service, room, at(10), at(11))).ok

        conflict = await _book(booking_service, room, at(10, 30), at(11, 30), who=BOB)
        assert conflict.ok is False
        assert conflict.error == ErrorKind.CONFLICT

        touching = await _book(booking_service, room, at(11), at(12), who=BOB)
        assert touching.ok is True

    @pytest.mark.asyncio
    async def test_overlap_detected_across_offsets(self, booking_service, room):
        assert (await _book(booking_service, room, at(10), at(11))).ok
        # 11:30+01:00 is 10:30 UTC
        result = await _book(booking_service, room, at(11, 30, OSLO), at(12, 30, OSLO), who=BOB)
        assert result.error == ErrorKind.CONFLICT

    @pytest.mark.asyncio
    async def test_other_resource_does_not_conflict(self, booking_service, room, catalog):
        other = await catalog.add_resource("Meeting Room B")
        assert (await _book(booking_service, room, at(10), at(11))).ok
        assert (await _book(booking_service, other, at(10), at(11))).ok

    @pytest.mark.asyncio
    async def test_cancelled_booking_frees_window(self, booking_service, room):
        first = await _book(booking_service, room, at(10), at(11))
        await booking_service.cancel_booking(first.value.id, ALICE[0], Role.USER, ALICE[1])

        again = await _book(booking_service, room, at(10), at(11), who=BOB)
        assert again.ok is True

    @pytest.mark.asyncio
    async def test_offset_preserved(self, booking_service, room):
        result = await _book(booking_service, room, at(10, tz=OSLO), at(11, tz=OSLO))
        [stored] = await booking_service.list_bookings_for_user(ALICE[0])
        assert stored.start == result.value.start
        assert stored.start.utcoffset() == OSLO.utcoffset(None)


class TestConcurrentCreate:
    """Two overlapping creates racing on the same resource."""

    @pytest.mark.asyncio
    async def test_exactly_one_wins(self, booking_service, room, audit_log):
        results = await asyncio.gather(
            _book(booking_service, room, at(10), at(11)),
            _book(booking_service, room, at(10, 30), at(11, 30), who=BOB),
        )

        assert sorted(r.ok for r in results) == [False, True]
        loser = next(r for r in results if not r.ok)
        assert loser.error == ErrorKind.CONFLICT
        assert len(await audit_log.list_events()) == 1

    @pytest.mark.asyncio
    async def test_separate_service_instances(self, database, room):
        # Two instances share only the database file
        services = [
            BookingService(database, ResourceCatalog(database), AuditLog(database))
            for _ in range(2)
        ]
        results = await asyncio.gather(
            *[_book(svc, room, at(10), at(11), who=(f"user-{i}", f"u{i}@demo.no"))
              for i, svc in enumerate(services * 4)]
        )

        assert sum(r.ok for r in results) == 1
        assert all(r.error == ErrorKind.CONFLICT for r in results if not r.ok)


class TestListBookingsForUser:

    @pytest.mark.asyncio
    async def test_sorted_by_start_descending(self, booking_service, room):
        for start, end in [(at(9), at(10)), (at(13), at(14)), (at(11), at(12))]:
            assert (await _book(booking_service, room, start, end)).ok

        bookings = await booking_service.list_bookings_for_user(ALICE[0])
        assert [b.start for b in bookings] == [at(13), at(11), at(9)]

    @pytest.mark.asyncio
    async def test_excludes_other_users(self, booking_service, room):
        await _book(booking_service, room, at(9), at(10))
        await _book(booking_service, room, at(10), at(11), who=BOB)

        bookings = await booking_service.list_bookings_for_user(BOB[0])
        assert len(bookings) == 1
        assert bookings[0].user_id == BOB[0]

    @pytest.mark.asyncio
    async def test_includes_cancelled(self, booking_service, room):
        created = await _book(booking_service, room, at(9), at(10))
        await booking_service.cancel_booking(created.value.id, ALICE[0], Role.USER, ALICE[1])

        [booking] = await booking_service.list_bookings_for_user(ALICE[0])
        assert booking.status == BookingStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_empty(self, booking_service):
        assert await booking_service.list_bookings_for_user("nobody") == []


class TestCancelBooking:

    @pytest.mark.asyncio
    async def test_owner_cancels(self, booking_service, room, audit_log):
        created = await _book(booking_service, room, at(10), at(11))

        result = await booking_service.cancel_booking(created.value.id, ALICE[0], "User", ALICE[1])

        assert result.ok is True
        assert result.value.status == BookingStatus.CANCELLED
        actions = [e.action for e in await audit_log.list_events(created.value.id)]
        assert actions == [AuditAction.CREATE, AuditAction.CANCEL]

    @pytest.mark.asyncio
    async def test_admin_cancels_other_users_booking(self, booking_service, room, audit_log):
        created = await _book(booking_service, room, at(10), at(11))

        result = await booking_service.cancel_booking(created.value.id, ADMIN[0], "admin", ADMIN[1])

        assert result.ok is True
        events = await audit_log.list_events(created.value.id)
        assert events[-1].actor_email == ADMIN[1]

    @pytest.mark.asyncio
    async def test_forbidden_leaves_status(self, booking_service, room, audit_log):
        created = await _book(booking_service, room, at(10), at(11))

        result = await booking_service.cancel_booking(created.value.id, BOB[0], Role.USER, BOB[1])

        assert result.error == ErrorKind.FORBIDDEN
        [booking] = await booking_service.list_bookings_for_user(ALICE[0])
        assert booking.status == BookingStatus.CREATED
        assert len(await audit_log.list_events(created.value.id)) == 1

    @pytest.mark.asyncio
    async def test_not_found(self, booking_service):
        result = await booking_service.cancel_booking("missing", ALICE[0], Role.ADMIN, ALICE[1])
        assert result.error == ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_cancel_twice_single_audit_event(self, booking_service, room, audit_log):
        created = await _book(booking_service, room, at(10), at(11))
        booking_id = created.value.id

        first = await booking_service.cancel_booking(booking_id, ALICE[0], Role.USER, ALICE[1])
        second = await booking_service.cancel_booking(booking_id, ALICE[0], Role.USER, ALICE[1])

        assert first.ok and second.ok
        assert second.value.status == BookingStatus.CANCELLED
        cancels = [e for e in await audit_log.list_events(booking_id) if e.action == AuditAction.CANCEL]
        assert len(cancels) == 1

    @pytest.mark.asyncio
    async def test_concurrent_cancels_single_audit_event(self, booking_service, room, audit_log):
        created = await _book(booking_service, room, at(10), at(11))
        booking_id = created.value.id

        results = await asyncio.gather(
            booking_service.cancel_booking(booking_id, ALICE[0], Role.USER, ALICE[1]),
            booking_service.cancel_booking(booking_id, ADMIN[0], Role.ADMIN, ADMIN[1]),
        )

        assert all(r.ok for r in results)
        cancels = [e for e in await audit_log.list_events(booking_id) if e.action == AuditAction.CANCEL]
        assert len(cancels) == 1

    @pytest.mark.asyncio
    async def test_already_cancelled_still_checks_authorization(self, booking_service, room):
        created = await _book(booking_service, room, at(10), at(11))
        await booking_service.cancel_booking(created.value.id, ALICE[0], Role.USER, ALICE[1])

        result = await booking_service.cancel_booking(created.value.id, BOB[0], Role.USER, BOB[1])
        assert result.error == ErrorKind.FORBIDDEN

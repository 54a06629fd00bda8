"""Integration tests for EventRepository.

Tests cover:
- Save and find by id (attendees populated, UTC timestamps)
- List all in creation order with attendees grouped per event
- Attach materials reference
- Delete event removes its attendees
- Count

Architecture:
- Integration tests with a REAL database (SQLite file per test)
- Each repository call runs in its own session, like separate requests
"""

from datetime import UTC, datetime, timedelta

import pytest
from uuid_extensions import uuid7

from src.domain.entities.outbox_entry import OutboxEntry
from src.domain.enums import SeatReservation
from src.domain.value_objects import OutboundMessage
from src.infrastructure.persistence.repositories import (
    AttendeeRepository,
    EventRepository,
)
from tests.conftest import make_attendee, make_event


def outbox_for(attendee) -> OutboxEntry:
    return OutboxEntry.from_message(
        uuid7(),
        OutboundMessage(
            routing_key=f"Registration-{attendee.event_id}-{attendee.id}",
            payload="{}",
        ),
        created_at=attendee.created_at,
    )


async def register(database, attendee) -> SeatReservation:
    async with database.get_session() as session:
        return await AttendeeRepository(session).reserve_seat(
            attendee, outbox_for(attendee)
        )


@pytest.mark.integration
class TestEventRepository:
    """Integration tests for EventRepository."""

    async def test_save_and_find_by_id(self, test_database):
        event = make_event(date=datetime(2026, 11, 18, 9, 0, tzinfo=UTC))
        async with test_database.get_session() as session:
            await EventRepository(session).save(event)

        async with test_database.get_session() as session:
            found = await EventRepository(session).find_by_id(event.id)

        assert found is not None
        assert found.id == event.id
        assert found.title == event.title
        assert found.date == datetime(2026, 11, 18, 9, 0, tzinfo=UTC)
        assert found.date.tzinfo is not None
        assert found.attendees == []
        assert found.materials_ref is None

    async def test_find_missing_returns_none(self, test_database):
        async with test_database.get_session() as session:
            assert await EventRepository(session).find_by_id(uuid7()) is None

    async def test_find_includes_attendees(self, test_database):
        event = make_event()
        async with test_database.get_session() as session:
            await EventRepository(session).save(event)
        attendee = make_attendee(event.id)
        await register(test_database, attendee)

        async with test_database.get_session() as session:
            found = await EventRepository(session).find_by_id(event.id)

        assert [a.id for a in found.attendees] == [attendee.id]
        assert found.attendees[0].email == "ada@example.com"

    async def test_list_all_in_creation_order(self, test_database):
        base = datetime.now(UTC)
        older = make_event(title="Older", created_at=base)
        newer = make_event(title="Newer", created_at=base + timedelta(seconds=1))
        async with test_database.get_session() as session:
            repo = EventRepository(session)
            await repo.save(newer)
            await repo.save(older)
        await register(test_database, make_attendee(newer.id))

        async with test_database.get_session() as session:
            events = await EventRepository(session).list_all()

        assert [e.title for e in events] == ["Older", "Newer"]
        assert len(events[0].attendees) == 0
        assert len(events[1].attendees) == 1

    async def test_list_all_empty(self, test_database):
        async with test_database.get_session() as session:
            assert await EventRepository(session).list_all() == []

    async def test_attach_materials_ref(self, test_database):
        event = make_event()
        async with test_database.get_session() as session:
            await EventRepository(session).save(event)

        async with test_database.get_session() as session:
            updated = await EventRepository(session).attach_materials_ref(
                event.id, "memory://events/x/agenda.pdf"
            )
        async with test_database.get_session() as session:
            found = await EventRepository(session).find_by_id(event.id)

        assert updated is True
        assert found.materials_ref == "memory://events/x/agenda.pdf"

    async def test_attach_materials_ref_missing_event(self, test_database):
        async with test_database.get_session() as session:
            assert (
                await EventRepository(session).attach_materials_ref(uuid7(), "ref")
                is False
            )

    async def test_delete_removes_attendees(self, test_database):
        event = make_event()
        async with test_database.get_session() as session:
            await EventRepository(session).save(event)
        await register(test_database, make_attendee(event.id))

        async with test_database.get_session() as session:
            deleted = await EventRepository(session).delete(event.id)
        async with test_database.get_session() as session:
            remaining = await AttendeeRepository(session).count_by_event(event.id)

        assert deleted is True
        assert remaining == 0

    async def test_count(self, test_database):
        async with test_database.get_session() as session:
            repo = EventRepository(session)
            await repo.save(make_event())
            await repo.save(make_event())

            assert await repo.count() == 2

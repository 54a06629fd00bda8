"""Integration tests for registration notifications through the outbox.

Tests cover:
- OutboxRepository: pending order, mark_dispatched, mark_failed
- Registration commits the confirmation and relays it right away
- Transport outage: registration still succeeds, entry stays pending,
  a later relay pass delivers it exactly once

Architecture:
- Real SQLite database and repositories
- In-memory transport standing in for the message broker
"""

import json
from datetime import UTC, datetime, timedelta

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.register_attendee_handler import (
    RegisterAttendeeHandler,
)
from src.application.commands.registration_commands import RegisterAttendee
from src.application.services.notification_dispatcher import NotificationDispatcher
from src.application.services.outbox_relay import OutboxRelay
from src.core.result import Success
from src.domain.entities.outbox_entry import OutboxEntry
from src.domain.enums import OutboxStatus
from src.domain.value_objects import OutboundMessage
from src.infrastructure.messaging import InMemoryTransport
from src.infrastructure.persistence.repositories import (
    AttendeeRepository,
    EventRepository,
    OutboxRepository,
)
from tests.conftest import make_attendee, make_event


async def seed_pending(database, count: int) -> list[OutboxEntry]:
    """Register ``count`` attendees, leaving their outbox entries pending."""
    event = make_event(max_attendees=count)
    async with database.get_session() as session:
        await EventRepository(session).save(event)

    base = datetime.now(UTC)
    entries = []
    for i in range(count):
        attendee = make_attendee(
            event.id,
            email=f"guest{i}@example.com",
            created_at=base + timedelta(seconds=i),
        )
        entry = OutboxEntry.from_message(
            uuid7(),
            OutboundMessage(routing_key=f"Registration-{i}", payload=str(i)),
            created_at=attendee.created_at,
        )
        async with database.get_session() as session:
            await AttendeeRepository(session).reserve_seat(attendee, entry)
        entries.append(entry)
    return entries


@pytest.mark.integration
class TestOutboxRepository:
    """Integration tests for OutboxRepository."""

    async def test_list_pending_oldest_first_with_limit(self, test_database):
        entries = await seed_pending(test_database, 3)

        async with test_database.get_session() as session:
            pending = await OutboxRepository(session).list_pending(2)

        assert [e.id for e in pending] == [entries[0].id, entries[1].id]

    async def test_mark_dispatched_removes_from_pending(self, test_database):
        entries = await seed_pending(test_database, 2)
        sent_at = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)

        async with test_database.get_session() as session:
            await OutboxRepository(session).mark_dispatched(entries[0].id, sent_at)
        async with test_database.get_session() as session:
            repo = OutboxRepository(session)
            dispatched = await repo.find_by_id(entries[0].id)
            pending = await repo.list_pending(10)

        assert dispatched.status == OutboxStatus.DISPATCHED
        assert dispatched.dispatched_at == sent_at
        assert [e.id for e in pending] == [entries[1].id]

    async def test_mark_failed_keeps_entry_pending(self, test_database):
        (entry,) = await seed_pending(test_database, 1)

        async with test_database.get_session() as session:
            repo = OutboxRepository(session)
            await repo.mark_failed(entry.id, "broker down")
            await repo.mark_failed(entry.id, "still down")
        async with test_database.get_session() as session:
            stored = await OutboxRepository(session).find_by_id(entry.id)

        assert stored.status == OutboxStatus.PENDING
        assert stored.attempts == 2
        assert stored.last_error == "still down"


@pytest.mark.integration
class TestRegistrationNotificationFlow:
    """Registration through the handler with real persistence."""

    @staticmethod
    def build_handler(session, transport, logger) -> RegisterAttendeeHandler:
        dispatcher = NotificationDispatcher(transport=transport, logger=logger)
        relay = OutboxRelay(
            outbox_repo=OutboxRepository(session),
            dispatcher=dispatcher,
            logger=logger,
        )
        return RegisterAttendeeHandler(
            event_repo=EventRepository(session),
            attendee_repo=AttendeeRepository(session),
            dispatcher=dispatcher,
            relay=relay,
            logger=logger,
        )

    async def register(self, database, transport, logger, event_id):
        async with database.get_session() as session:
            handler = self.build_handler(session, transport, logger)
            return await handler.handle(
                RegisterAttendee(
                    event_id=event_id,
                    name="Grace Hopper",
                    email="grace@example.com",
                    company="Navy",
                )
            )

    async def test_confirmation_sent_after_commit(self, test_database, mock_logger):
        event = make_event()
        async with test_database.get_session() as session:
            await EventRepository(session).save(event)
        transport = InMemoryTransport()

        result = await self.register(test_database, transport, mock_logger, event.id)

        assert isinstance(result, Success)
        attendee = result.value
        (sent,) = transport.messages
        assert sent.routing_key == f"Registration-{event.id}-{attendee.id}"
        assert json.loads(sent.payload)["attendee_email"] == "grace@example.com"
        async with test_database.get_session() as session:
            assert await OutboxRepository(session).list_pending(10) == []

    async def test_outage_leaves_entry_for_next_relay(
        self, test_database, mock_logger
    ):
        event = make_event()
        async with test_database.get_session() as session:
            await EventRepository(session).save(event)
        transport = InMemoryTransport()
        transport.available = False

        result = await self.register(test_database, transport, mock_logger, event.id)

        assert isinstance(result, Success)
        assert transport.messages == []
        async with test_database.get_session() as session:
            (pending,) = await OutboxRepository(session).list_pending(10)
        assert pending.attempts == 1

        transport.available = True
        dispatcher = NotificationDispatcher(transport=transport, logger=mock_logger)
        async with test_database.get_session() as session:
            relay = OutboxRelay(
                outbox_repo=OutboxRepository(session),
                dispatcher=dispatcher,
                logger=mock_logger,
            )
            assert await relay.relay_pending() == 1
            assert await relay.relay_pending() == 0

        assert len(transport.messages) == 1
        assert transport.messages[0].routing_key == pending.routing_key

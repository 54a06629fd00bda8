"""Unit tests for domain entities, value objects and domain events.

Tests cover:
- Event snapshot helpers (count, seats remaining, full, materials key)
- Attendee event scoping
- OutboxEntry <-> OutboundMessage mapping
- Content type derivation for materials downloads
- Reminder roster snapshot
"""

from uuid_extensions import uuid7

import pytest

from src.domain.entities.outbox_entry import OutboxEntry
from src.domain.enums import OutboxStatus
from src.domain.events import EventReminderRequested, ReminderRecipient
from src.domain.value_objects import (
    DEFAULT_CONTENT_TYPE,
    NOTIFICATION_CONTENT_TYPE,
    OutboundMessage,
    content_type_for,
)
from tests.conftest import make_attendee, make_event


@pytest.mark.unit
class TestEvent:
    """Tests for Event entity helpers."""

    def test_empty_event_has_all_seats(self):
        event = make_event(max_attendees=3)

        assert event.attendee_count == 0
        assert event.seats_remaining == 3
        assert event.is_full() is False

    def test_event_at_capacity_is_full(self):
        event = make_event(max_attendees=2)
        event.attendees = [make_attendee(event.id), make_attendee(event.id)]

        assert event.is_full() is True
        assert event.seats_remaining == 0

    def test_has_materials_follows_ref(self):
        event = make_event()
        assert event.has_materials() is False

        event.materials_ref = "memory://events/x/agenda.pdf"
        assert event.has_materials() is True

    def test_materials_key_is_event_scoped(self):
        event = make_event()

        assert event.materials_key("agenda.pdf") == f"{event.id}/agenda.pdf"


@pytest.mark.unit
class TestAttendee:
    """Tests for Attendee entity."""

    def test_belongs_to_owning_event_only(self):
        event = make_event()
        attendee = make_attendee(event.id)

        assert attendee.belongs_to(event.id) is True
        assert attendee.belongs_to(uuid7()) is False


@pytest.mark.unit
class TestOutboxEntry:
    """Tests for OutboxEntry mapping."""

    def test_from_message_starts_pending(self):
        message = OutboundMessage(routing_key="Reminder-1", payload='{"a": 1}')

        entry = OutboxEntry.from_message(uuid7(), message)

        assert entry.status == OutboxStatus.PENDING
        assert entry.attempts == 0
        assert entry.is_pending() is True
        assert entry.content_type == NOTIFICATION_CONTENT_TYPE

    def test_to_message_restores_original(self):
        message = OutboundMessage(
            routing_key="Registration-1-2",
            payload='{"type": "RegistrationConfirmation"}',
        )

        entry = OutboxEntry.from_message(uuid7(), message)

        assert entry.to_message() == message

    def test_dispatched_entry_is_not_pending(self):
        entry = OutboxEntry(
            id=uuid7(),
            routing_key="k",
            content_type=NOTIFICATION_CONTENT_TYPE,
            payload="{}",
            status=OutboxStatus.DISPATCHED,
        )

        assert entry.is_pending() is False


@pytest.mark.unit
class TestContentTypeFor:
    """Tests for materials content type derivation."""

    @pytest.mark.parametrize(
        ("file_name", "expected"),
        [
            ("agenda.pdf", "application/pdf"),
            ("Agenda.PDF", "application/pdf"),
            (
                "deck.pptx",
                "application/vnd.openxmlformats-officedocument.presentationml.presentation",
            ),
            (
                "notes.docx",
                "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            ),
            ("notes.txt", DEFAULT_CONTENT_TYPE),
            ("README", DEFAULT_CONTENT_TYPE),
        ],
    )
    def test_content_type_by_extension(self, file_name, expected):
        assert content_type_for(file_name) == expected


@pytest.mark.unit
class TestEventReminderRequested:
    """Tests for the reminder domain event."""

    def test_recipient_count_matches_roster(self):
        event = make_event()
        reminder = EventReminderRequested(
            reminder_event_id=event.id,
            event_title=event.title,
            event_date=event.date,
            attendees=(
                ReminderRecipient(id=uuid7(), email="a@example.com", name="A"),
                ReminderRecipient(id=uuid7(), email="b@example.com", name="B"),
            ),
        )

        assert reminder.recipient_count == 2

    def test_empty_roster_is_allowed(self):
        event = make_event()
        reminder = EventReminderRequested(
            reminder_event_id=event.id,
            event_title=event.title,
            event_date=event.date,
        )

        assert reminder.recipient_count == 0
        assert reminder.event_id != event.id

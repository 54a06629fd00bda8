"""Notification-producing domain events.

Two facts leave the service as messages:

- RegistrationConfirmed: an attendee was committed to an event.
- EventReminderRequested: an operator asked for a reminder broadcast.

``event_id`` on the base class identifies the domain event itself, so the
registration event's identifier is stored as ``registration_event_id``
(meaning the catalog Event the attendee joined).
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class RegistrationConfirmed(DomainEvent):
    """Attendee registration committed.

    Attributes:
        registration_event_id: Catalog Event the attendee joined.
        attendee_id: Newly created attendee.
        attendee_name: Attendee display name.
        attendee_email: Attendee email (lowercase).
    """

    registration_event_id: UUID
    attendee_id: UUID
    attendee_name: str
    attendee_email: str


@dataclass(frozen=True, kw_only=True, slots=True)
class ReminderRecipient:
    """One roster line inside a reminder."""

    id: UUID
    email: str
    name: str


@dataclass(frozen=True, kw_only=True, slots=True)
class EventReminderRequested(DomainEvent):
    """Reminder broadcast requested for an event.

    The roster is a tuple snapshot taken when the reminder was requested;
    later registrations or cancellations do not change it.

    Attributes:
        reminder_event_id: Catalog Event being reminded about.
        event_title: Event title at request time.
        event_date: Scheduled event date.
        attendees: Roster snapshot.
    """

    reminder_event_id: UUID
    event_title: str
    event_date: datetime
    attendees: tuple[ReminderRecipient, ...] = ()

    @property
    def recipient_count(self) -> int:
        """Number of attendees in the snapshot."""
        return len(self.attendees)

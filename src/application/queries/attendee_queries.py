"""Attendee queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ListAttendees:
    """List attendees of an event (empty for unknown events)."""

    event_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetAttendee:
    """Get one attendee, scoped by event."""

    event_id: UUID
    attendee_id: UUID

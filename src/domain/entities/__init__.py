"""Domain entities package."""

from src.domain.entities.attendee import Attendee
from src.domain.entities.event import Event
from src.domain.entities.outbox_entry import OutboxEntry

__all__ = ["Attendee", "Event", "OutboxEntry"]

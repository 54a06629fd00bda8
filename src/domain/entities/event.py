"""Event domain entity.

Pure business data, no framework dependencies. An Event owns its attendee
collection and carries the capacity rule every registration must respect:

    len(attendees) <= max_attendees

The rule is enforced atomically by the persistence layer at registration
time; the helpers here only describe the current snapshot.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.domain.entities.attendee import Attendee

EVENT_TITLE_MAX_LENGTH = 100
EVENT_DESCRIPTION_MAX_LENGTH = 500
EVENT_LOCATION_MAX_LENGTH = 100
MATERIALS_REF_MAX_LENGTH = 2048


@dataclass
class Event:
    """Scheduled gathering with a fixed attendee capacity.

    Business Rules:
        - max_attendees is at least 1
        - Attendee count never exceeds max_attendees after a committed registration
        - materials_ref is absent until the first successful upload
        - Only materials_ref changes after creation

    Attributes:
        id: Unique event identifier (UUIDv7), immutable.
        title: Short title (<= 100 chars).
        description: Free-text description (<= 500 chars).
        date: Scheduled date and time (timezone-aware; past dates allowed).
        location: Venue (<= 100 chars).
        max_attendees: Capacity limit.
        materials_ref: Opaque locator of the uploaded materials, if any.
        attendees: Registered attendees (owned collection).
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    title: str
    description: str
    date: datetime
    location: str
    max_attendees: int
    materials_ref: str | None = None
    attendees: list[Attendee] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def attendee_count(self) -> int:
        """Number of attendees in this snapshot."""
        return len(self.attendees)

    @property
    def seats_remaining(self) -> int:
        """Seats still free in this snapshot (never negative)."""
        return max(self.max_attendees - self.attendee_count, 0)

    def is_full(self) -> bool:
        """Check whether this snapshot has reached capacity.

        Informational only. Registration decides capacity inside the
        database transaction, not from this value.
        """
        return self.attendee_count >= self.max_attendees

    def has_materials(self) -> bool:
        """Check whether materials have been uploaded for this event."""
        return bool(self.materials_ref)

    def materials_key(self, file_name: str) -> str:
        """Build the object-store key for a materials file.

        Args:
            file_name: Validated file name (no path separators).

        Returns:
            Key of the form ``{event_id}/{file_name}``.
        """
        return f"{self.id}/{file_name}"

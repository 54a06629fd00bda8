"""Attendee domain entity.

An Attendee is one person's seat at exactly one Event. It is created by a
successful registration and destroyed by cancellation (or by cascade when
the owning Event is deleted). There is no waitlist and no intermediate state.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

# Column limits shared with persistence models and request validation
ATTENDEE_FIELD_MAX_LENGTH = 100


@dataclass
class Attendee:
    """Registered attendee of a single event.

    Attributes:
        id: Unique attendee identifier (UUIDv7).
        event_id: Owning event.
        name: Display name.
        email: Contact address, normalized to lowercase.
        company: Employer or organization.
        created_at: Registration timestamp.

    Example:
        >>> attendee = Attendee(
        ...     id=uuid7(),
        ...     event_id=event.id,
        ...     name="Ada Lovelace",
        ...     email="ada@example.com",
        ...     company="Analytical Engines",
        ... )
        >>> attendee.belongs_to(event.id)
        True
    """

    id: UUID
    event_id: UUID
    name: str
    email: str
    company: str
    created_at: datetime | None = None

    def belongs_to(self, event_id: UUID) -> bool:
        """Check whether this attendee is registered for the given event."""
        return self.event_id == event_id

"""Registration commands (CQRS write operations).

Commands that move an attendee through its lifecycle:

    nonexistent → (RegisterAttendee, capacity available) → active
    active → (CancelRegistration) → nonexistent
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class RegisterAttendee:
    """Register an attendee for an event.

    Attributes:
        event_id: Event to join.
        name: Attendee name (required, <= 100 chars).
        email: Attendee email (required, valid address, <= 100 chars).
        company: Attendee company (required, <= 100 chars).

    Example:
        >>> command = RegisterAttendee(
        ...     event_id=event_id,
        ...     name="Ada Lovelace",
        ...     email="ada@example.com",
        ...     company="Analytical Engines",
        ... )
    """

    event_id: UUID
    name: str
    email: str
    company: str


@dataclass(frozen=True, kw_only=True)
class CancelRegistration:
    """Cancel an attendee's registration.

    The attendee is looked up by both ids; an attendee of another event is
    treated as not found.
    """

    event_id: UUID
    attendee_id: UUID


@dataclass(frozen=True, kw_only=True)
class SendEventReminder:
    """Broadcast a reminder to every current attendee of an event."""

    event_id: UUID

"""Base domain event class.

Domain events record "things that happened" in the registration domain and are
named in past tense (RegistrationConfirmed, EventReminderRequested). The
Notification Dispatcher turns them into outbound messages.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for tracking and deduplication
    - occurred_at timestamp (UTC) for ordering
    - All events inherit from this base class

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class RegistrationConfirmed(DomainEvent):
    ...     event_id_ref: UUID
    ...     attendee_id: UUID
    >>>
    >>> event = RegistrationConfirmed(...)
    >>> print(event.event_id)  # Auto-generated UUID
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming
        3. Be frozen dataclasses (a published fact never changes)
        4. Carry every field a consumer needs, so no lookup happens at send time

    Attributes:
        event_id: Unique identifier for this event instance (UUID v4 by default).
        occurred_at: Timestamp when the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

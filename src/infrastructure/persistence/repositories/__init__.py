"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.attendee_repository import (
    AttendeeRepository,
)
from src.infrastructure.persistence.repositories.event_repository import (
    EventRepository,
)
from src.infrastructure.persistence.repositories.outbox_repository import (
    OutboxRepository,
)

__all__ = [
    "AttendeeRepository",
    "EventRepository",
    "OutboxRepository",
]

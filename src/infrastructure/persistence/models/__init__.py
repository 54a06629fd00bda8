"""Database models for persistence layer.

SQLAlchemy models that map to database tables. These are infrastructure
concerns and are not imported by the domain layer.

Models Organization:
    - event.py: Catalog events (mutable: materials_ref)
    - attendee.py: Registered attendees (FK to events, cascade delete)
    - notification_outbox.py: Transactional notification outbox

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here and are mapped via the repository layer.
"""

from src.infrastructure.persistence.models.attendee import Attendee
from src.infrastructure.persistence.models.event import Event
from src.infrastructure.persistence.models.notification_outbox import (
    NotificationOutbox,
)

__all__ = [
    "Attendee",
    "Event",
    "NotificationOutbox",
]

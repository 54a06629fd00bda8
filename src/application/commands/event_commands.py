"""Event catalog commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers validate and execute business logic
- Handlers return Result types
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateEvent:
    """Create a new catalog event.

    Attributes:
        title: Event title (required, <= 100 chars).
        description: Event description (required, <= 500 chars).
        date: Scheduled date/time (naive values are treated as UTC).
        location: Venue (required, <= 100 chars).
        max_attendees: Capacity (>= 1).

    Example:
        >>> command = CreateEvent(
        ...     title="Tech Conference 2025",
        ...     description="Annual technology conference",
        ...     date=datetime(2025, 6, 15, 9, 0, tzinfo=UTC),
        ...     location="Convention Center",
        ...     max_attendees=100,
        ... )
        >>> result = await handler.handle(command)
    """

    title: str
    description: str
    date: datetime
    location: str
    max_attendees: int


@dataclass(frozen=True, kw_only=True)
class UploadEventMaterials:
    """Upload (or replace) the materials file for an event.

    Attributes:
        event_id: Target event.
        file_name: Client-supplied file name (no path separators).
        content_type: MIME type supplied with the upload.
        data: Raw file contents.
    """

    event_id: UUID
    file_name: str
    content_type: str
    data: bytes

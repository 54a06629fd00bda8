"""NotFoundError builders shared by handlers."""

from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError


def event_not_found(event_id: UUID) -> NotFoundError:
    """Build the NotFoundError for a missing event."""
    return NotFoundError(
        code=ErrorCode.EVENT_NOT_FOUND,
        message=f"Event {event_id} not found",
        resource_type="Event",
        resource_id=str(event_id),
    )


def attendee_not_found(event_id: UUID, attendee_id: UUID) -> NotFoundError:
    """Build the NotFoundError for an attendee missing from an event."""
    return NotFoundError(
        code=ErrorCode.ATTENDEE_NOT_FOUND,
        message=f"Attendee {attendee_id} not found for event {event_id}",
        resource_type="Attendee",
        resource_id=str(attendee_id),
    )

"""Registration business-rule errors."""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class CapacityExceededError(DomainError):
    """Registration rejected because the event is full.

    Returned when the conditional insert affects zero rows. Nothing was
    written; the attendee count is unchanged.

    Attributes:
        code: ErrorCode.EVENT_CAPACITY_EXCEEDED.
        message: Human-readable message.
        event_id: Event that rejected the registration.
        max_attendees: Capacity limit at the time of the attempt.
    """

    event_id: str
    max_attendees: int

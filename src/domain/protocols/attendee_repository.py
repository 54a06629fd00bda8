"""AttendeeRepository protocol for registration persistence.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.attendee import Attendee
from src.domain.entities.outbox_entry import OutboxEntry
from src.domain.enums.seat_reservation import SeatReservation


class AttendeeRepository(Protocol):
    """Attendee repository protocol (port).

    Registration goes through ``reserve_seat``, which must decide capacity
    and write the attendee in a single atomic step. Implementations must
    never count attendees in application code and insert afterwards.
    """

    async def reserve_seat(
        self,
        attendee: Attendee,
        notification: OutboxEntry,
    ) -> SeatReservation:
        """Insert an attendee if the event still has capacity.

        The attendee row and its outbox entry are committed together, or
        not at all.

        Args:
            attendee: Attendee to register (id already assigned).
            notification: Pending outbox entry announcing the registration.

        Returns:
            SeatReservation.RESERVED if written.
            SeatReservation.EVENT_FULL if the event is at capacity.
            SeatReservation.EVENT_MISSING if the event no longer exists.
        """
        ...

    async def find_for_event(
        self, event_id: UUID, attendee_id: UUID
    ) -> Attendee | None:
        """Find an attendee scoped by both event and attendee id.

        Returns:
            Attendee if it exists and belongs to the event, None otherwise.
        """
        ...

    async def list_by_event(self, event_id: UUID) -> list[Attendee]:
        """List attendees of an event in registration order.

        Returns an empty list for unknown events.
        """
        ...

    async def delete_for_event(self, event_id: UUID, attendee_id: UUID) -> bool:
        """Delete an attendee scoped by both ids.

        Returns:
            True if a row was deleted, False if no matching attendee exists.
        """
        ...

    async def count_by_event(self, event_id: UUID) -> int:
        """Count attendees registered for an event."""
        ...

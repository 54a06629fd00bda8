"""GetAttendee query handler."""

from src.application.errors import (
    ApplicationError,
    attendee_not_found,
    to_application_error,
)
from src.application.queries.attendee_queries import GetAttendee
from src.core.result import Failure, Result, Success
from src.domain.entities.attendee import Attendee
from src.domain.protocols import AttendeeRepository


class GetAttendeeHandler:
    """Handler for GetAttendee query.

    The lookup is scoped by event: an attendee registered for a different
    event is reported as not found.
    """

    def __init__(self, attendee_repo: AttendeeRepository) -> None:
        self._attendee_repo = attendee_repo

    async def handle(self, query: GetAttendee) -> Result[Attendee, ApplicationError]:
        """Handle GetAttendee query.

        Returns:
            Success(Attendee) if found for the event.
            Failure(ApplicationError) otherwise.
        """
        attendee = await self._attendee_repo.find_for_event(
            query.event_id, query.attendee_id
        )
        if attendee is None:
            return Failure(
                error=to_application_error(
                    attendee_not_found(query.event_id, query.attendee_id),
                    query=True,
                )
            )
        return Success(value=attendee)

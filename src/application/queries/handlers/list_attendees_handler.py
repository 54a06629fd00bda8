"""ListAttendees query handler."""

from src.application.errors import ApplicationError
from src.application.queries.attendee_queries import ListAttendees
from src.core.result import Result, Success
from src.domain.entities.attendee import Attendee
from src.domain.protocols import AttendeeRepository


class ListAttendeesHandler:
    """Handler for ListAttendees query.

    Unknown events yield an empty list rather than an error.
    """

    def __init__(self, attendee_repo: AttendeeRepository) -> None:
        self._attendee_repo = attendee_repo

    async def handle(
        self, query: ListAttendees
    ) -> Result[list[Attendee], ApplicationError]:
        """Handle ListAttendees query."""
        return Success(value=await self._attendee_repo.list_by_event(query.event_id))

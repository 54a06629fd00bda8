"""ListEvents query handler."""

from src.application.errors import ApplicationError
from src.application.queries.event_queries import ListEvents
from src.core.result import Result, Success
from src.domain.entities.event import Event
from src.domain.protocols import EventRepository


class ListEventsHandler:
    """Handler for ListEvents query.

    Returns every event with its attendees in creation order.
    """

    def __init__(self, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    async def handle(self, query: ListEvents) -> Result[list[Event], ApplicationError]:
        """Handle ListEvents query."""
        return Success(value=await self._event_repo.list_all())

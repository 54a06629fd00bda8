"""GetEvent query handler.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[Event, ApplicationError] (explicit error handling)
- NO side effects (queries never change state)
"""

from src.application.errors import (
    ApplicationError,
    event_not_found,
    to_application_error,
)
from src.application.queries.event_queries import GetEvent
from src.core.result import Failure, Result, Success
from src.domain.entities.event import Event
from src.domain.protocols import EventRepository


class GetEventHandler:
    """Handler for GetEvent query."""

    def __init__(self, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    async def handle(self, query: GetEvent) -> Result[Event, ApplicationError]:
        """Handle GetEvent query.

        Returns:
            Success(Event) with attendees populated.
            Failure(ApplicationError) if the event does not exist.
        """
        event = await self._event_repo.find_by_id(query.event_id)
        if event is None:
            return Failure(
                error=to_application_error(event_not_found(query.event_id), query=True)
            )
        return Success(value=event)

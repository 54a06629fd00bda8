"""CreateEvent command handler.

Flow:
1. Validate title, description, location and capacity
2. Normalize the date to timezone-aware UTC when naive
3. Build the Event entity with a UUIDv7 id
4. Persist and return the Event

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- Repositories are injected via protocols
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.event_commands import CreateEvent
from src.application.errors import ApplicationError, to_application_error
from src.core.result import Failure, Result, Success
from src.domain.entities.event import Event
from src.domain.protocols import EventRepository, LoggerProtocol
from src.domain.validators import (
    validate_event_description,
    validate_event_location,
    validate_event_title,
    validate_fields,
    validate_max_attendees,
)


class CreateEventHandler:
    """Handler for CreateEvent command."""

    def __init__(self, event_repo: EventRepository, logger: LoggerProtocol) -> None:
        """Initialize handler with dependencies.

        Args:
            event_repo: Event repository for persistence.
            logger: Structured logger.
        """
        self._event_repo = event_repo
        self._logger = logger

    async def handle(self, cmd: CreateEvent) -> Result[Event, ApplicationError]:
        """Handle CreateEvent command.

        Returns:
            Success(Event) with the persisted event.
            Failure(ApplicationError) wrapping a ValidationError.
        """
        validation = validate_fields(
            [
                ("title", validate_event_title, cmd.title),
                ("description", validate_event_description, cmd.description),
                ("location", validate_event_location, cmd.location),
                ("max_attendees", validate_max_attendees, cmd.max_attendees),
            ]
        )
        if isinstance(validation, Failure):
            self._logger.info(
                "event_validation_failed",
                operation="create_event",
                field=validation.error.field,
            )
            return Failure(error=to_application_error(validation.error))

        fields = validation.value
        date = cmd.date if cmd.date.tzinfo else cmd.date.replace(tzinfo=UTC)
        now = datetime.now(UTC)
        event = Event(
            id=uuid7(),
            title=fields["title"],
            description=fields["description"],
            date=date,
            location=fields["location"],
            max_attendees=fields["max_attendees"],
            created_at=now,
            updated_at=now,
        )

        await self._event_repo.save(event)

        self._logger.info(
            "event_created",
            operation="create_event",
            event_id=str(event.id),
            max_attendees=event.max_attendees,
        )
        return Success(value=event)

"""CancelRegistration command handler.

Deletes an attendee scoped by event and attendee id. No notification is sent
on cancellation.
"""

from src.application.commands.registration_commands import CancelRegistration
from src.application.errors import (
    ApplicationError,
    attendee_not_found,
    to_application_error,
)
from src.core.result import Failure, Result, Success
from src.domain.protocols import AttendeeRepository, LoggerProtocol


class CancelRegistrationHandler:
    """Handler for CancelRegistration command."""

    def __init__(
        self, attendee_repo: AttendeeRepository, logger: LoggerProtocol
    ) -> None:
        self._attendee_repo = attendee_repo
        self._logger = logger

    async def handle(self, cmd: CancelRegistration) -> Result[None, ApplicationError]:
        """Handle registration cancellation.

        Returns:
            Success(None) if the attendee was removed.
            Failure(ApplicationError) if no attendee with both ids exists.
        """
        deleted = await self._attendee_repo.delete_for_event(
            cmd.event_id, cmd.attendee_id
        )
        if not deleted:
            self._logger.info(
                "cancellation_attendee_not_found",
                operation="cancel_registration",
                event_id=str(cmd.event_id),
                attendee_id=str(cmd.attendee_id),
            )
            return Failure(
                error=to_application_error(
                    attendee_not_found(cmd.event_id, cmd.attendee_id)
                )
            )

        self._logger.info(
            "registration_cancelled",
            operation="cancel_registration",
            event_id=str(cmd.event_id),
            attendee_id=str(cmd.attendee_id),
        )
        return Success(value=None)

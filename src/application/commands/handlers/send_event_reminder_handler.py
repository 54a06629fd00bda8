"""SendEventReminder command handler.

Flow:
1. Load the Event with its attendees (NotFoundError if missing)
2. Snapshot the roster into an EventReminderRequested domain event
3. Publish it once through the NotificationDispatcher
4. Return the number of attendees in the snapshot (0 is valid)

Nothing is persisted, so a transport failure is returned to the caller as a
DispatchError instead of being queued in the outbox.
"""

from src.application.commands.registration_commands import SendEventReminder
from src.application.errors import (
    ApplicationError,
    event_not_found,
    to_application_error,
)
from src.application.services.notification_dispatcher import NotificationDispatcher
from src.core.result import Failure, Result, Success
from src.domain.events import EventReminderRequested, ReminderRecipient
from src.domain.protocols import EventRepository, LoggerProtocol


class SendEventReminderHandler:
    """Handler for SendEventReminder command."""

    def __init__(
        self,
        event_repo: EventRepository,
        dispatcher: NotificationDispatcher,
        logger: LoggerProtocol,
    ) -> None:
        self._event_repo = event_repo
        self._dispatcher = dispatcher
        self._logger = logger

    async def handle(self, cmd: SendEventReminder) -> Result[int, ApplicationError]:
        """Handle reminder broadcast.

        Returns:
            Success(recipient_count) once the transport accepted the message.
            Failure(ApplicationError) for a missing event or transport failure.
        """
        log = self._logger.bind(
            operation="send_event_reminder", event_id=str(cmd.event_id)
        )

        event = await self._event_repo.find_by_id(cmd.event_id)
        if event is None:
            log.info("reminder_event_not_found")
            return Failure(error=to_application_error(event_not_found(cmd.event_id)))

        reminder = EventReminderRequested(
            reminder_event_id=event.id,
            event_title=event.title,
            event_date=event.date,
            attendees=tuple(
                ReminderRecipient(id=a.id, email=a.email, name=a.name)
                for a in event.attendees
            ),
        )

        result = await self._dispatcher.publish(reminder)
        if isinstance(result, Failure):
            log.error("reminder_dispatch_failed", error_message=result.error.message)
            return Failure(error=to_application_error(result.error))

        log.info("reminder_sent", recipients=reminder.recipient_count)
        return Success(value=reminder.recipient_count)

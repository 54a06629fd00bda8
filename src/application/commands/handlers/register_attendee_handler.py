"""RegisterAttendee command handler (Registration Engine).

Flow:
1. Validate name, email and company
2. Load the Event (NotFoundError if missing)
3. Build the Attendee and its RegistrationConfirmed outbox entry
4. Reserve the seat: one transaction that locks the event row, inserts the
   attendee only while count < max_attendees, and writes the outbox entry
5. After commit, relay the outbox entry (failure leaves it pending)
6. Return the Attendee

On failure:
- Return Failure(ApplicationError) wrapping ValidationError, NotFoundError or
  CapacityExceededError. Nothing is written in any failure case.

A transport outage after step 4 never fails the request: the registration is
already committed and the outbox entry waits for the next relay pass.
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.registration_commands import RegisterAttendee
from src.application.errors import (
    ApplicationError,
    event_not_found,
    to_application_error,
)
from src.application.services.notification_dispatcher import NotificationDispatcher
from src.application.services.outbox_relay import OutboxRelay
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.attendee import Attendee
from src.domain.entities.outbox_entry import OutboxEntry
from src.domain.enums.seat_reservation import SeatReservation
from src.domain.errors import CapacityExceededError
from src.domain.events import RegistrationConfirmed
from src.domain.protocols import AttendeeRepository, EventRepository, LoggerProtocol
from src.domain.validators import (
    validate_attendee_text,
    validate_email,
    validate_fields,
)


class RegisterAttendeeHandler:
    """Handler for RegisterAttendee command.

    Follows hexagonal architecture:
    - Application layer (this handler)
    - Domain layer (entities, events, protocols)
    - Infrastructure layer (repositories, transport via dependency injection)
    """

    def __init__(
        self,
        event_repo: EventRepository,
        attendee_repo: AttendeeRepository,
        dispatcher: NotificationDispatcher,
        relay: OutboxRelay,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            event_repo: Event repository (existence check).
            attendee_repo: Attendee repository (atomic seat reservation).
            dispatcher: Builds the confirmation message.
            relay: Sends the outbox entry after commit.
            logger: Structured logger.
        """
        self._event_repo = event_repo
        self._attendee_repo = attendee_repo
        self._dispatcher = dispatcher
        self._relay = relay
        self._logger = logger

    async def handle(self, cmd: RegisterAttendee) -> Result[Attendee, ApplicationError]:
        """Handle attendee registration.

        Returns:
            Success(Attendee) on committed registration.
            Failure(ApplicationError) on validation, missing event or full event.
        """
        log = self._logger.bind(
            operation="register_attendee", event_id=str(cmd.event_id)
        )

        # Step 1: Validate input
        validation = validate_fields(
            [
                ("name", validate_attendee_text, cmd.name),
                ("email", validate_email, cmd.email),
                ("company", validate_attendee_text, cmd.company),
            ]
        )
        if isinstance(validation, Failure):
            log.info("attendee_validation_failed", field=validation.error.field)
            return Failure(error=to_application_error(validation.error))
        fields = validation.value

        # Step 2: Event must exist
        event = await self._event_repo.find_by_id(cmd.event_id)
        if event is None:
            log.info("registration_event_not_found")
            return Failure(error=to_application_error(event_not_found(cmd.event_id)))

        # Step 3: Attendee plus its confirmation, written together
        attendee = Attendee(
            id=uuid7(),
            event_id=event.id,
            name=fields["name"],
            email=fields["email"],
            company=fields["company"],
            created_at=datetime.now(UTC),
        )
        message = self._dispatcher.build_message(
            RegistrationConfirmed(
                registration_event_id=event.id,
                attendee_id=attendee.id,
                attendee_name=attendee.name,
                attendee_email=attendee.email,
            )
        )
        outbox_entry = OutboxEntry.from_message(
            uuid7(), message, created_at=attendee.created_at
        )

        # Step 4: Capacity decided atomically by the repository
        outcome = await self._attendee_repo.reserve_seat(attendee, outbox_entry)
        match outcome:
            case SeatReservation.EVENT_FULL:
                log.info(
                    "registration_rejected_event_full",
                    max_attendees=event.max_attendees,
                )
                return Failure(
                    error=to_application_error(
                        CapacityExceededError(
                            code=ErrorCode.EVENT_CAPACITY_EXCEEDED,
                            message=(
                                f"Event {event.id} has reached maximum capacity "
                                f"of {event.max_attendees} attendees"
                            ),
                            event_id=str(event.id),
                            max_attendees=event.max_attendees,
                        )
                    )
                )
            case SeatReservation.EVENT_MISSING:
                log.info("registration_event_not_found")
                return Failure(error=to_application_error(event_not_found(event.id)))

        log.info("attendee_registered", attendee_id=str(attendee.id))

        # Step 5: Committed; delivery problems are logged, never returned
        try:
            await self._relay.relay_entry(outbox_entry.id)
        except Exception as e:
            log.error(
                "registration_notification_relay_failed",
                error=e,
                attendee_id=str(attendee.id),
                outbox_entry_id=str(outbox_entry.id),
            )

        return Success(value=attendee)

"""Notification Dispatcher.

Converts notification-producing domain events into outbound messages and
hands them to the message transport.

Message formats (JSON, content type ``application/json``):

    RegistrationConfirmed → routing key ``Registration-{event_id}-{attendee_id}``
        {"type": "RegistrationConfirmation", "event_id", "attendee_id",
         "attendee_name", "attendee_email", "timestamp"}

    EventReminderRequested → routing key ``Reminder-{event_id}``
        {"type": "EventReminder", "event_id", "event_title", "event_date",
         "attendees": [{"id", "email", "name"}], "timestamp"}

``timestamp`` is the UTC time the message was built.

Architecture:
    - Application service, app-scoped singleton
    - Depends only on MessageTransportProtocol (structural typing)
    - Never retries; the outbox relay owns redelivery
"""

import json
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import DispatchError
from src.domain.events import (
    DomainEvent,
    EventReminderRequested,
    RegistrationConfirmed,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.message_transport_protocol import MessageTransportProtocol
from src.domain.value_objects.outbound_message import (
    NOTIFICATION_CONTENT_TYPE,
    OutboundMessage,
)

REGISTRATION_MESSAGE_TYPE = "RegistrationConfirmation"
REMINDER_MESSAGE_TYPE = "EventReminder"


def _utc_now() -> datetime:
    return datetime.now(UTC)


class NotificationDispatcher:
    """Build and send notification messages.

    Attributes:
        _transport: Message transport adapter.
        _logger: Structured logger.
        _clock: Source of message generation timestamps.

    Example:
        >>> dispatcher = NotificationDispatcher(transport=transport, logger=logger)
        >>> message = dispatcher.build_message(registration_confirmed)
        >>> result = await dispatcher.send(message)
    """

    def __init__(
        self,
        transport: MessageTransportProtocol,
        logger: LoggerProtocol,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize dispatcher.

        Args:
            transport: Message transport implementing MessageTransportProtocol.
            logger: Logger for dispatch outcomes.
            clock: Returns the current UTC time (override in tests).
        """
        self._transport = transport
        self._logger = logger
        self._clock = clock

    def build_message(self, event: DomainEvent) -> OutboundMessage:
        """Serialize a domain event into an outbound message.

        Args:
            event: RegistrationConfirmed or EventReminderRequested.

        Returns:
            OutboundMessage with routing key, JSON payload and content type.

        Raises:
            TypeError: If the event type has no message format.
        """
        timestamp = self._clock().isoformat()
        body: dict[str, Any]
        match event:
            case RegistrationConfirmed():
                routing_key = (
                    f"Registration-{event.registration_event_id}-{event.attendee_id}"
                )
                body = {
                    "type": REGISTRATION_MESSAGE_TYPE,
                    "event_id": str(event.registration_event_id),
                    "attendee_id": str(event.attendee_id),
                    "attendee_name": event.attendee_name,
                    "attendee_email": event.attendee_email,
                    "timestamp": timestamp,
                }
            case EventReminderRequested():
                routing_key = f"Reminder-{event.reminder_event_id}"
                body = {
                    "type": REMINDER_MESSAGE_TYPE,
                    "event_id": str(event.reminder_event_id),
                    "event_title": event.event_title,
                    "event_date": event.event_date.isoformat(),
                    "attendees": [
                        {"id": str(a.id), "email": a.email, "name": a.name}
                        for a in event.attendees
                    ],
                    "timestamp": timestamp,
                }
            case _:
                raise TypeError(
                    f"No notification format for {type(event).__name__}"
                )

        return OutboundMessage(
            routing_key=routing_key,
            content_type=NOTIFICATION_CONTENT_TYPE,
            payload=json.dumps(body),
        )

    async def send(self, message: OutboundMessage) -> Result[str, DispatchError]:
        """Submit a message and wait for the transport to accept it.

        Args:
            message: Message to send.

        Returns:
            Success(ack) with the transport's acknowledgement id.
            Failure(DispatchError) if the transport rejected or failed.
        """
        try:
            result = await self._transport.send(
                message.routing_key, message.content_type, message.payload
            )
        except Exception as e:
            # Adapters normally return Failure; a raise is reported the same way
            self._logger.error(
                "notification_send_crashed",
                error=e,
                routing_key=message.routing_key,
            )
            return Failure(
                error=DispatchError(
                    code=ErrorCode.DISPATCH_FAILED,
                    message=f"Transport error: {e}",
                    routing_key=message.routing_key,
                )
            )

        match result:
            case Success(value=ack):
                self._logger.info(
                    "notification_dispatched",
                    routing_key=message.routing_key,
                    ack=ack,
                )
            case Failure(error=error):
                self._logger.warning(
                    "notification_dispatch_failed",
                    routing_key=message.routing_key,
                    error_code=error.code.value,
                    error_message=error.message,
                )
        return result

    async def publish(self, event: DomainEvent) -> Result[str, DispatchError]:
        """Build and send the message for a domain event."""
        return await self.send(self.build_message(event))

"""Registration handler factories (request-scoped).

Handlers that touch attendees or send notifications. The registration
handler and its outbox relay share the request session, so the attendee row
and its outbox entry are written in the same transaction.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.infrastructure import (
    get_db_session,
    get_logger,
    get_notification_dispatcher,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.cancel_registration_handler import (
        CancelRegistrationHandler,
    )
    from src.application.commands.handlers.register_attendee_handler import (
        RegisterAttendeeHandler,
    )
    from src.application.commands.handlers.relay_notifications_handler import (
        RelayPendingNotificationsHandler,
    )
    from src.application.commands.handlers.send_event_reminder_handler import (
        SendEventReminderHandler,
    )
    from src.application.queries.handlers.get_attendee_handler import (
        GetAttendeeHandler,
    )
    from src.application.queries.handlers.list_attendees_handler import (
        ListAttendeesHandler,
    )
    from src.application.services.outbox_relay import OutboxRelay


def _build_outbox_relay(session: AsyncSession) -> "OutboxRelay":
    from src.application.services.outbox_relay import OutboxRelay
    from src.infrastructure.persistence.repositories import OutboxRepository

    return OutboxRelay(
        outbox_repo=OutboxRepository(session=session),
        dispatcher=get_notification_dispatcher(),
        logger=get_logger(),
        batch_size=settings.outbox_relay_batch_size,
    )


async def get_register_attendee_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RegisterAttendeeHandler":
    """Get RegisterAttendee command handler (request-scoped).

    Creates handler with:
    - EventRepository, AttendeeRepository (request-scoped)
    - NotificationDispatcher (app-scoped) for message building
    - OutboxRelay (request-scoped) for post-commit delivery
    """
    from src.application.commands.handlers.register_attendee_handler import (
        RegisterAttendeeHandler,
    )
    from src.infrastructure.persistence.repositories import (
        AttendeeRepository,
        EventRepository,
    )

    return RegisterAttendeeHandler(
        event_repo=EventRepository(session=session),
        attendee_repo=AttendeeRepository(session=session),
        dispatcher=get_notification_dispatcher(),
        relay=_build_outbox_relay(session),
        logger=get_logger(),
    )


async def get_cancel_registration_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CancelRegistrationHandler":
    """Get CancelRegistration command handler (request-scoped)."""
    from src.application.commands.handlers.cancel_registration_handler import (
        CancelRegistrationHandler,
    )
    from src.infrastructure.persistence.repositories import AttendeeRepository

    return CancelRegistrationHandler(
        attendee_repo=AttendeeRepository(session=session),
        logger=get_logger(),
    )


async def get_send_event_reminder_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "SendEventReminderHandler":
    """Get SendEventReminder command handler (request-scoped)."""
    from src.application.commands.handlers.send_event_reminder_handler import (
        SendEventReminderHandler,
    )
    from src.infrastructure.persistence.repositories import EventRepository

    return SendEventReminderHandler(
        event_repo=EventRepository(session=session),
        dispatcher=get_notification_dispatcher(),
        logger=get_logger(),
    )


async def get_list_attendees_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListAttendeesHandler":
    """Get ListAttendees query handler (request-scoped)."""
    from src.application.queries.handlers.list_attendees_handler import (
        ListAttendeesHandler,
    )
    from src.infrastructure.persistence.repositories import AttendeeRepository

    return ListAttendeesHandler(attendee_repo=AttendeeRepository(session=session))


async def get_get_attendee_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetAttendeeHandler":
    """Get GetAttendee query handler (request-scoped)."""
    from src.application.queries.handlers.get_attendee_handler import (
        GetAttendeeHandler,
    )
    from src.infrastructure.persistence.repositories import AttendeeRepository

    return GetAttendeeHandler(attendee_repo=AttendeeRepository(session=session))


async def get_relay_notifications_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RelayPendingNotificationsHandler":
    """Get RelayPendingNotifications command handler (request-scoped)."""
    from src.application.commands.handlers.relay_notifications_handler import (
        RelayPendingNotificationsHandler,
    )

    return RelayPendingNotificationsHandler(relay=_build_outbox_relay(session))

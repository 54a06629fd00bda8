"""Domain events module.

Usage:
    >>> from src.domain.events import RegistrationConfirmed
    >>>
    >>> event = RegistrationConfirmed(
    ...     registration_event_id=event.id,
    ...     attendee_id=attendee.id,
    ...     attendee_name=attendee.name,
    ...     attendee_email=attendee.email,
    ... )
    >>> await dispatcher.publish(event)
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.notification_events import (
    EventReminderRequested,
    RegistrationConfirmed,
    ReminderRecipient,
)

__all__ = [
    "DomainEvent",
    "EventReminderRequested",
    "RegistrationConfirmed",
    "ReminderRecipient",
]

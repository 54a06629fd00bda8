"""Outbound notification message value object."""

from dataclasses import dataclass

NOTIFICATION_CONTENT_TYPE = "application/json"


@dataclass(frozen=True, kw_only=True)
class OutboundMessage:
    """Serialized notification ready for the message transport.

    Attributes:
        routing_key: Message subject, e.g. ``Registration-{event_id}-{attendee_id}``.
        content_type: MIME type of the payload (always JSON today).
        payload: Serialized JSON body.

    Example:
        >>> message = OutboundMessage(
        ...     routing_key=f"Reminder-{event_id}",
        ...     payload='{"type": "EventReminder", ...}',
        ... )
    """

    routing_key: str
    payload: str
    content_type: str = NOTIFICATION_CONTENT_TYPE

"""Notification outbox entry entity.

An outbox entry is a serialized notification stored in the same transaction
as the state change it describes. It survives a transport outage and is
moved onto the transport by the relay.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums.outbox_status import OutboxStatus
from src.domain.value_objects.outbound_message import OutboundMessage

OUTBOX_ROUTING_KEY_MAX_LENGTH = 200


@dataclass
class OutboxEntry:
    """Pending or dispatched notification.

    Attributes:
        id: Entry identifier (UUIDv7, so ids sort by creation).
        routing_key: Message subject.
        content_type: Payload MIME type.
        payload: Serialized JSON body.
        status: PENDING until the transport acknowledges it.
        attempts: Failed send attempts so far.
        last_error: Message of the most recent failure.
        dispatched_at: When the transport acknowledged the message.
        created_at: When the entry was written.
    """

    id: UUID
    routing_key: str
    content_type: str
    payload: str
    status: OutboxStatus = OutboxStatus.PENDING
    attempts: int = 0
    last_error: str | None = None
    dispatched_at: datetime | None = None
    created_at: datetime | None = None

    @classmethod
    def from_message(
        cls,
        entry_id: UUID,
        message: OutboundMessage,
        created_at: datetime | None = None,
    ) -> "OutboxEntry":
        """Create a pending entry for an outbound message."""
        return cls(
            id=entry_id,
            routing_key=message.routing_key,
            content_type=message.content_type,
            payload=message.payload,
            created_at=created_at,
        )

    def to_message(self) -> OutboundMessage:
        """Rebuild the outbound message stored in this entry."""
        return OutboundMessage(
            routing_key=self.routing_key,
            content_type=self.content_type,
            payload=self.payload,
        )

    def is_pending(self) -> bool:
        """Check whether this entry still needs to be sent."""
        return self.status == OutboxStatus.PENDING

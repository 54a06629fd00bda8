"""Notification outbox database model.

Rows are written in the same transaction as the registration they announce
and moved to DISPATCHED by the outbox relay.
"""

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.entities.outbox_entry import OUTBOX_ROUTING_KEY_MAX_LENGTH
from src.domain.enums.outbox_status import OutboxStatus
from src.infrastructure.persistence.base import BaseModel


class NotificationOutbox(BaseModel):
    """Notification outbox model.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: When the entry was written (from BaseModel)
        routing_key: Message subject
        content_type: Payload MIME type
        payload: Serialized JSON body
        status: pending | dispatched
        attempts: Failed send attempts
        last_error: Most recent failure message
        dispatched_at: Transport acknowledgement time

    Indexes:
        - ix_notification_outbox_status_created_at: Pending scan, oldest first
    """

    __tablename__ = "notification_outbox"
    __table_args__ = (
        Index("ix_notification_outbox_status_created_at", "status", "created_at"),
    )

    routing_key: Mapped[str] = mapped_column(
        String(OUTBOX_ROUTING_KEY_MAX_LENGTH),
        nullable=False,
        comment="Message routing key",
    )

    content_type: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Payload MIME type",
    )

    payload: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Serialized message body",
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=OutboxStatus.PENDING.value,
        comment="pending or dispatched",
    )

    attempts: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Failed send attempts",
    )

    last_error: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Most recent send failure",
    )

    dispatched_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Transport acknowledgement time",
    )

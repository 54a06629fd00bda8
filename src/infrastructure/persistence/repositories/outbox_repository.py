"""OutboxRepository - SQLAlchemy implementation of OutboxRepository protocol.

Adapter for hexagonal architecture.
Maps between domain OutboxEntry entities and the notification_outbox table.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.outbox_entry import OutboxEntry
from src.domain.enums.outbox_status import OutboxStatus
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.notification_outbox import (
    NotificationOutbox,
)


def outbox_entry_to_model(entry: OutboxEntry) -> NotificationOutbox:
    """Convert domain entity to database model."""
    model = NotificationOutbox(
        id=entry.id,
        routing_key=entry.routing_key,
        content_type=entry.content_type,
        payload=entry.payload,
        status=entry.status.value,
        attempts=entry.attempts,
        last_error=entry.last_error,
        dispatched_at=entry.dispatched_at,
    )
    if entry.created_at is not None:
        model.created_at = entry.created_at
    return model


def outbox_entry_to_domain(model: NotificationOutbox) -> OutboxEntry:
    """Convert database model to domain entity."""
    return OutboxEntry(
        id=model.id,
        routing_key=model.routing_key,
        content_type=model.content_type,
        payload=model.payload,
        status=OutboxStatus(model.status),
        attempts=model.attempts,
        last_error=model.last_error,
        dispatched_at=ensure_utc(model.dispatched_at) if model.dispatched_at else None,
        created_at=ensure_utc(model.created_at),
    )


class OutboxRepository:
    """SQLAlchemy implementation of OutboxRepository protocol.

    Entries are inserted by AttendeeRepository.reserve_seat (same
    transaction as the attendee); this repository reads and updates them.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, entry_id: UUID) -> OutboxEntry | None:
        """Find outbox entry by ID."""
        result = await self.session.execute(
            select(NotificationOutbox).where(NotificationOutbox.id == entry_id)
        )
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return outbox_entry_to_domain(model)

    async def list_pending(self, limit: int) -> list[OutboxEntry]:
        """List pending entries, oldest first."""
        result = await self.session.execute(
            select(NotificationOutbox)
            .where(NotificationOutbox.status == OutboxStatus.PENDING.value)
            .order_by(NotificationOutbox.created_at, NotificationOutbox.id)
            .limit(limit)
        )
        return [outbox_entry_to_domain(m) for m in result.scalars()]

    async def mark_dispatched(self, entry_id: UUID, dispatched_at: datetime) -> None:
        """Mark an entry as acknowledged by the transport."""
        await self.session.execute(
            update(NotificationOutbox)
            .where(NotificationOutbox.id == entry_id)
            .values(
                status=OutboxStatus.DISPATCHED.value,
                dispatched_at=dispatched_at,
                last_error=None,
            )
        )
        await self.session.commit()

    async def mark_failed(self, entry_id: UUID, error: str) -> None:
        """Record a failed send; the entry stays pending."""
        await self.session.execute(
            update(NotificationOutbox)
            .where(NotificationOutbox.id == entry_id)
            .values(
                attempts=NotificationOutbox.attempts + 1,
                last_error=error,
            )
        )
        await self.session.commit()

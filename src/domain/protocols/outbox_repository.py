"""OutboxRepository protocol for the notification outbox.

Port (interface) for hexagonal architecture.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities.outbox_entry import OutboxEntry


class OutboxRepository(Protocol):
    """Notification outbox repository protocol (port)."""

    async def find_by_id(self, entry_id: UUID) -> OutboxEntry | None:
        """Find an outbox entry by ID."""
        ...

    async def list_pending(self, limit: int) -> list[OutboxEntry]:
        """List pending entries, oldest first.

        Args:
            limit: Maximum number of entries to return.
        """
        ...

    async def mark_dispatched(self, entry_id: UUID, dispatched_at: datetime) -> None:
        """Mark an entry as acknowledged by the transport."""
        ...

    async def mark_failed(self, entry_id: UUID, error: str) -> None:
        """Record a failed send (increments attempts, keeps entry pending)."""
        ...

"""Notification outbox entry states.

State Machine:
    PENDING → DISPATCHED

    - PENDING: Written with the state change, not yet accepted by the transport
    - DISPATCHED: Transport acknowledged the message (terminal)

A failed send leaves the entry PENDING with an incremented attempt counter,
so the next relay pass picks it up again.

Usage:
    from src.domain.enums import OutboxStatus

    if entry.status == OutboxStatus.PENDING:
        await relay.relay_entry(entry.id)
"""

from enum import Enum


class OutboxStatus(str, Enum):
    """Notification outbox entry states.

    String Enum:
        Inherits from str for easy serialization and database storage.
    """

    PENDING = "pending"
    DISPATCHED = "dispatched"

"""Domain enums for business logic.

Available Enums:
    - OutboxStatus: Notification outbox lifecycle (pending, dispatched)
    - SeatReservation: Outcome of an atomic capacity-checked insert
"""

from src.domain.enums.outbox_status import OutboxStatus
from src.domain.enums.seat_reservation import SeatReservation

__all__ = ["OutboxStatus", "SeatReservation"]

"""Outcome of an atomic seat reservation.

The persistence layer reports which branch the conditional insert took so the
registration handler can translate it into the right domain error.
"""

from enum import Enum


class SeatReservation(str, Enum):
    """Result of trying to insert an attendee under the capacity rule.

    RESERVED: Attendee row (and its outbox entry) written.
    EVENT_FULL: Capacity reached; nothing written.
    EVENT_MISSING: Event row vanished before the lock was taken.
    """

    RESERVED = "reserved"
    EVENT_FULL = "event_full"
    EVENT_MISSING = "event_missing"

"""Notification outbox commands."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class RelayPendingNotifications:
    """Send pending outbox entries to the message transport.

    Attributes:
        limit: Maximum entries to send in this pass (None uses the configured
            batch size).
    """

    limit: int | None = None

"""Application services."""

from src.application.services.notification_dispatcher import NotificationDispatcher
from src.application.services.outbox_relay import OutboxRelay

__all__ = ["NotificationDispatcher", "OutboxRelay"]

"""Notification dispatch error types."""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class DispatchError(DomainError):
    """Message transport did not accept a notification.

    Attributes:
        code: ErrorCode.DISPATCH_FAILED.
        message: Human-readable message.
        routing_key: Routing key of the rejected message.
    """

    routing_key: str | None = None

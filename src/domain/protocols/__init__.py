"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import EventRepository, ObjectStorageProtocol
"""

# Service protocols
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.message_transport_protocol import MessageTransportProtocol
from src.domain.protocols.object_storage_protocol import ObjectStorageProtocol
from src.domain.protocols.secrets_protocol import SecretsProtocol

# Repository protocols
from src.domain.protocols.attendee_repository import AttendeeRepository
from src.domain.protocols.event_repository import EventRepository
from src.domain.protocols.outbox_repository import OutboxRepository

__all__ = [
    # Service protocols
    "LoggerProtocol",
    "MessageTransportProtocol",
    "ObjectStorageProtocol",
    "SecretsProtocol",
    # Repository protocols
    "AttendeeRepository",
    "EventRepository",
    "OutboxRepository",
]
